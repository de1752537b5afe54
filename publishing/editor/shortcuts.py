"""Keyboard shortcuts for the markdown editor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    alt: bool = False

    @property
    def command_modifier(self) -> bool:
        """Ctrl on Windows/Linux, Cmd on macOS."""
        return self.ctrl or self.meta


# (key, shift) -> editor action; every binding requires Ctrl/Cmd
SHORTCUTS: dict[tuple[str, bool], str] = {
    ("b", False): "bold",
    ("i", False): "italic",
    ("k", False): "link",
    ("z", False): "undo",
    ("z", True): "redo",
    ("y", False): "redo",
}


def resolve_shortcut(event: KeyEvent) -> str | None:
    """Return the action bound to ``event``, or None."""
    if not event.command_modifier or event.alt:
        return None
    return SHORTCUTS.get((event.key.lower(), event.shift))
