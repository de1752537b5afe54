"""
Markdown editor model.

Holds the text surface, the undo/redo history and the write/preview mode.
It works against any ``TextEditSurface`` and calls ``on_change`` on every
edit so the form that owns the draft always has the current source. It
never persists anything itself.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .commands import PREFIX, TOGGLE, WRAP, get_command
from .history import DEFAULT_HISTORY_LIMIT, EditHistory, HistoryEntry
from .shortcuts import KeyEvent, resolve_shortcut
from .surface import TextBuffer, TextEditSurface, clamp

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    WRITE = "write"
    PREVIEW = "preview"


def _line_start(value: str, position: int) -> int:
    return value.rfind("\n", 0, position) + 1


def _default_renderer(source: str) -> str:
    from publishing.markdown.renderer import render_markdown

    return render_markdown(source)


class MarkdownEditor:
    def __init__(
        self,
        value: str = "",
        on_change: Callable[[str], None] | None = None,
        placeholder: str = "",
        surface: TextEditSurface | None = None,
        renderer: Callable[[str], str] | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self.surface = surface if surface is not None else TextBuffer(value or "")
        self.on_change = on_change
        self.placeholder = placeholder
        self.mode = RenderMode.WRITE
        self.mounted = False
        self._renderer = renderer or _default_renderer
        self._last_value = self.surface.get_value()
        self.history = EditHistory(
            self._last_value, cursor=self._selection()[1], limit=history_limit
        )

    # -- surface access -----------------------------------------------------

    @property
    def value(self) -> str:
        return self.surface.get_value()

    @property
    def selection(self) -> tuple[int, int]:
        return self._selection()

    def _selection(self) -> tuple[int, int]:
        value = self.surface.get_value()
        start, end = self.surface.get_selection()
        start, end = clamp(start, len(value)), clamp(end, len(value))
        return (start, end) if start <= end else (end, start)

    def select(self, start: int, end: int | None = None) -> None:
        """Move the selection; positions are clamped to the document."""
        length = len(self.value)
        end = start if end is None else end
        self.surface.set_selection(clamp(start, length), clamp(end, length))

    def _replace(self, text: str, start: int, end: int) -> bool:
        self.surface.set_value(text)
        self.select(start, end)
        return self._commit()

    def _commit(self) -> bool:
        """Record a snapshot and notify the owner if the document changed."""
        value = self.value
        if value == self._last_value:
            return False
        self._last_value = value
        self.history.record(value, self._selection()[1])
        if self.on_change is not None:
            self.on_change(value)
        return True

    # -- editing ------------------------------------------------------------

    def set_source(self, text: str | None, cursor: int | None = None) -> bool:
        """Replace the document. Any string is accepted."""
        text = text or ""
        position = len(text) if cursor is None else cursor
        return self._replace(text, position, position)

    def insert_around_selection(self, before: str, after: str = "", replace_selection: bool = False) -> bool:
        value = self.value
        start, end = self._selection()
        selected = "" if replace_selection else value[start:end]
        text = value[:start] + before + selected + after + value[end:]

        if selected or replace_selection:
            cursor = start + len(before) + len(selected) + len(after)
        else:
            # Empty selection: leave the caret between the markers
            cursor = start + len(before)
        return self._replace(text, cursor, cursor)

    def insert_line_prefix(self, prefix: str) -> bool:
        value = self.value
        start, end = self._selection()
        line = _line_start(value, start)
        text = value[:line] + prefix + value[line:]
        return self._replace(text, start + len(prefix), end + len(prefix))

    def toggle_line_prefix(self, prefix: str) -> bool:
        value = self.value
        start, end = self._selection()
        line = _line_start(value, start)
        if not prefix or not value.startswith(prefix, line):
            return self.insert_line_prefix(prefix)

        text = value[:line] + value[line + len(prefix) :]
        return self._replace(
            text,
            max(line, start - len(prefix)),
            max(line, end - len(prefix)),
        )

    def apply_command(self, name: str) -> bool:
        """Run a toolbar command by name (see ``TOOLBAR_COMMANDS``)."""
        command = get_command(name)
        if command.rule == WRAP:
            return self.insert_around_selection(command.before, command.after, command.replace)
        if command.rule == PREFIX:
            return self.insert_line_prefix(command.before)
        if command.rule == TOGGLE:
            return self.toggle_line_prefix(command.before)
        raise ValueError(f"Unknown command rule {command.rule!r}")

    # -- history ------------------------------------------------------------

    def _restore(self, entry: HistoryEntry) -> None:
        self.surface.set_value(entry.value)
        self.select(entry.cursor)
        self._last_value = entry.value
        if self.on_change is not None:
            self.on_change(entry.value)

    def undo(self) -> bool:
        entry = self.history.undo()
        if entry is None:
            return False
        self._restore(entry)
        return True

    def redo(self) -> bool:
        entry = self.history.redo()
        if entry is None:
            return False
        self._restore(entry)
        return True

    # -- keyboard -----------------------------------------------------------

    def mount(self) -> None:
        """Start handling keyboard shortcuts for this surface."""
        self.mounted = True

    def unmount(self) -> None:
        """Stop handling shortcuts; later key events are ignored."""
        self.mounted = False

    def __enter__(self) -> "MarkdownEditor":
        self.mount()
        return self

    def __exit__(self, *exc_info) -> None:
        self.unmount()

    def handle_key(self, event: KeyEvent) -> bool:
        """Run the action bound to ``event``. Returns True if it was consumed."""
        if not self.mounted:
            return False
        action = resolve_shortcut(event)
        if action is None:
            return False
        logger.debug(f"Shortcut {event.key!r} -> {action}")
        if action == "undo":
            self.undo()
        elif action == "redo":
            self.redo()
        else:
            self.apply_command(action)
        return True

    # -- rendering ----------------------------------------------------------

    def set_mode(self, mode: RenderMode | str) -> None:
        self.mode = RenderMode(mode)

    def preview(self) -> str:
        """Render the current source. Recomputed on every call."""
        return self._renderer(self.value)

    def display(self) -> str:
        """Raw text (or the placeholder) in write mode; HTML in preview mode."""
        if self.mode == RenderMode.PREVIEW:
            return self.preview()
        return self.value or self.placeholder
