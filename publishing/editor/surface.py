"""Text-edit surface capability used by the markdown editor."""

from __future__ import annotations

from typing import Protocol


def clamp(position: int, length: int) -> int:
    """Bound ``position`` to ``[0, length]``."""
    return max(0, min(int(position), length))


class TextEditSurface(Protocol):
    """What the editor needs from a text widget: a value and a selection."""

    def get_value(self) -> str: ...
    def set_value(self, text: str) -> None: ...
    def get_selection(self) -> tuple[int, int]: ...
    def set_selection(self, start: int, end: int) -> None: ...


class TextBuffer:
    """In-memory surface. Selections are clamped and kept ordered."""

    def __init__(self, value: str = "", selection: tuple[int, int] | None = None):
        self._value = value or ""
        self._start = self._end = len(self._value)
        if selection is not None:
            self.set_selection(*selection)

    def get_value(self) -> str:
        return self._value

    def set_value(self, text: str) -> None:
        self._value = text or ""
        self.set_selection(self._start, self._end)

    def get_selection(self) -> tuple[int, int]:
        return self._start, self._end

    def set_selection(self, start: int, end: int) -> None:
        length = len(self._value)
        start, end = clamp(start, length), clamp(end, length)
        if start > end:
            start, end = end, start
        self._start, self._end = start, end

    def __repr__(self) -> str:
        return f"TextBuffer({self._value!r}, selection=({self._start}, {self._end}))"
