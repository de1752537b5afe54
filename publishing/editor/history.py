"""Bounded linear undo/redo history of (document, cursor) snapshots."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class HistoryEntry:
    value: str
    cursor: int


class EditHistory:
    """
    Linear history with a current index.

    The entry at ``index`` always mirrors the displayed document. Recording
    after an undo drops the redo tail; recording past ``limit`` drops the
    oldest entry.

    Each entry keeps the caret as it stood right after that edit. Undo
    therefore restores the caret the previous edit left, not one moved
    later by selection alone.
    """

    def __init__(self, value: str = "", cursor: int = 0, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._entries: list[HistoryEntry] = [HistoryEntry(value, cursor)]
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    def record(self, value: str, cursor: int) -> bool:
        """Append a snapshot if ``value`` differs from the current one."""
        if value == self.current.value:
            return False
        del self._entries[self._index + 1 :]
        self._entries.append(HistoryEntry(value, cursor))
        if len(self._entries) > self.limit:
            del self._entries[0]
        self._index = len(self._entries) - 1
        return True

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> HistoryEntry | None:
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> HistoryEntry | None:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]
