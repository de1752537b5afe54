from .commands import TOOLBAR_COMMANDS, ToolbarCommand, UnknownCommand
from .editor import MarkdownEditor, RenderMode
from .history import EditHistory, HistoryEntry
from .shortcuts import KeyEvent
from .surface import TextBuffer, TextEditSurface

__all__ = (
    "EditHistory",
    "HistoryEntry",
    "KeyEvent",
    "MarkdownEditor",
    "RenderMode",
    "TOOLBAR_COMMANDS",
    "TextBuffer",
    "TextEditSurface",
    "ToolbarCommand",
    "UnknownCommand",
)
