"""
Toolbar commands for the markdown editor.

Every command maps to one of three text rules:

* ``wrap``: insert ``before``/``after`` around the selection
  (``replace`` drops the selected text instead of keeping it)
* ``prefix``: insert a marker at the start of the cursor's line
* ``toggle``: insert the marker, or remove it if the line already has it
"""

from __future__ import annotations

from dataclasses import dataclass

WRAP = "wrap"
PREFIX = "prefix"
TOGGLE = "toggle"

TABLE_TEMPLATE = "\n| Header | Header |\n| ------ | ------ |\n| Cell   | Cell   |\n"


class UnknownCommand(LookupError):
    """Raised when a toolbar command name is not registered."""


@dataclass(frozen=True)
class ToolbarCommand:
    name: str
    label: str
    title: str
    rule: str
    before: str = ""
    after: str = ""
    replace: bool = False


TOOLBAR_COMMANDS: dict[str, ToolbarCommand] = {
    command.name: command
    for command in (
        ToolbarCommand("bold", "B", "Bold", WRAP, "**", "**"),
        ToolbarCommand("italic", "I", "Italic", WRAP, "*", "*"),
        ToolbarCommand("strikethrough", "S", "Strikethrough", WRAP, "~~", "~~"),
        ToolbarCommand("heading1", "H1", "Heading 1", PREFIX, "# "),
        ToolbarCommand("heading2", "H2", "Heading 2", PREFIX, "## "),
        ToolbarCommand("heading3", "H3", "Heading 3", PREFIX, "### "),
        ToolbarCommand("bullet_list", "List", "Bulleted list", TOGGLE, "- "),
        ToolbarCommand("numbered_list", "1.", "Numbered list", TOGGLE, "1. "),
        ToolbarCommand("task_list", "Task", "Task list", TOGGLE, "- [ ] "),
        ToolbarCommand("quote", "Quote", "Quote", TOGGLE, "> "),
        ToolbarCommand("code", "Code", "Inline code", WRAP, "`", "`"),
        ToolbarCommand("code_block", "Code Block", "Code block", WRAP, "```\n", "\n```"),
        ToolbarCommand("link", "Link", "Link", WRAP, "[", "](url)"),
        ToolbarCommand("image", "Image", "Image", WRAP, "![", "](url)"),
        ToolbarCommand("table", "Table", "Table", WRAP, TABLE_TEMPLATE, replace=True),
        ToolbarCommand("horizontal_rule", "HR", "Horizontal rule", WRAP, "\n---\n", replace=True),
        ToolbarCommand("inline_math", "LaTeX", "Inline LaTeX", WRAP, "$", "$"),
        ToolbarCommand("block_math", "LaTeX Block", "LaTeX block", WRAP, "$$\n", "\n$$"),
    )
}


def get_command(name: str) -> ToolbarCommand:
    try:
        return TOOLBAR_COMMANDS[name]
    except KeyError:
        raise UnknownCommand(name) from None
