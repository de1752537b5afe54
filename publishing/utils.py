"""
Helpers for post and event listing cards.
"""

import math
import re

HEADING_RE = re.compile(r"#{1,6}\s")
EMPHASIS_RE = re.compile(r"\*\*|__|\*|_")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
CODE_RE = re.compile(r"`{1,3}[^`]*`{1,3}")
NEWLINES_RE = re.compile(r"\n+")
DURATION_RE = re.compile(r"(\d+):(\d+):(\d+)")


def plain_text_excerpt(content, max_length=150):
    """
    Strip the common markdown syntax from ``content`` and truncate it.

    Headings, bold/italic markers, link syntax (the text is kept) and code
    spans are removed, newlines are collapsed to spaces. Text longer than
    ``max_length`` is cut and suffixed with "...".
    """
    plain_text = HEADING_RE.sub("", content or "")
    plain_text = EMPHASIS_RE.sub("", plain_text)
    plain_text = LINK_RE.sub(r"\1", plain_text)
    plain_text = CODE_RE.sub("", plain_text)
    plain_text = NEWLINES_RE.sub(" ", plain_text).strip()

    if len(plain_text) <= max_length:
        return plain_text
    return plain_text[:max_length].strip() + "..."


def reading_time(content, words_per_minute=200):
    """Minutes needed to read ``content``, never less than one."""
    words = len((content or "").split())
    return max(1, math.ceil(words / words_per_minute))


def format_duration(duration):
    """
    Format a ``H:MM:SS`` interval for display.

    "1:30:00" -> "1h 30m", "2:00:00" -> "2 hours", "0:45:00" -> "45 minutes".
    Anything that does not look like an interval is returned unchanged.
    """
    match = DURATION_RE.search(duration or "")
    if not match:
        return duration

    hours = int(match.group(1))
    minutes = int(match.group(2))

    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{minutes} minutes"
