"""
Client-style filtering for post and event listings.

Records are plain mappings or objects exposing ``title``, ``content``,
``tag`` and ``is_draft``. Two search behaviours are supported:

``attribute``
    A bare query matches titles. ``@tag term``, ``@tags term`` and
    ``@content term`` match the named attribute instead. Unknown attributes
    match nothing. ``@attr`` on its own matches everything.

``full_text``
    A query matches title, content or tag.

``CONTENT_SEARCH_MODE`` picks the default.
"""

from __future__ import annotations

from typing import Any, Iterable

from django.conf import settings

ATTRIBUTE = "attribute"
FULL_TEXT = "full_text"
SEARCH_MODES = (ATTRIBUTE, FULL_TEXT)

ATTRIBUTE_FIELDS = {
    "tag": "tag",
    "tags": "tag",
    "content": "content",
}


def _field(record: Any, name: str) -> str:
    if isinstance(record, dict):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return (value or "").lower()


def _is_draft(record: Any) -> bool:
    if isinstance(record, dict):
        return bool(record.get("is_draft", False))
    return bool(getattr(record, "is_draft", False))


def published(records: Iterable[Any]) -> list:
    """Drop drafts, keeping the original order."""
    return [record for record in records if not _is_draft(record)]


def _attribute_search(records: list, query: str) -> list:
    if not query.startswith("@"):
        return [r for r in records if query in _field(r, "title")]

    attribute, _, term = query[1:].partition(" ")
    term = term.strip()
    if not term:
        return records

    field = ATTRIBUTE_FIELDS.get(attribute)
    if field is None:
        return []
    return [r for r in records if term in _field(r, field)]


def _full_text_search(records: list, query: str) -> list:
    return [
        r
        for r in records
        if query in _field(r, "title") or query in _field(r, "content") or query in _field(r, "tag")
    ]


def search_records(records: Iterable[Any], query: str | None, mode: str | None = None) -> list:
    """Filter ``records`` by ``query`` (case-insensitive substring match)."""
    mode = mode or getattr(settings, "CONTENT_SEARCH_MODE", ATTRIBUTE)
    if mode not in SEARCH_MODES:
        raise ValueError(f"Unknown search mode {mode!r}; expected one of {SEARCH_MODES}")

    records = list(records)
    query = (query or "").strip().lower()
    if not query:
        return records

    if mode == ATTRIBUTE:
        return _attribute_search(records, query)
    return _full_text_search(records, query)
