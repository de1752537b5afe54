"""Shared BeautifulSoup tree for the postprocessors of a single render."""

from __future__ import annotations

from bs4 import BeautifulSoup

_SHARED_SOUP_KEY = "__shared_soup"
_SHARED_SOURCE_KEY = "__shared_soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return the parsed tree for ``html``, reusing the one in ``context``.

    The cached tree is only reused while the HTML string handed from one
    postprocessor to the next is the one it was serialised to.
    """
    soup = context.get(_SHARED_SOUP_KEY)
    if soup is None or context.get(_SHARED_SOURCE_KEY) != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SHARED_SOUP_KEY] = soup
        context[_SHARED_SOURCE_KEY] = html
    return soup


def soup_to_html(context: dict, soup: BeautifulSoup | None = None) -> str:
    """Serialise the shared soup back to HTML and update the cache."""
    if soup is None:
        soup = context.get(_SHARED_SOUP_KEY)
    html = str(soup) if soup is not None else ""
    context[_SHARED_SOURCE_KEY] = html
    context[_SHARED_SOUP_KEY] = soup
    return html


def append_class(tag, *class_names: str) -> None:
    """Add CSS classes to ``tag`` without duplicating existing ones."""
    classes = tag.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    for name in class_names:
        for part in name.split():
            if part not in classes:
                classes.append(part)
    tag["class"] = classes
