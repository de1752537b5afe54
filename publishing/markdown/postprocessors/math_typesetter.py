# publishing/markdown/postprocessors/math_typesetter.py
"""
Postprocessor that typesets LaTeX math to MathML on the server.

Pandoc with ``--mathjax`` outputs math as:
    <span class="math inline">\\(E=mc^2\\)</span>
    <span class="math display">\\[\\int_0^1 x\\,dx\\]</span>

Each span keeps its classes, gains a ``data-latex`` attribute with the
source, and has its contents replaced by the MathML produced by
latex2mathml. Expressions latex2mathml cannot parse are shown as their
literal ``$...$`` / ``$$...$$`` source with a ``math-error`` class.
"""

import logging

import latex2mathml.converter
from bs4 import BeautifulSoup

from .utils import append_class, get_shared_soup, soup_to_html

logger = logging.getLogger(__name__)

INLINE_DELIMITERS = [("\\(", "\\)"), ("$", "$")]
DISPLAY_DELIMITERS = [("\\[", "\\]"), ("$$", "$$")]


def _undelimit(tex: str, display: bool) -> str:
    tex = tex.strip()
    for left, right in DISPLAY_DELIMITERS if display else INLINE_DELIMITERS:
        if tex.startswith(left) and tex.endswith(right) and len(tex) >= len(left) + len(right):
            return tex[len(left) : -len(right)].strip()
    return tex


def typeset_math(html: str, context: dict) -> str:
    """
    Replace pandoc math spans with MathML.

    Args:
        html: HTML string to process
        context: Context dictionary for shared soup caching

    Returns:
        HTML with typeset math
    """
    soup = get_shared_soup(html, context)

    for span in soup.find_all("span", class_="math"):
        if span.get("data-latex") is not None:
            continue

        display = "display" in span.get("class", [])
        latex = _undelimit(span.get_text(), display)
        span["data-latex"] = latex

        try:
            mathml = latex2mathml.converter.convert(latex, display="block" if display else "inline")
        except Exception as e:
            logger.debug(f"Could not typeset {latex!r}: {e}")
            fence = "$$" if display else "$"
            span.clear()
            span.string = f"{fence}{latex}{fence}"
            append_class(span, "math-error")
            continue

        span.clear()
        span.append(BeautifulSoup(mathml, "html.parser"))

    return soup_to_html(context, soup)
