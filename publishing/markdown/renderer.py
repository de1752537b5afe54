# publishing/markdown/renderer.py

import hashlib
import logging
from html import escape

import pypandoc
from bs4 import BeautifulSoup
from django.core.cache import cache

from .config import get_pandoc_config, get_render_options
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "markdown:html:"


def _convert(text):
    """
    Run pandoc, falling back to the escaped source if the converter fails.

    Returns ``(html, converted)``; ``converted`` is False for the fallback.
    """
    pandoc_config = get_pandoc_config()
    try:
        html = pypandoc.convert_text(
            text,
            to=pandoc_config["to"],
            format=pandoc_config["format"],
            extra_args=pandoc_config["extra_args"],
        )
    except (RuntimeError, OSError) as e:
        logger.error(f"Pandoc conversion failed, rendering literal text: {e}", exc_info=True)
        return "<p>" + escape(text).replace("\n", "<br />\n") + "</p>", False
    return html, True


def _cache_key(text, options):
    fingerprint = "\0".join(
        [
            text,
            options.get("image_class", ""),
            options.get("link_class", ""),
            ",".join(sorted(options.get("internal_domains") or ())),
        ]
    )
    digest = hashlib.sha256(fingerprint.encode("utf-8")).hexdigest()
    return f"{CACHE_KEY_PREFIX}{digest}"


def render_markdown(text, context=None):
    """
    Render markdown-plus-math source to sanitized HTML.

    The same transform serves the admin editor preview and the public
    post/event detail pages. Empty source renders the configured placeholder.

    Args:
        text: Raw markdown text (``None`` is treated as empty)
        context: Optional dict shared with the pre/post processors. Any
            ``options`` it carries override the settings-derived defaults.
    """
    context = context or {}
    options = {**get_render_options(), **context.get("options", {})}
    context["options"] = options

    text = text or ""
    if not text.strip():
        text = options["placeholder"]

    timeout = options["cache_timeout"]
    cache_key = None
    if timeout:
        cache_key = _cache_key(text, options)
        cached = cache.get(cache_key)
        if cached is not None:
            return cached

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    html, converted = _convert(text)

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    # Fallback output is never cached
    if cache_key and converted:
        cache.set(cache_key, html, timeout)

    return html


def render_to_text(html):
    """Return the visible text of rendered HTML."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()
