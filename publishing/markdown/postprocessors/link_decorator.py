# publishing/markdown/postprocessors/link_decorator.py
"""
Unified link postprocessor.

This postprocessor:
1. Adds target="_blank" and rel="noopener noreferrer" to every link outside
   code blocks, so content links never navigate away from the post or event
   being read
2. Adds the configured link class (``MARKDOWN_LINK_CLASS``)
3. Adds an "external-link" class to http(s) links outside the site's domains
"""

from urllib.parse import urlparse

from .utils import append_class, get_shared_soup, soup_to_html


def _is_external_link(href: str, hostname: str, internal_domains: set) -> bool:
    """Check if a link is external (not internal to the site)."""
    if not href.startswith(("http://", "https://")):
        return False

    if hostname and hostname in internal_domains:
        return False

    return True


def link_decorator(
    html: str,
    context: dict,
    link_class: str = "",
    internal_domains: set | None = None,
) -> str:
    """
    Decorate every ``<a href>`` in the rendered HTML.

    Args:
        html: HTML string to process
        context: Context dictionary for shared soup caching
        link_class: Space-separated classes added to every link
        internal_domains: Hostnames that are not marked as external

    Returns:
        Processed HTML with decorated links
    """
    internal_domains = internal_domains or set()
    soup = get_shared_soup(html, context)

    for link in soup.find_all("a", href=True):
        # Line anchors in highlighted code blocks
        if link.find_parent(["pre", "code"]) is not None:
            continue

        href = link.get("href", "")

        link["target"] = "_blank"
        link["rel"] = "noopener noreferrer"
        if link_class:
            append_class(link, link_class)

        try:
            hostname = urlparse(href).hostname or ""
        except ValueError:
            continue

        if _is_external_link(href, hostname, internal_domains):
            append_class(link, "external-link")

    return soup_to_html(context, soup)


def link_decorator_default(html: str, context: dict) -> str:
    """
    Default configuration for link_decorator.

    This is the function that should be registered in POSTPROCESSORS.
    """
    options = context.get("options", {})
    return link_decorator(
        html,
        context,
        link_class=options.get("link_class", ""),
        internal_domains=options.get("internal_domains"),
    )
