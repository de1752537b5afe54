"""
Postprocessor that gives every image the site's presentational classes.

Adds:
- the configured image class (``MARKDOWN_IMAGE_CLASS``)
- loading="lazy" and decoding="async" for performance
- a ``markdown-figure`` class on pandoc's implicit figure wrappers
"""

from .utils import append_class, get_shared_soup, soup_to_html


def enhance_images(html: str, context: dict, image_class: str = "") -> str:
    soup = get_shared_soup(html, context)

    for img in soup.find_all("img"):
        if image_class:
            append_class(img, image_class)
        if not img.get("loading"):
            img["loading"] = "lazy"
        img["decoding"] = "async"

        figure = img.find_parent("figure")
        if figure is not None:
            append_class(figure, "markdown-figure")

    return soup_to_html(context, soup)


def image_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for enhance_images.

    This is the function that should be registered in POSTPROCESSORS.
    """
    options = context.get("options", {})
    return enhance_images(html, context, image_class=options.get("image_class", ""))
