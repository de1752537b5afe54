# publishing/markdown/postprocessors/__init__.py

from .image_enhancer import image_enhancer_default
from .link_decorator import link_decorator_default
from .math_typesetter import typeset_math
from .sanitizer import sanitize_html
from .table_enhancer import table_enhancer_default

POSTPROCESSORS = [
    sanitize_html,  # Must run first, before any markup is generated
    typeset_math,  # Convert pandoc math spans to MathML
    image_enhancer_default,  # Presentational class and lazy loading on images
    link_decorator_default,  # Open every link in a new tab
    table_enhancer_default,  # Scroll wrapper around tables
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
