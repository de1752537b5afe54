# publishing/markdown/preprocessors/__init__.py

from .line_endings import normalize_line_endings

PREPROCESSORS = [
    normalize_line_endings,  # Browser textareas submit CRLF
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
