from django.conf import settings

PANDOC_FROM = (
    "markdown"
    "+autolink_bare_uris"
    "+strikeout"
    "+superscript"
    "+subscript"
    "+task_lists"
    "+pipe_tables"
    "+fenced_code_blocks"
    "+fenced_code_attributes"
    "+backtick_code_blocks"
    "+raw_html"
    "+tex_math_dollars"
    "+footnotes"
    "+smart"
)


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Math is left in ``span.math`` wrappers by ``--mathjax`` so that the
    math typesetter postprocessor can convert it to MathML server-side.
    """
    return {
        "format": PANDOC_FROM,
        "to": "html5",
        "extra_args": [
            "--mathjax",
            "--wrap=none",
            *getattr(settings, "MARKDOWN_PANDOC_EXTRA_ARGS", []),
        ],
    }


def get_render_options():
    """Presentation options shared by preview and published rendering."""
    return {
        "placeholder": getattr(settings, "MARKDOWN_EMPTY_PLACEHOLDER", "*Nothing to preview*"),
        "image_class": getattr(
            settings, "MARKDOWN_IMAGE_CLASS", "rounded-lg shadow-md my-6 max-w-full h-auto"
        ),
        "link_class": getattr(settings, "MARKDOWN_LINK_CLASS", "text-purple-600 hover:underline"),
        "internal_domains": set(getattr(settings, "MARKDOWN_INTERNAL_DOMAINS", ())),
        "cache_timeout": getattr(settings, "MARKDOWN_RENDER_CACHE_TIMEOUT", 3600),
    }
