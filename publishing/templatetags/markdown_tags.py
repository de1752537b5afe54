# publishing/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from publishing.markdown.renderer import render_markdown, render_to_text
from publishing.utils import format_duration, plain_text_excerpt, reading_time

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    """Render post/event content exactly as the editor preview shows it."""
    return mark_safe(render_markdown(value))


@register.filter(name="plaintext")
def plaintext_filter(value):
    """Rendered content reduced to its visible text."""
    return render_to_text(render_markdown(value)).strip()


@register.filter(name="excerpt")
def excerpt_filter(value, max_length=150):
    """
    Usage:
      {{ post.content|excerpt }}
      {{ post.content|excerpt:180 }}
    """
    return plain_text_excerpt(value, int(max_length))


@register.filter(name="reading_time")
def reading_time_filter(value):
    return reading_time(value)


@register.filter(name="duration")
def duration_filter(value):
    return format_duration(value)
