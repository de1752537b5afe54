import pytest
from django.core.cache import cache

from publishing.editor import MarkdownEditor


@pytest.fixture(autouse=True)
def no_render_cache(settings):
    """Render every test's markdown from scratch unless a test opts back in."""
    settings.MARKDOWN_RENDER_CACHE_TIMEOUT = 0
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def echo_renderer():
    return lambda source: f"<p>{source}</p>"


@pytest.fixture
def changes():
    return []


@pytest.fixture
def editor(changes, echo_renderer):
    return MarkdownEditor(on_change=changes.append, placeholder="Write something...", renderer=echo_renderer)
