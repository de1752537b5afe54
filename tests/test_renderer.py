"""Tests for the markdown + math render transform."""

import pypandoc
import pytest
from bs4 import BeautifulSoup

from publishing.markdown import renderer
from publishing.markdown.renderer import render_markdown, render_to_text


def _soup(html):
    return BeautifulSoup(html, "html.parser")


class TestPlaceholder:
    @pytest.mark.parametrize("source", ["", None, "   \n\t "])
    def test_empty_source_renders_placeholder(self, source) -> None:
        """Empty input shows the placeholder, never an empty fragment."""
        html = render_markdown(source)

        assert "Nothing to preview" in html
        assert "<em>" in html

    def test_placeholder_is_configurable(self, settings) -> None:
        settings.MARKDOWN_EMPTY_PLACEHOLDER = "_Start writing_"

        assert "Start writing" in render_markdown("")


class TestMarkdown:
    def test_basic_formatting(self) -> None:
        html = render_markdown("# Neurons\n\n**Bold** and *italic* text.")

        assert "<h1" in html
        assert "Neurons" in html
        assert "<strong>Bold</strong>" in html
        assert "<em>italic</em>" in html

    def test_lists_quotes_and_code(self) -> None:
        source = "- one\n- two\n\n> quoted\n\n```\nprint('hi')\n```\n"
        soup = _soup(render_markdown(source))

        assert [li.get_text() for li in soup.find_all("li")] == ["one", "two"]
        assert soup.find("blockquote") is not None
        assert "print('hi')" in soup.find("pre").get_text()

    def test_tables_are_wrapped_for_scrolling(self) -> None:
        html = render_markdown("| Region | Role |\n|---|---|\n| Amygdala | Fear |\n")
        soup = _soup(html)

        table = soup.find("table")
        assert table is not None
        assert "table-scroll-wrapper" in table.parent.get("class", [])
        assert "Amygdala" in table.get_text()

    def test_crlf_input_is_normalised(self) -> None:
        html = render_markdown("line one\r\n\r\nline two")

        assert len(_soup(html).find_all("p")) == 2


class TestMath:
    def test_inline_math_is_typeset(self) -> None:
        """$E=mc^2$ becomes MathML rather than literal dollar text."""
        html = render_markdown("Energy: $E=mc^2$")
        soup = _soup(html)

        span = soup.find("span", class_="math")
        assert span is not None
        assert span.find("math") is not None
        assert span["data-latex"] == "E=mc^2"
        assert "$E=mc^2$" not in html

    def test_block_math_is_typeset_as_display(self) -> None:
        html = render_markdown("$$\\frac{a}{b}$$")
        soup = _soup(html)

        math = soup.find("math")
        assert math is not None
        assert math.get("display") == "block"

    def test_malformed_math_falls_back_to_literal_text(self, monkeypatch) -> None:
        def broken(*args, **kwargs):
            raise ValueError("unbalanced braces")

        monkeypatch.setattr("latex2mathml.converter.convert", broken)

        html = render_markdown("Broken $x^2$ here")
        soup = _soup(html)

        span = soup.find("span", class_="math")
        assert "math-error" in span["class"]
        assert span.get_text() == "$x^2$"
        assert soup.find("math") is None

    @pytest.mark.parametrize("literal", ["$x^$", "$$\\left( x$$"])
    def test_unparseable_latex_renders_literally(self, literal) -> None:
        soup = _soup(render_markdown(f"Broken {literal} here"))

        span = soup.find("span", class_="math")
        assert "math-error" in span["class"]
        assert span.get_text() == literal
        assert soup.find("math") is None


class TestLinksAndImages:
    def test_every_link_opens_in_new_tab(self) -> None:
        html = render_markdown("[Brain facts](https://example.com/brain) and [about](/about)")
        links = _soup(html).find_all("a")

        assert len(links) == 2
        for link in links:
            assert link["target"] == "_blank"
            assert link["rel"] == ["noopener", "noreferrer"]

    def test_external_links_are_marked(self) -> None:
        html = render_markdown("[ext](https://example.com) [int](/posts/1)")
        external, internal = _soup(html).find_all("a")

        assert "external-link" in external["class"]
        assert "external-link" not in internal.get("class", [])

    def test_internal_domains_are_not_external(self, settings) -> None:
        settings.MARKDOWN_INTERNAL_DOMAINS = ["neurogeneration.org"]

        html = render_markdown("[home](https://neurogeneration.org/events)")
        link = _soup(html).find("a")

        assert link["target"] == "_blank"
        assert "external-link" not in link.get("class", [])

    def test_images_receive_presentational_class(self, settings) -> None:
        settings.MARKDOWN_IMAGE_CLASS = "rounded-lg shadow-md"

        html = render_markdown("An image ![neuron](https://example.com/neuron.png) inline.")
        img = _soup(html).find("img")

        assert img["src"] == "https://example.com/neuron.png"
        assert "rounded-lg" in img["class"]
        assert "shadow-md" in img["class"]
        assert img["loading"] == "lazy"

    def test_code_line_anchors_are_not_decorated(self, settings) -> None:
        settings.MARKDOWN_LINK_CLASS = "text-purple-600"

        html = render_markdown("```python\nx = 1\n```\n\n[docs](https://example.com)")
        soup = _soup(html)

        for anchor in soup.find("pre").find_all("a"):
            assert "target" not in anchor.attrs
            assert "text-purple-600" not in anchor.get("class", [])
        assert soup.find_all("a")[-1]["target"] == "_blank"


class TestSafety:
    def test_script_tags_are_escaped(self) -> None:
        html = render_markdown("<script>alert(1)</script>")

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_javascript_urls_are_dropped(self) -> None:
        html = render_markdown("[click](javascript:alert(1))")

        assert "javascript:" not in html

    def test_converter_failure_falls_back_to_literal_text(self, monkeypatch) -> None:
        def broken(*args, **kwargs):
            raise OSError("pandoc not found")

        monkeypatch.setattr(pypandoc, "convert_text", broken)

        html = render_markdown("**bold** <b>tag</b>")

        assert "**bold**" in html
        assert "<b>" not in html


class TestPurityAndCaching:
    def test_rendering_is_deterministic(self) -> None:
        source = "# Title\n\nSome $a^2+b^2=c^2$ and a [link](https://example.com)."

        assert render_markdown(source) == render_markdown(source)

    def test_rerendering_rendered_text_is_stable(self) -> None:
        text = render_to_text(render_markdown("**Synapses** fire $x$ times"))

        assert render_markdown(text) == render_markdown(text)

    def test_render_to_text(self) -> None:
        assert render_to_text(render_markdown("**hello** world")).strip() == "hello world"
        assert render_to_text("") == ""

    def test_results_are_cached(self, settings, monkeypatch) -> None:
        settings.MARKDOWN_RENDER_CACHE_TIMEOUT = 60
        calls = []

        def fake_convert(text, **kwargs):
            calls.append(text)
            return "<p>cached</p>"

        monkeypatch.setattr(renderer.pypandoc, "convert_text", fake_convert)

        first = render_markdown("same text")
        second = render_markdown("same text")

        assert first == second == "<p>cached</p>"
        assert len(calls) == 1

    def test_zero_timeout_disables_cache(self, monkeypatch) -> None:
        calls = []

        def fake_convert(text, **kwargs):
            calls.append(text)
            return "<p>fresh</p>"

        monkeypatch.setattr(renderer.pypandoc, "convert_text", fake_convert)

        render_markdown("same text")
        render_markdown("same text")

        assert len(calls) == 2

    def test_converter_fallback_is_not_cached(self, settings, monkeypatch) -> None:
        settings.MARKDOWN_RENDER_CACHE_TIMEOUT = 60
        calls = []

        def flaky_convert(text, **kwargs):
            calls.append(text)
            if len(calls) == 1:
                raise OSError("pandoc crashed")
            return "<p><strong>bold</strong></p>"

        monkeypatch.setattr(renderer.pypandoc, "convert_text", flaky_convert)

        first = render_markdown("**bold**")
        second = render_markdown("**bold**")

        assert "<strong>" not in first
        assert "<strong>" in second
        assert len(calls) == 2

    def test_context_options_are_cached_separately(self, settings) -> None:
        settings.MARKDOWN_RENDER_CACHE_TIMEOUT = 60
        settings.MARKDOWN_IMAGE_CLASS = "rounded-lg"
        source = "![neuron](https://example.com/neuron.png)"

        custom = render_markdown(source, context={"options": {"image_class": "custom-figure"}})
        default = render_markdown(source)
        custom_again = render_markdown(source, context={"options": {"image_class": "custom-figure"}})

        assert "custom-figure" in _soup(custom).find("img")["class"]
        assert _soup(default).find("img")["class"] == ["rounded-lg"]
        assert custom_again == custom
