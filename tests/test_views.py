"""Tests for the editor preview endpoint."""

import json

from django.urls import reverse

PREVIEW_URL = "/markdown/preview/"


class TestMarkdownPreviewView:
    def test_form_post(self, client) -> None:
        response = client.post(PREVIEW_URL, {"source": "**bold**"})

        assert response.status_code == 200
        assert "<strong>bold</strong>" in response.json()["html"]

    def test_json_post(self, client) -> None:
        response = client.post(
            PREVIEW_URL,
            data=json.dumps({"source": "[site](https://example.com)"}),
            content_type="application/json",
        )

        assert response.status_code == 200
        assert 'target="_blank"' in response.json()["html"]

    def test_empty_source_returns_placeholder(self, client) -> None:
        response = client.post(PREVIEW_URL, {})

        assert "Nothing to preview" in response.json()["html"]

    def test_invalid_json_is_rejected(self, client) -> None:
        response = client.post(PREVIEW_URL, data="{not json", content_type="application/json")

        assert response.status_code == 400

    def test_non_string_source_is_rejected(self, client) -> None:
        response = client.post(PREVIEW_URL, data=json.dumps({"source": 42}), content_type="application/json")

        assert response.status_code == 400

    def test_get_is_not_allowed(self, client) -> None:
        assert client.get(PREVIEW_URL).status_code == 405

    def test_named_route(self) -> None:
        assert reverse("publishing:markdown-preview") == PREVIEW_URL
