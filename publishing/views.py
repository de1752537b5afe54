import json
import logging

from django.http import HttpResponseBadRequest, JsonResponse
from django.views import View

from .markdown.renderer import render_markdown

logger = logging.getLogger(__name__)


class MarkdownPreviewView(View):
    """
    Live preview for the admin editor.

    Accepts the draft as a ``source`` form field or as a JSON body
    ``{"source": "..."}`` and returns ``{"html": "..."}`` rendered with the
    same transform the public detail pages use.
    """

    http_method_names = ["post"]

    def get_source(self, request):
        if request.content_type == "application/json":
            payload = json.loads(request.body or b"{}")
            if not isinstance(payload, dict):
                raise ValueError("Preview payload must be a JSON object")
            return payload.get("source") or ""
        return request.POST.get("source", "")

    def post(self, request, *args, **kwargs):
        try:
            source = self.get_source(request)
        except ValueError as e:
            logger.warning(f"Rejected preview request: {e}")
            return HttpResponseBadRequest("Invalid preview payload")

        if not isinstance(source, str):
            return HttpResponseBadRequest("source must be a string")

        return JsonResponse({"html": render_markdown(source)})
