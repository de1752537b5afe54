from django.urls import path

from .views import MarkdownPreviewView

app_name = "publishing"

urlpatterns = [
    path("preview/", MarkdownPreviewView.as_view(), name="markdown-preview"),
]
