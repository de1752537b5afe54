"""
Django settings for the NeuroGeneration publishing engine.

Deployment values are read from the environment (or a ``.env`` file)
through python-decouple.
"""

from pathlib import Path

from decouple import Csv, config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config("SECRET_KEY", default="insecure-dev-key-change-me")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", cast=Csv(), default="localhost,127.0.0.1")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "publishing",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

ROOT_URLCONF = "neurogen.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

# Content lives in the hosted database service; Django keeps no tables.
DATABASES = {}

CACHES = {
    "default": {
        "BACKEND": config("CACHE_BACKEND", default="django.core.cache.backends.locmem.LocMemCache"),
        "LOCATION": config("CACHE_LOCATION", default="neurogen-markdown"),
    }
}

USE_TZ = True
STATIC_URL = "static/"

# Markdown rendering
MARKDOWN_EMPTY_PLACEHOLDER = "*Nothing to preview*"
MARKDOWN_IMAGE_CLASS = "rounded-lg shadow-md my-6 max-w-full h-auto"
MARKDOWN_LINK_CLASS = "text-purple-600 hover:underline"
MARKDOWN_INTERNAL_DOMAINS = config("MARKDOWN_INTERNAL_DOMAINS", cast=Csv(), default="")
MARKDOWN_RENDER_CACHE_TIMEOUT = config("MARKDOWN_RENDER_CACHE_TIMEOUT", cast=int, default=3600)
MARKDOWN_PANDOC_EXTRA_ARGS = []

# "attribute" (title, or @tag/@content prefix) or "full_text" (title+content+tag)
CONTENT_SEARCH_MODE = config("CONTENT_SEARCH_MODE", default="attribute")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": config("LOG_LEVEL", default="INFO"),
    },
    "loggers": {
        "publishing": {
            "handlers": ["console"],
            "level": config("PUBLISHING_LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
    },
}
