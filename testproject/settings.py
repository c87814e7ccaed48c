"""Settings used for test runs and local development of the plugin."""

from __future__ import annotations

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(DEBUG=(bool, False))

SECRET_KEY = env("SECRET_KEY", default="test-secret-key")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "nova_dependent_filter",
    "testproject.catalog",
]

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
]

ROOT_URLCONF = "testproject.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    }
]

# Use an in-memory SQLite database for tests.
DATABASES = {
    "default": env.db("DATABASE_URL", default="sqlite://:memory:"),
}

USE_TZ = True
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

NOVA = {
    "domain": env("NOVA_DOMAIN", default=None),
}
NOVA_RESOURCES = ["testproject.catalog.resources"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "nova_dependent_filter": {
            "handlers": ["console"],
            "level": env("NOVA_LOG_LEVEL", default="WARNING"),
        },
    },
}
