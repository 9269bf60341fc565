"""
Test settings for the classroom Q&A board.

Runs against an in-memory SQLite database with a fast password hasher so
the pytest-django suite needs no external services.
"""
from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-secret-key-not-for-production-use-0123456789"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["loggers"]["classes"]["level"] = "WARNING"  # noqa: F405
LOGGING["loggers"]["questions"]["level"] = "WARNING"  # noqa: F405
LOGGING["loggers"]["analytics"]["level"] = "WARNING"  # noqa: F405
