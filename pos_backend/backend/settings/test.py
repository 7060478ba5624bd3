# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS (pytest-django / manage.py test)

- In-memory SQLite, no .env database leaks into tests
- Fast MD5 hashing (bcrypt is deliberately slow)
- Throttling off (or effectively unlimited on views that pin their own throttles)
- Invoice storage unconfigured; tests patch the S3 client explicitly
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import REST_FRAMEWORK

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": (),
    "DEFAULT_THROTTLE_RATES": {"anon": "10000/min", "user": "10000/min"},
}

AWS_REGION = ""
S3_BUCKET_INVOICES = ""

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "root": {"handlers": ["null"], "level": "WARNING"},
}
