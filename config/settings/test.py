"""
With these settings, tests run faster.
"""
from .base import *  # noqa: F403
from .base import LOGGING

# GENERAL
# ------------------------------------------------------------------------------
SECRET_KEY = "stockroom-test-secret-key"
TEST_RUNNER = "django.test.runner.DiscoverRunner"

# DATABASES
# ------------------------------------------------------------------------------
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# LOGGING
# ------------------------------------------------------------------------------
LOGGING = {**LOGGING, "root": {"level": "WARNING", "handlers": ["console"]}}

# django-rest-framework
# ------------------------------------------------------------------------------
REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}
