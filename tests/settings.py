"""Minimal Django settings for the test suite."""

from datetime import timedelta

SECRET_KEY = "scheduled-events-tests"
DEBUG = False
USE_TZ = True
TIME_ZONE = "UTC"

INSTALLED_APPS = [
    "scheduled_events",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

SCHEDULED_EVENTS_DEFAULT_TIMEZONE = "Europe/Madrid"
SCHEDULED_EVENTS_HAPPENING_MARGIN = timedelta(minutes=10)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {"scheduled_events": {"handlers": ["console"], "level": "WARNING"}},
}
