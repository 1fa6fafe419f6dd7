"""Django settings for the week view API.

Values come from the environment (optionally a .env file). No database is
configured: events arrive in the request body and are never stored.
"""

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

from config.logger import setup_logger
from weekview.domain.value_objects import WeekendDays, WeekStart

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# DJANGO CORE
# =============================================================================

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "weekview",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

DATABASES = {}

# Instants are local-clock naive datetimes.
USE_TZ = False
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "UTC")

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "UNAUTHENTICATED_USER": None,
}

# =============================================================================
# WEEK VIEW CONFIGURATION
# =============================================================================


def parse_week_start(raw: str) -> int:
    try:
        return WeekStart(int(raw)).value
    except ValueError as err:
        raise ImproperlyConfigured(f"WEEKVIEW_WEEK_STARTS_ON must be a weekday 0..6, got {raw!r}") from err


def parse_weekend_days(raw: str) -> tuple[int, ...]:
    try:
        days = frozenset(int(day) for day in raw.split(",") if day.strip())
        return tuple(sorted(WeekendDays(days).days))
    except ValueError as err:
        raise ImproperlyConfigured(f"WEEKVIEW_WEEKEND_DAYS must list weekdays 0..6, got {raw!r}") from err


# Weekdays are numbered Sunday = 0 ... Saturday = 6.
WEEKVIEW = {
    "WEEK_STARTS_ON": parse_week_start(os.environ.get("WEEKVIEW_WEEK_STARTS_ON", "0")),
    "WEEKEND_DAYS": parse_weekend_days(os.environ.get("WEEKVIEW_WEEKEND_DAYS", "0,6")),
}

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
setup_logger(level=LOG_LEVEL)
