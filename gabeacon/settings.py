import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if h.strip()]

INSTALLED_APPS = [
    "rest_framework",
    "beacon",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
]

ROOT_URLCONF = "gabeacon.urls"
WSGI_APPLICATION = "gabeacon.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

# Client identities live in the visitor's cookie jar only.
DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

# --- Beacon ------------------------------------------------------------------

BEACON_COLLECTOR_URL = os.getenv("BEACON_COLLECTOR_URL", "https://www.google-analytics.com/collect")
BEACON_COLLECTOR_TIMEOUT = float(os.getenv("BEACON_COLLECTOR_TIMEOUT", "3.0"))
BEACON_REDIRECT_URL = os.getenv("BEACON_REDIRECT_URL", "https://github.com/irvinlim/ga-beacon")
# "celery" hands hits to a worker, "inline" posts from the request thread.
BEACON_DISPATCH = os.getenv("BEACON_DISPATCH", "celery").strip().lower()
BEACON_ASSET_DIR = os.getenv("BEACON_ASSET_DIR", str(BASE_DIR / "beacon" / "images"))
BEACON_TRUST_FORWARDED_FOR = _env_bool("BEACON_TRUST_FORWARDED_FOR", True)

# --- Celery ------------------------------------------------------------------

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_TASK_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]
CELERY_TASK_IGNORE_RESULT = True
CELERY_BROKER_CONNECTION_TIMEOUT = 1.0
CELERY_TASK_PUBLISH_RETRY_POLICY = {
    "max_retries": 1,
    "interval_start": 0,
    "interval_step": 0.2,
    "interval_max": 0.2,
}

# --- Logging -----------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "beacon": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "django": {"handlers": ["console"], "level": "WARNING"},
    },
}
