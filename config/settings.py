import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = ["*"] if DEBUG else os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost testserver").split()

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "recaptcha",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "recaptcha.context_processors.recaptcha_settings",
            ],
        },
    },
]

DATABASES = {}

STATIC_URL = "static/"

USE_TZ = True

RECAPTCHA = {
    "SITE_KEY": os.environ.get("RECAPTCHA_SITE_KEY", ""),
    "VERSION": os.environ.get("RECAPTCHA_VERSION", "v2"),
    "USE_RECAPTCHA_NET": os.environ.get("RECAPTCHA_USE_RECAPTCHA_NET", "0") == "1",
    "LANGUAGE": os.environ.get("RECAPTCHA_LANGUAGE", ""),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "recaptcha": {
            "handlers": ["console"],
            "level": os.environ.get("RECAPTCHA_LOG_LEVEL", "WARNING"),
        },
    },
}
