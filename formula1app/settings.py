"""
Django settings for the formula1app project.

Every value that differs between machines is read from the environment;
manage.py loads a local .env file into the environment before this module
is imported.
"""

import os
from datetime import date
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'formula1app-local-console-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'false').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'championship',
]

# Database
# The connection is opened lazily by Django on first query and closed when
# the management command exits; CONN_MAX_AGE keeps it for the whole command.
DATABASES = {
    'default': {
        'ENGINE': os.environ.get('F1_DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('F1_DB_NAME', str(BASE_DIR / 'formula1.sqlite3')),
        'USER': os.environ.get('F1_DB_USER', ''),
        'PASSWORD': os.environ.get('F1_DB_PASSWORD', ''),
        'HOST': os.environ.get('F1_DB_HOST', ''),
        'PORT': os.environ.get('F1_DB_PORT', ''),
        'CONN_MAX_AGE': int(os.environ.get('F1_DB_CONN_MAX_AGE', '60')),
        'ATOMIC_REQUESTS': False,
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True


def _freeze_date():
    raw = os.environ.get('F1_FREEZE_DATE')
    if raw:
        return date.fromisoformat(raw)
    return date(2025, 1, 7)


# Season configuration
F1_SEASON_CONFIG = {
    # Races dated on or after this day accept manually entered results
    'freeze_date': _freeze_date(),
    'current_season': int(os.environ.get('F1_CURRENT_SEASON', '2025')),
    'grid_size': 20,
}

# Logging Configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'championship': {
            'handlers': ['console'],
            'level': os.environ.get('F1_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
