# -*- coding: utf-8 -*-
"""Django settings for running flashcards integration tests

Usage:
- export DJANGO_SETTINGS_MODULE=flashcards.settings.it
"""
from environ import Env

from .base import *  # noqa

db_conn_cfg = Env.db_url_config(os.getenv('FLASHCARDS_DB_URL', 'sqlite:////tmp/flashcards_it.sqlite3'))

DATABASES = {
    'default': db_conn_cfg
}
