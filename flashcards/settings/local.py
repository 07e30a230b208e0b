# -*- coding: utf-8 -*-
"""local development Django settings for flashcards

Usage:
- export DJANGO_SETTINGS_MODULE=flashcards.settings.local
- export FLASHCARDS_DB_URL=sqlite:////tmp/flashcards.sqlite3
"""
import sys

from environ import Env

from .base import *  # noqa

db_conn_cfg = Env.db_url_config(os.getenv('FLASHCARDS_DB_URL', f"sqlite:///{os.path.join(BASE_DIR, 'db.sqlite3')}"))

DATABASES = {
    'default': db_conn_cfg
}

INSTALLED_APPS += ('django_extensions',)

RUNSERVER_PLUS_PRINT_SQL_TRUNCATE = sys.maxsize
