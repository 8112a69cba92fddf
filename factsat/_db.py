"""Połączenie z bazą PostgreSQL — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import psycopg2
import psycopg2.extensions

from factsat._config import db_settings


def get_connection() -> psycopg2.extensions.connection:
    settings = db_settings()
    return psycopg2.connect(
        host     = settings.host,
        port     = settings.port,
        dbname   = settings.dbname,
        user     = settings.user,
        password = settings.password,
    )
