"""
Konfiguracja przez zmienne środowiskowe.

Opcjonalnie plik .env w katalogu głównym projektu:
  PGHOST=localhost
  PGPORT=5432
  PGDATABASE=factsat
  PGUSER=factsat
  PGPASSWORD=...
  FACTSAT_DATASET_TABLE=facts_datasets
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent

load_dotenv(ROOT / ".env")


@dataclass(frozen=True, slots=True)
class DbSettings:
    host: str
    port: int
    dbname: str
    user: str
    password: str
    dataset_table: str


def db_settings() -> DbSettings:
    return DbSettings(
        host          = os.getenv("PGHOST",     "localhost"),
        port          = int(os.getenv("PGPORT", "5432")),
        dbname        = os.getenv("PGDATABASE", "factsat"),
        user          = os.getenv("PGUSER",     "factsat"),
        password      = os.getenv("PGPASSWORD", "factsat"),
        dataset_table = os.getenv("FACTSAT_DATASET_TABLE", "facts_datasets"),
    )
