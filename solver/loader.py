"""
solver/loader.py — wczytywanie migawki zbioru danych z JSON lub z bazy.

Publiczne API:
  load_dataset_json(path)                               -> Dataset
  load_dataset_from_db(conn, status, dataset_id, table) -> Dataset
"""

from __future__ import annotations

import json
import pathlib
from typing import Any

from data_model import Dataset, dataset_from_dict

DEFAULT_TABLE = "facts_datasets"
STATUSES = ("live", "draft")


def _unwrap(raw: Any) -> Any:
    """Akceptuje goły DatasetData albo opakowanie {"data": {...}} z API."""
    if isinstance(raw, dict) and isinstance(raw.get("facts_dataset"), dict):
        raw = raw["facts_dataset"]
    if isinstance(raw, dict) and "facts" not in raw and isinstance(raw.get("data"), dict):
        return raw["data"]
    return raw


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def load_dataset_json(path: str | pathlib.Path) -> Dataset:
    """
    Wczytuje zbiór danych z pliku JSON.

    Oczekiwany format::

        {
            "facts":   {"has_employees": {"type": "boolean_state", "core": true, "enabled": true}},
            "questions": [...],
            "rules": [...],
            "action_conditions": {...},
            "constants": {"sizes": [{"id": 1, "name": "Small", "enabled": true}]}
        }

    albo ten sam obiekt pod kluczem "data".

    Raises:
        FileNotFoundError gdy plik nie istnieje,
        ValueError gdy JSON jest niepoprawny lub ma złą strukturę.
    """
    path = pathlib.Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Brak pliku zbioru danych: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Błąd parsowania JSON ({path.name}): {exc}") from exc
    return dataset_from_dict(_unwrap(raw))


# ---------------------------------------------------------------------------
# Baza danych
# ---------------------------------------------------------------------------

def load_dataset_from_db(
    conn,
    status: str = "live",
    dataset_id: int | None = None,
    table: str = DEFAULT_TABLE,
) -> Dataset:
    """
    Wczytuje migawkę zbioru danych z tabeli (kolumny: id, status, data).

    Args:
        conn:       otwarte połączenie psycopg2
        status:     "live" | "draft" (ignorowany gdy podano dataset_id)
        dataset_id: konkretny wiersz
        table:      nazwa tabeli

    Raises:
        ValueError gdy status jest nieznany lub wiersz nie istnieje.
    """
    if dataset_id is not None:
        sql, params = f"SELECT data FROM {table} WHERE id = %s", [dataset_id]
        what = f"id={dataset_id}"
    else:
        if status not in STATUSES:
            raise ValueError(f"Nieznany status zbioru danych: '{status}'")
        sql = f"SELECT data FROM {table} WHERE status = %s ORDER BY id DESC LIMIT 1"
        params = [status]
        what = f"status={status}"

    with conn.cursor() as cur:
        cur.execute(sql, params)
        row = cur.fetchone()

    if row is None:
        raise ValueError(f"Brak zbioru danych ({what}) w tabeli {table}.")

    data = row[0]
    if isinstance(data, str):
        data = json.loads(data)
    return dataset_from_dict(_unwrap(data))
