"""Wspólne opcje komend: skąd wczytać zbiór danych (plik JSON lub baza)."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from data_model import Dataset

console = Console(stderr=True)


def add_source_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "dataset",
        nargs="?",
        metavar="PLIK",
        help="Plik JSON ze zbiorem danych (DatasetData lub {\"data\": ...}).",
    )
    p.add_argument(
        "--db",
        action="store_true",
        help="Wczytaj zbiór danych z bazy (PGHOST, PGDATABASE, ... z środowiska / .env).",
    )
    p.add_argument(
        "--status",
        choices=["live", "draft"],
        default="live",
        help="Wersja zbioru danych w bazie (domyślnie: live).",
    )
    p.add_argument(
        "--dataset-id",
        type=int,
        metavar="ID",
        help="Konkretny wiersz tabeli zbiorów danych (zamiast --status).",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logi diagnostyczne (DEBUG) na stderr.",
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_dataset(args: argparse.Namespace) -> Dataset:
    """Wczytuje Dataset wg opcji; błędy wypisuje i kończy z kodem 1."""
    from solver import load_dataset_from_db, load_dataset_json

    if args.db:
        from factsat._config import db_settings
        from factsat._db import get_connection

        try:
            conn = get_connection()
        except Exception as e:
            console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
            raise SystemExit(1)

        try:
            return load_dataset_from_db(
                conn,
                status=args.status,
                dataset_id=args.dataset_id,
                table=db_settings().dataset_table,
            )
        except ValueError as e:
            console.print(f"[red]Błąd ładowania z bazy:[/red] {e}")
            raise SystemExit(1)
        finally:
            conn.close()

    if not args.dataset:
        console.print("[red]Podaj plik zbioru danych albo użyj --db.[/red]")
        raise SystemExit(1)

    try:
        return load_dataset_json(args.dataset)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Błąd wczytywania zbioru danych:[/red] {e}")
        raise SystemExit(1)
