"""
factsat — narzędzie CLI dla walidatora zbiorów reguł.

Użycie:
  factsat <komenda> [opcje]

Komendy:
  analyze   Uruchamia sześć sprawdzeń na zbiorze danych i wypisuje raport.
  sources   Listuje fakty i ich źródła (pytania / reguły); wskazuje fakty bez źródła.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from factsat import __version__
from factsat.commands import analyze as cmd_analyze
from factsat.commands import sources as cmd_sources


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="factsat",
        description="factsat — walidacja zbiorów faktów, pytań i reguł.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"factsat {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_analyze.add_parser(subparsers)
    cmd_sources.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
