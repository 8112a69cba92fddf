"""Komenda: factsat analyze — uruchamia sprawdzenia i wypisuje raport analizy."""

from __future__ import annotations

import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from factsat._format import fmt_condition
from factsat.commands._source import add_source_arguments, load_dataset, setup_logging

console = Console(width=200)

_SEVERITY_STYLE = {"error": "bold red", "warning": "yellow"}


# ---------------------------------------------------------------------------
# Wyświetlanie wyników
# ---------------------------------------------------------------------------

def _select_checks(report, check_ids: list[str] | None):
    """Raport ograniczony do wybranych sprawdzeń (liczniki przeliczone)."""
    from validator import AnalysisReport, IssueSeverity

    if not check_ids:
        return report

    checks = tuple(c for c in report.checks if c.id in check_ids)
    errors = sum(
        1 for c in checks for i in c.issues if i.severity is IssueSeverity.ERROR
    )
    warnings = sum(len(c.issues) for c in checks) - errors
    return AnalysisReport(
        checks=checks,
        total_issues=errors + warnings,
        error_count=errors,
        warning_count=warnings,
    )


def _show_check(check) -> None:
    console.print(f"\n[bold]{check.name}[/bold]  [dim]({check.id})[/dim]")
    console.print(f"  [dim]{check.description}[/dim]")

    if not check.issues:
        console.print("  [green]OK[/green] — brak problemów")
        return

    with_conditions = any(issue.conditions for issue in check.issues)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("WAGA", no_wrap=True)
    table.add_column("KOMUNIKAT", no_wrap=False)
    table.add_column("ODWOŁANIA", style="cyan", no_wrap=False)
    table.add_column("PODPOWIEDŹ", style="dim", no_wrap=False)
    if with_conditions:
        table.add_column("WARUNKI", no_wrap=False)

    for issue in check.issues:
        style = _SEVERITY_STYLE.get(str(issue.severity), "white")
        row = [
            f"[{style}]{issue.severity}[/{style}]",
            issue.message,
            "\n".join(ref.key for ref in issue.refs),
            issue.suggestion or "—",
        ]
        if with_conditions:
            row.append("\n".join(
                f"{c.tag}: {fmt_condition(c.condition, frozenset(c.sourceless_facts))}"
                for c in issue.conditions
            ))
        table.add_row(*row)

    console.print(table)


def _show_summary(report) -> None:
    if report.total_issues == 0:
        console.print("\n[green]Brak problemów.[/green]")
        return
    console.print(
        f"\nRazem: [bold]{report.total_issues}[/bold] problemów  "
        f"([red]{report.error_count} błędów[/red], "
        f"[yellow]{report.warning_count} ostrzeżeń[/yellow])"
    )


def _write_json(report) -> None:
    output = json.dumps(report.to_dict(), ensure_ascii=False, indent=2) + "\n"
    try:
        sys.stdout.buffer.write(output.encode("utf-8"))
        sys.stdout.buffer.flush()
    except AttributeError:
        print(output, end="")


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    from validator import run_analysis

    setup_logging(args.verbose)
    dataset = load_dataset(args)

    report = _select_checks(run_analysis(dataset), args.check)

    if args.json_output:
        _write_json(report)
    else:
        console.print(
            f"Zbiór danych: [bold]{len(dataset.facts)}[/bold] faktów, "
            f"[bold]{len(dataset.questions)}[/bold] pytań, "
            f"[bold]{len(dataset.rules)}[/bold] reguł, "
            f"[bold]{len(dataset.action_conditions)}[/bold] akcji"
        )
        for check in report.checks:
            _show_check(check)
        _show_summary(report)

    if report.error_count or (args.strict and report.warning_count):
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    from validator import CheckId

    p = subparsers.add_parser(
        "analyze",
        help="Uruchamia sprawdzenia zbioru danych i wypisuje raport.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje zbiór danych (fakty, pytania, reguły, warunki akcji, stałe)
z pliku JSON albo z bazy i uruchamia sprawdzenia:

  dead-facts               fakty, do których nic się nie odwołuje
  undefined-refs           odwołania do nieistniejących / wyłączonych faktów i stałych
  contradictory-rules      reguły ustawiające ten sam fakt sprzecznie
  unreachable-questions    pytania nigdy nie widoczne / zawsze ukryte
  unreachable-actions      akcje, których include_when jest niespełnialny
  include-exclude-overlap  akcje z nakładającymi się include_when i exclude_when

Kod wyjścia: 1 gdy są błędy (z --strict także ostrzeżenia), 0 w przeciwnym razie.

Przykłady:
  factsat analyze dataset.json
  factsat analyze dataset.json --check contradictory-rules --check dead-facts
  factsat analyze dataset.json --json-output > raport.json
  factsat analyze --db --status draft --strict
  factsat analyze --db --dataset-id 42 -v
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--check", "-c",
        metavar="ID",
        action="append",
        choices=[str(c) for c in CheckId],
        help="Pokaż tylko wybrane sprawdzenie. Można podać wielokrotnie.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        dest="json_output",
        help="Wypisz raport jako JSON na stdout (klucze camelCase).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Zakończ z kodem 1 także przy samych ostrzeżeniach.",
    )
    p.set_defaults(func=run)
