"""Komenda: factsat sources — listuje fakty i ich źródła."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import Dataset, FactId, format_value
from factsat.commands._source import add_source_arguments, load_dataset, setup_logging

console = Console(width=200)


def _sources_of(fact_id: FactId, dataset: Dataset) -> list[str]:
    """Opisy włączonych pytań i reguł ustawiających fakt."""
    out: list[str] = []
    for i, question in enumerate(dataset.questions):
        if question.enabled and question.sets_fact(fact_id):
            label = f" ({question.label})" if question.label else ""
            out.append(f"pytanie #{i}{label}")
    for i, rule in enumerate(dataset.rules):
        if rule.enabled and rule.sets == fact_id:
            out.append(f"reguła #{i} = {format_value(rule.value)}")
    return out


def run(args: argparse.Namespace) -> None:
    from validator import find_sourceless_facts

    setup_logging(args.verbose)
    dataset = load_dataset(args)

    facts = list(dataset.enabled_facts())
    sourceless = set(find_sourceless_facts((f.id for f in facts), dataset))

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("FAKT", style="bold cyan", no_wrap=True)
    table.add_column("TYP", no_wrap=True)
    table.add_column("KATEGORIA", style="dim", no_wrap=True)
    table.add_column("ŹRÓDŁA", no_wrap=False)

    shown = 0
    for fact in facts:
        if args.sourceless_only and fact.id not in sourceless:
            continue
        if fact.id in sourceless:
            src = "[red]brak źródła[/red]"
        else:
            src = "\n".join(_sources_of(fact.id, dataset))
        table.add_row(fact.id, str(fact.type), fact.category or "—", src)
        shown += 1

    if shown == 0:
        if args.sourceless_only:
            console.print("[green]Każdy włączony fakt ma źródło.[/green]")
        else:
            console.print("[yellow]Brak włączonych faktów.[/yellow]")
        return

    console.print(table)
    console.print(
        f"  [dim]{len(facts)} włączonych faktów, "
        f"{len(sourceless)} bez źródła[/dim]"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "sources",
        help="Listuje włączone fakty i pytania / reguły, które je ustawiają.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdego włączonego faktu wypisuje jego źródła: pytania, które go ustawiają
(bezpośrednio lub przez mapowanie opcji), oraz reguły, które go wyprowadzają.
Fakt bez źródła ma w modelu SAT zakazane wszystkie wartości dodatnie.

Przykłady:
  factsat sources dataset.json
  factsat sources dataset.json --sourceless-only
  factsat sources --db --status draft
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--sourceless-only",
        action="store_true",
        dest="sourceless_only",
        help="Pokaż tylko fakty bez źródła.",
    )
    p.set_defaults(func=run)
