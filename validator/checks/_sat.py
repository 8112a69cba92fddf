"""Wspólne elementy sprawdzeń opartych na SAT."""

from __future__ import annotations

from solver import SatModel


def require_model(model: SatModel | None, check: str) -> SatModel:
    """Brak modelu to błąd wywołującego, nie problem w danych — przerywamy od razu."""
    if not isinstance(model, SatModel):
        raise ValueError(f"{check} wymaga modelu SAT (solver.build_sat_model), otrzymano: {model!r}")
    return model
