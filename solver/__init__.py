"""
solver — model SAT (z3) dla analizy zbioru reguł biznesowych.

Publiczne API:
  build_sat_model(dataset)               → SatModel
  encode_condition(condition, model)     → z3.BoolRef | None
  facts_with_source(dataset)             → set[FactId]
  ConstantIndex(dataset)                 rozwiązywanie id stałych na nazwy
  load_dataset_json(path)                → Dataset
  load_dataset_from_db(conn, ...)        → Dataset
  SatModel, fact_var, true_var, na_var, val_var
"""

from .types    import SatModel, fact_var, na_var, true_var, val_var
from .encoding import ConstantIndex, encode_condition
from .model    import build_sat_model, facts_with_source
from .loader   import load_dataset_from_db, load_dataset_json

__all__ = [
    "SatModel",
    "fact_var",
    "na_var",
    "true_var",
    "val_var",
    "ConstantIndex",
    "encode_condition",
    "build_sat_model",
    "facts_with_source",
    "load_dataset_from_db",
    "load_dataset_json",
]
