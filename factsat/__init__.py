"""factsat — narzędzie CLI do analizy zbiorów reguł biznesowych solverem SAT."""

__version__ = "0.1.0"
