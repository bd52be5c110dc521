"""
Decodifica PINFL
================

Package per leggere i PINFL (codice personale uzbeko a 14 cifre) dalla
prima colonna di un foglio Excel/CSV, decodificare data di nascita e sesso,
calcolare i giorni al prossimo compleanno e generare un file Excel.

Uso:
    python -m pinfl                              # Avvia GUI
    python -m pinfl elenco.xlsx                  # CLI, genera elenco_pinfl.xlsx
    python -m pinfl elenco.xlsx -o out.xlsx -a   # CLI con output e anteprima
"""

__version__ = "1.0.0"

from .decoder import decodifica_pinfl, normalizza_pinfl, IdentitaDecodificata, PinflNonValido
from .records import RecordOutput, crea_records
from .extractor import EstrattoreFoglio
from .generator import GeneratoreExcel
from .core import elabora_foglio

__all__ = [
    "decodifica_pinfl",
    "normalizza_pinfl",
    "IdentitaDecodificata",
    "PinflNonValido",
    "RecordOutput",
    "crea_records",
    "EstrattoreFoglio",
    "GeneratoreExcel",
    "elabora_foglio",
]
