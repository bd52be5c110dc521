"""
Orchestrazione elaborazione foglio PINFL
"""

import logging
import os

from .extractor import EstrattoreFoglio
from .records import crea_records, riepilogo
from .generator import GeneratoreExcel

logger = logging.getLogger(__name__)

SUFFISSO_OUTPUT = "_pinfl.xlsx"


def percorso_output_default(input_path):
    """Stessa cartella e stesso nome del file di input, con suffisso _pinfl.xlsx"""
    output_dir = os.path.dirname(os.path.abspath(input_path))
    nome_file = os.path.splitext(os.path.basename(input_path))[0]
    return os.path.join(output_dir, f"{nome_file}{SUFFISSO_OUTPUT}")


def elabora_foglio(input_path, output_path=None, oggi=None):
    """
    Elabora un foglio con i PINFL e genera il file Excel risultato.

    Args:
        input_path: Percorso del file .xlsx/.xlsm/.csv di input
        output_path: Percorso del file Excel da generare (default: accanto all'input)
        oggi: Data di riferimento per i giorni al compleanno (default: oggi)

    Returns:
        Dizionario con i record, i conteggi e il path del file generato.
    """
    if output_path is None:
        output_path = percorso_output_default(input_path)

    # 1. Lettura prima colonna
    valori = EstrattoreFoglio(input_path).estrai()

    # 2. Decodifica di tutte le righe
    records = crea_records(valori, oggi)
    conteggi = riepilogo(records)
    logger.info(
        "Decodificati %d PINFL (%d validi, %d non validi)",
        conteggi["totale"], conteggi["validi"], conteggi["non_validi"]
    )

    # 3. Generazione Excel
    GeneratoreExcel(records).genera(output_path)
    logger.info("Salvato %s", output_path)

    return {
        "records": records,
        "totale": conteggi["totale"],
        "validi": conteggi["validi"],
        "non_validi": conteggi["non_validi"],
        "input_path": input_path,
        "excel_path": output_path,
        "output_dir": os.path.dirname(os.path.abspath(output_path)),
    }
