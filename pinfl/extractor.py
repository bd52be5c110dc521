"""
Estrazione dei PINFL dalla prima colonna di un foglio Excel o CSV
"""

import csv
import io
import logging
import os

from charset_normalizer import from_bytes
from openpyxl import load_workbook

logger = logging.getLogger(__name__)

ESTENSIONI_EXCEL = (".xlsx", ".xlsm")
ESTENSIONI_CSV = (".csv",)
ESTENSIONI_SUPPORTATE = ESTENSIONI_EXCEL + ESTENSIONI_CSV

SEPARATORI_CSV = ",;\t|"


def cella_in_testo(valore):
    """
    Converte il valore di una cella in testo.
    I numeri interi salvati da Excel come float (es. 31003950000000.0)
    perdono il '.0' finale.
    """
    if valore is None:
        return None
    if isinstance(valore, float) and valore.is_integer():
        return str(int(valore))
    testo = str(valore)
    return testo if testo.strip() else None


def decodifica_testo(raw):
    """
    Decodifica i byte di un CSV con la codifica rilevata da charset-normalizer.
    Se la decodifica fallisce si usa UTF-8 con caratteri di sostituzione.

    Returns: (testo, codifica_usata)
    """
    match = from_bytes(raw).best()
    codifica = match.encoding if match is not None else "utf-8"

    # UTF-8 con BOM: il BOM non deve finire nella prima cella
    if raw.startswith(b"\xef\xbb\xbf") and codifica.lower().replace("-", "_") in ("utf_8", "utf8"):
        codifica = "utf-8-sig"

    try:
        return raw.decode(codifica), codifica
    except (UnicodeDecodeError, LookupError):
        logger.warning("Decodifica %s fallita, uso utf-8 con sostituzione", codifica)
        return raw.decode("utf-8", errors="replace"), "utf-8"


class EstrattoreFoglio:
    """Classe per leggere la prima colonna del primo foglio"""

    def __init__(self, percorso):
        self.percorso = percorso
        self.estensione = os.path.splitext(percorso)[1].lower()

    def estrai(self):
        """
        Legge tutte le righe del foglio.

        Returns: lista con il testo della prima cella di ogni riga (None se vuota)
        """
        if not os.path.exists(self.percorso):
            raise FileNotFoundError(f"File non trovato: {self.percorso}")

        if self.estensione in ESTENSIONI_EXCEL:
            valori = self._leggi_excel()
        elif self.estensione in ESTENSIONI_CSV:
            valori = self._leggi_csv()
        else:
            raise ValueError(
                f"Formato non supportato: {self.estensione or self.percorso} "
                f"(usare {', '.join(ESTENSIONI_SUPPORTATE)})"
            )

        logger.info("Lette %d righe da %s", len(valori), self.percorso)
        return valori

    def _leggi_excel(self):
        """Prima colonna del primo foglio di lavoro"""
        wb = load_workbook(self.percorso, read_only=True, data_only=True)
        try:
            ws = wb.worksheets[0]
            logger.debug("Foglio: %s", ws.title)
            return [
                cella_in_testo(riga[0]) if riga else None
                for riga in ws.iter_rows(values_only=True)
            ]
        finally:
            wb.close()

    def _leggi_csv(self):
        """
        Prima colonna del CSV.
        Codifica rilevata con charset-normalizer, separatore con csv.Sniffer.
        Con ',' come separatore un PINFL scritto con virgole ("4,100395,1234567")
        viene spezzato: resta solo il primo campo.
        """
        with open(self.percorso, 'rb') as f:
            raw = f.read()

        testo, codifica = decodifica_testo(raw)
        logger.debug("Codifica CSV: %s", codifica)

        try:
            dialect = csv.Sniffer().sniff(testo[:4096], delimiters=SEPARATORI_CSV)
        except csv.Error:
            dialect = csv.excel

        return [
            cella_in_testo(riga[0]) if riga else None
            for riga in csv.reader(io.StringIO(testo, newline=""), dialect)
        ]
