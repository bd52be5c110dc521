"""
Conversione delle righe del foglio in record di output
"""

import logging
from dataclasses import dataclass, astuple
from datetime import date
from typing import Union

from .decoder import decodifica_pinfl, solo_cifre, formatta_data_nascita, normalizza_pinfl

logger = logging.getLogger(__name__)

INTESTAZIONI = ["PINFL", "Birthdate", "Gender", "DaysLeft"]

DATA_NON_VALIDA = "Invalid"
SESSO_SCONOSCIUTO = "Unknown"
GIORNI_ND = "N/A"


@dataclass(frozen=True)
class RecordOutput:
    """Una riga del foglio risultato"""

    pinfl: str
    data_nascita: str
    sesso: str
    giorni_mancanti: Union[int, str]

    @property
    def valido(self):
        return self.data_nascita != DATA_NON_VALIDA

    def come_riga(self):
        """Valori nell'ordine delle colonne INTESTAZIONI"""
        return astuple(self)


def crea_record(valore, oggi):
    """
    Crea il record per un singolo valore di cella.
    Restituisce None per celle vuote o senza alcuna cifra (riga saltata).
    I PINFL non validi producono comunque un record con i segnaposto.
    """
    if valore is None:
        return None

    testo = str(valore).strip()
    if not testo or not solo_cifre(testo):
        return None

    pinfl = normalizza_pinfl(testo)
    info = decodifica_pinfl(pinfl, oggi)

    if info.data_nascita is None:
        return RecordOutput(pinfl, DATA_NON_VALIDA, SESSO_SCONOSCIUTO, GIORNI_ND)

    return RecordOutput(pinfl, formatta_data_nascita(info.data_nascita), info.sesso, info.giorni_mancanti)


def crea_records(valori, oggi=None):
    """
    Crea i record per tutte le righe.
    La data di oggi viene letta una sola volta e vale per tutte le righe.
    """
    if oggi is None:
        oggi = date.today()

    records = []
    for riga, valore in enumerate(valori, 1):
        record = crea_record(valore, oggi)
        if record is None:
            continue
        if not record.valido:
            logger.info("Riga %d: PINFL non valido %s", riga, record.pinfl)
        records.append(record)

    return records


def riepilogo(records):
    """Conteggio record totali, validi e non validi"""
    validi = sum(1 for r in records if r.valido)
    return {
        "totale": len(records),
        "validi": validi,
        "non_validi": len(records) - validi,
    }
