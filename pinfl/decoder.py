"""
Decodifica del PINFL: data di nascita, sesso e giorni al prossimo compleanno
"""

import calendar
import re
from collections import namedtuple
from datetime import date


LUNGHEZZA_PINFL = 14

SESSO_UOMO = "Erkak"
SESSO_DONNA = "Ayol"

# Prima cifra (serie) -> secolo di nascita
SECOLO_PER_SERIE = {
    1: 1800, 2: 1800,
    3: 1900, 4: 1900,
    5: 2000, 6: 2000,
}

_PINFL_RE = re.compile(r'[0-9]{14}')
_NON_CIFRA_RE = re.compile(r'[^0-9]')


class PinflNonValido(ValueError):
    """PINFL non valido (struttura, serie o data di nascita)"""


IdentitaDecodificata = namedtuple("IdentitaDecodificata", ["data_nascita", "sesso", "giorni_mancanti"])

NON_VALIDO = IdentitaDecodificata(None, None, None)


def solo_cifre(testo):
    """Rimuove tutti i caratteri che non sono cifre"""
    return _NON_CIFRA_RE.sub('', testo)


def normalizza_pinfl(testo):
    """
    Normalizza un identificativo grezzo.
    Tiene solo le cifre e, se sono meno di 14, aggiunge zeri a sinistra.
    Stringhe piu' lunghe restano invariate (le scarta la decodifica).
    """
    return solo_cifre(testo).rjust(LUNGHEZZA_PINFL, '0')


def analizza_pinfl(pinfl):
    """
    Valida il PINFL e ne estrae serie e data di nascita.
    Cifra 1 = serie, cifre 2-3 = giorno, 4-5 = mese, 6-7 = anno nel secolo.

    Returns: (serie, data_di_nascita)
    Raises: PinflNonValido
    """
    if not isinstance(pinfl, str) or not _PINFL_RE.fullmatch(pinfl):
        raise PinflNonValido(f"Il PINFL deve avere {LUNGHEZZA_PINFL} cifre: {pinfl!r}")

    serie = int(pinfl[0])
    secolo = SECOLO_PER_SERIE.get(serie)
    if secolo is None:
        raise PinflNonValido(f"Serie sconosciuta: {serie}")

    giorno = int(pinfl[1:3])
    mese = int(pinfl[3:5])
    anno = secolo + int(pinfl[5:7])

    try:
        data_nascita = date(anno, mese, giorno)
    except ValueError as e:
        raise PinflNonValido(f"Data di nascita non valida: {giorno:02d}.{mese:02d}.{anno}") from e

    return serie, data_nascita


def sesso_da_serie(serie):
    """Serie dispari = uomo, pari = donna"""
    return SESSO_UOMO if serie % 2 == 1 else SESSO_DONNA


def formatta_data_nascita(data_nascita):
    """Formato dd.mm.yyyy"""
    return f"{data_nascita.day:02d}.{data_nascita.month:02d}.{data_nascita.year}"


def compleanno_nell_anno(data_nascita, anno):
    """
    Compleanno nell'anno indicato.
    Chi e' nato il 29/02 festeggia il 01/03 negli anni non bisestili.
    """
    if data_nascita.month == 2 and data_nascita.day == 29 and not calendar.isleap(anno):
        return date(anno, 3, 1)
    return date(anno, data_nascita.month, data_nascita.day)


def giorni_al_compleanno(data_nascita, oggi=None):
    """
    Giorni mancanti al prossimo compleanno (0 se e' oggi).

    Returns: intero in [0, 366]
    """
    if oggi is None:
        oggi = date.today()

    prossimo = compleanno_nell_anno(data_nascita, oggi.year)
    if prossimo < oggi:
        prossimo = compleanno_nell_anno(data_nascita, oggi.year + 1)

    return (prossimo - oggi).days


def decodifica_pinfl(pinfl, oggi=None):
    """
    Decodifica un PINFL normalizzato.
    Non solleva eccezioni: per qualunque PINFL non valido restituisce NON_VALIDO.

    Returns: IdentitaDecodificata(data_nascita, sesso, giorni_mancanti)
    """
    try:
        serie, data_nascita = analizza_pinfl(pinfl)
    except PinflNonValido:
        return NON_VALIDO

    return IdentitaDecodificata(
        data_nascita=data_nascita,
        sesso=sesso_da_serie(serie),
        giorni_mancanti=giorni_al_compleanno(data_nascita, oggi),
    )
