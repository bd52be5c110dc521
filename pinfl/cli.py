"""
Interfaccia linea di comando per decodifica PINFL
"""

import argparse
import logging
import sys
import os
from datetime import datetime

from .core import elabora_foglio
from .records import INTESTAZIONI


def parse_data(testo):
    """Converte DD.MM.YYYY in data"""
    return datetime.strptime(testo, "%d.%m.%Y").date()


def formatta_tabella(records):
    """Anteprima dei record come tabella di testo"""
    righe = [INTESTAZIONI] + [[str(v) for v in r.come_riga()] for r in records]
    larghezze = [max(len(riga[col]) for riga in righe) for col in range(len(INTESTAZIONI))]

    linee = []
    for n, riga in enumerate(righe):
        linee.append("  ".join(v.ljust(w) for v, w in zip(riga, larghezze)).rstrip())
        if n == 0:
            linee.append("  ".join("-" * w for w in larghezze))
    return "\n".join(linee)


def main(argv=None):
    """Entry point CLI"""
    parser = argparse.ArgumentParser(
        description="Decodifica PINFL: data di nascita, sesso e giorni al prossimo compleanno",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Esempio:
    python -m pinfl                                    # Avvia GUI
    python -m pinfl elenco.xlsx                        # Genera elenco_pinfl.xlsx
    python -m pinfl elenco.csv -o risultato.xlsx       # File di output esplicito
    python -m pinfl elenco.xlsx --oggi 15.06.2024 -a   # Data di riferimento e anteprima

Nota:
    Nei CSV separati da virgola i PINFL non devono contenere virgole
    ("4,100395,1234567" viene letto come "4"). Usare ';' o un file Excel.
        """
    )
    parser.add_argument("file", help="Percorso del file .xlsx/.xlsm/.csv con i PINFL nella prima colonna")
    parser.add_argument("-o", "--output", metavar="FILE.xlsx",
                        help="File Excel da generare (default: <file>_pinfl.xlsx)")
    parser.add_argument("--oggi", metavar="DD.MM.YYYY",
                        help="Data di riferimento per i giorni al compleanno (default: oggi)")
    parser.add_argument("-a", "--anteprima", action="store_true",
                        help="Stampa l'anteprima dei record")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log dettagliato")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    oggi = None
    if args.oggi:
        try:
            oggi = parse_data(args.oggi)
        except ValueError:
            print(f"Errore: Formato data non valido: {args.oggi}")
            print("Usare formato DD.MM.YYYY")
            sys.exit(1)

    # Verifica esistenza file
    if not os.path.exists(args.file):
        print(f"Errore: File non trovato: {args.file}")
        sys.exit(1)

    print("=" * 60)
    print("DECODIFICA PINFL")
    print("=" * 60)

    try:
        risultato = elabora_foglio(args.file, args.output, oggi)
    except Exception as e:
        print(f"Errore: {e}")
        sys.exit(1)

    if args.anteprima:
        print()
        print(formatta_tabella(risultato["records"]))

    print("\n" + "=" * 60)
    print("RIEPILOGO")
    print("=" * 60)
    print(f"Righe elaborate:     {risultato['totale']}")
    print(f"PINFL validi:        {risultato['validi']}")
    print(f"PINFL non validi:    {risultato['non_validi']}")
    print(f"\nFile generato:")
    print(f"  - {risultato['excel_path']}")
    print("=" * 60)
