import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from datetime import date

from openpyxl import Workbook, load_workbook

from pinfl.cli import formatta_tabella, main, parse_data
from pinfl.core import percorso_output_default, elabora_foglio
from pinfl.records import RecordOutput


def _scrivi_elenco(path):
    wb = Workbook()
    ws = wb.active
    for valore in ["PINFL", "41003951234567", "", "123", "3-150680-1234567"]:
        ws.append([valore])
    wb.save(path)


class TestElaboraFoglio(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.tmp.name, "elenco.xlsx")
        _scrivi_elenco(self.input_path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_output_accanto_all_input(self):
        risultato = elabora_foglio(self.input_path, oggi=date(2024, 6, 15))

        atteso = os.path.join(self.tmp.name, "elenco_pinfl.xlsx")
        self.assertEqual(risultato["excel_path"], atteso)
        self.assertEqual(risultato["output_dir"], self.tmp.name)
        self.assertTrue(os.path.exists(atteso))
        self.assertEqual((risultato["totale"], risultato["validi"], risultato["non_validi"]), (3, 2, 1))

        righe = list(load_workbook(atteso).active.iter_rows(values_only=True))
        self.assertEqual(righe[1:], [
            ("41003951234567", "10.03.1995", "Ayol", 268),
            ("00000000000123", "Invalid", "Unknown", "N/A"),
            ("31506801234567", "15.06.1980", "Erkak", 0),
        ])

    def test_output_esplicito(self):
        output = os.path.join(self.tmp.name, "out.xlsx")
        risultato = elabora_foglio(self.input_path, output, oggi=date(2024, 6, 15))

        self.assertEqual(risultato["excel_path"], output)
        self.assertTrue(os.path.exists(output))

    def test_csv_in_codifica_locale(self):
        path = os.path.join(self.tmp.name, "elenco.csv")
        with open(path, "wb") as f:
            f.write("PINFL;Имя\n41003951234567;Алишер\n".encode("cp1251"))

        risultato = elabora_foglio(path, oggi=date(2024, 6, 15))

        self.assertEqual((risultato["totale"], risultato["validi"]), (1, 1))
        self.assertEqual(risultato["records"][0].come_riga(), ("41003951234567", "10.03.1995", "Ayol", 268))

    def test_percorso_output_default(self):
        self.assertEqual(
            percorso_output_default(os.path.join("dati", "elenco.csv")),
            os.path.join(os.path.abspath("dati"), "elenco_pinfl.xlsx"),
        )


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.tmp.name, "elenco.xlsx")
        _scrivi_elenco(self.input_path)

    def tearDown(self):
        self.tmp.cleanup()

    def _esegui(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_elaborazione_con_anteprima(self):
        output = os.path.join(self.tmp.name, "risultato.xlsx")
        testo = self._esegui([self.input_path, "-o", output, "--oggi", "15.06.2024", "--anteprima"])

        self.assertIn("PINFL validi:        2", testo)
        self.assertIn("PINFL non validi:    1", testo)
        self.assertIn("00000000000123  Invalid     Unknown  N/A", testo)
        self.assertIn(output, testo)
        self.assertTrue(os.path.exists(output))

    def test_file_non_trovato(self):
        with self.assertRaises(SystemExit) as cm:
            self._esegui([os.path.join(self.tmp.name, "manca.xlsx")])
        self.assertEqual(cm.exception.code, 1)

    def test_data_non_valida(self):
        with self.assertRaises(SystemExit) as cm:
            self._esegui([self.input_path, "--oggi", "2024-06-15"])
        self.assertEqual(cm.exception.code, 1)

    def test_formato_non_supportato(self):
        path = os.path.join(self.tmp.name, "elenco.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("41003951234567\n")

        with self.assertRaises(SystemExit) as cm:
            self._esegui([path])
        self.assertEqual(cm.exception.code, 1)

    def test_parse_data(self):
        self.assertEqual(parse_data("15.06.2024"), date(2024, 6, 15))

    def test_formatta_tabella(self):
        tabella = formatta_tabella([RecordOutput("41003951234567", "10.03.1995", "Ayol", 268)])

        self.assertEqual(tabella.splitlines(), [
            "PINFL           Birthdate   Gender  DaysLeft",
            "--------------  ----------  ------  --------",
            "41003951234567  10.03.1995  Ayol    268",
        ])


if __name__ == "__main__":
    unittest.main()
