"""
Generazione del file Excel con i PINFL decodificati
"""

from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from .records import INTESTAZIONI

TITOLO_FOGLIO = "result"


class GeneratoreExcel:
    """Classe per generare il file Excel con i risultati"""

    LARGHEZZE_COLONNE = {'A': 18, 'B': 13, 'C': 10, 'D': 10}

    def __init__(self, records):
        self.records = records
        self.wb = Workbook()
        self.ws = self.wb.active
        self.ws.title = TITOLO_FOGLIO
        self._pronto = False

    def genera(self, output_path):
        """Genera il file Excel"""
        self._prepara()
        self.wb.save(output_path)

    def genera_bytes(self):
        """Contenuto del file .xlsx in memoria"""
        self._prepara()
        buffer = BytesIO()
        self.wb.save(buffer)
        return buffer.getvalue()

    def _prepara(self):
        if self._pronto:
            return
        self._applica_stili()
        self._crea_headers()
        self._popola_dati()
        self._imposta_larghezza_colonne()
        self._pronto = True

    def _applica_stili(self):
        """Definisce gli stili"""
        self.header_font = Font(bold=True, color="FFFFFF")
        self.header_fill = PatternFill("solid", fgColor="4472C4")
        self.border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )
        self.center = Alignment(horizontal='center')

    def _crea_headers(self):
        """Crea le intestazioni"""
        for col, header in enumerate(INTESTAZIONI, 1):
            cell = self.ws.cell(row=1, column=col, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.center
            cell.border = self.border

    def _popola_dati(self):
        """Una riga per ogni record"""
        for i, record in enumerate(self.records, 2):
            for col, valore in enumerate(record.come_riga(), 1):
                cell = self.ws.cell(row=i, column=col, value=valore)
                cell.border = self.border
                if col > 1:
                    cell.alignment = self.center

            # PINFL come testo per non perdere gli zeri iniziali
            self.ws.cell(row=i, column=1).number_format = '@'

    def _imposta_larghezza_colonne(self):
        """Imposta la larghezza delle colonne"""
        for col, larghezza in self.LARGHEZZE_COLONNE.items():
            self.ws.column_dimensions[col].width = larghezza
