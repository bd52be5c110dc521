"""
Interfaccia grafica Tkinter per decodifica PINFL
"""

import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from .extractor import EstrattoreFoglio
from .records import INTESTAZIONI, crea_records, riepilogo
from .generator import GeneratoreExcel


class App:
    """Applicazione GUI: selezione foglio, elaborazione, anteprima e salvataggio"""

    def __init__(self, root):
        self.root = root
        self.root.title("PINFL")
        self.root.geometry("620x480")

        self.input_path = None
        self.records = None

        # Frame principale
        frame = ttk.Frame(root, padding=20)
        frame.pack(fill=tk.BOTH, expand=True)

        # Selezione file
        ttk.Button(frame, text="Seleziona file", command=self.seleziona_file, width=20).pack(pady=(0, 5))
        self.label_file = ttk.Label(frame, text="Nessun file selezionato", foreground="gray", wraplength=560)
        self.label_file.pack(pady=(0, 10))

        # Pulsanti
        frame_btn = ttk.Frame(frame)
        frame_btn.pack(pady=5)
        self.btn_elabora = ttk.Button(frame_btn, text="ELABORA", command=self.elabora, width=20, state=tk.DISABLED)
        self.btn_elabora.pack(side=tk.LEFT, padx=5)
        self.btn_salva = ttk.Button(frame_btn, text="Salva Excel", command=self.salva, width=20, state=tk.DISABLED)
        self.btn_salva.pack(side=tk.LEFT, padx=5)

        # Anteprima
        self.label_stato = ttk.Label(frame, text="", anchor=tk.W)
        self.label_stato.pack(fill=tk.X, pady=(10, 0))

        frame_tab = ttk.Frame(frame)
        frame_tab.pack(fill=tk.BOTH, expand=True, pady=5)
        self.tabella = ttk.Treeview(frame_tab, columns=INTESTAZIONI, show="headings", height=12)
        for header in INTESTAZIONI:
            self.tabella.heading(header, text=header)
            self.tabella.column(header, width=130, anchor=tk.CENTER)
        scroll = ttk.Scrollbar(frame_tab, orient=tk.VERTICAL, command=self.tabella.yview)
        self.tabella.configure(yscrollcommand=scroll.set)
        self.tabella.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)

    def seleziona_file(self):
        """Apre dialogo per selezionare il foglio"""
        path = filedialog.askopenfilename(filetypes=[("Excel", "*.xlsx *.xlsm"), ("CSV", "*.csv")])
        if path:
            self.input_path = path
            self.records = None
            self.label_file.config(text=path, foreground="black")
            self.btn_elabora.config(state=tk.NORMAL)
            self.btn_salva.config(state=tk.DISABLED)

    def elabora(self):
        """Decodifica il foglio selezionato e mostra l'anteprima"""
        if not self.input_path:
            return

        try:
            valori = EstrattoreFoglio(self.input_path).estrai()
            self.records = crea_records(valori)
        except Exception as e:
            messagebox.showerror("Errore", str(e))
            return

        self.tabella.delete(*self.tabella.get_children())
        for record in self.records:
            self.tabella.insert("", tk.END, values=record.come_riga())

        conteggi = riepilogo(self.records)
        self.label_stato.config(
            text=f"Righe: {conteggi['totale']}  Validi: {conteggi['validi']}  Non validi: {conteggi['non_validi']}"
        )
        self.btn_salva.config(state=tk.NORMAL)

    def salva(self):
        """Salva il file Excel risultato"""
        if self.records is None:
            return

        path = filedialog.asksaveasfilename(defaultextension=".xlsx", filetypes=[("Excel", "*.xlsx")])
        if not path:
            return

        try:
            GeneratoreExcel(self.records).genera(path)
        except Exception as e:
            messagebox.showerror("Errore", str(e))
            return

        messagebox.showinfo("PINFL", f"File generato:\n{path}")


def avvia_gui():
    """Avvia l'interfaccia grafica"""
    root = tk.Tk()
    App(root)
    root.mainloop()
