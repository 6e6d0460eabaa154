import tkinter as tk
from tkinter import messagebox, ttk
from typing import Dict, Optional

from gui.app import EldarApp
from gui.components.status_bar import StatusBar
from gui.theme import DEFAULT_THEME, Theme
from gui.views.base import BaseView


class TkShell:
    """Single-window Tk renderer for EldarApp views."""

    def __init__(self, app: EldarApp, theme: Theme = DEFAULT_THEME):
        self.app = app
        self.theme = theme
        self.root = tk.Tk()
        self.root.title("Eldar")
        self.root.geometry("520x380")
        self.root.minsize(420, 320)

        self.style = ttk.Style()
        self.style.theme_use("clam")
        self._configure_styles()

        self.content = ttk.Frame(self.root, style="Main.TFrame", padding=16)
        self.content.pack(fill=tk.BOTH, expand=True)
        self.status_bar = StatusBar(self.root, app.ui)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

        self._entries: Dict[str, ttk.Entry] = {}

    def _configure_styles(self):
        t = self.theme
        self.root.configure(bg=t.background_color)
        self.style.configure("Main.TFrame", background=t.background_color)
        self.style.configure("Panel.TFrame", background=t.background_color)
        self.style.configure("TLabel", background=t.background_color, foreground=t.foreground_color)
        self.style.configure("Header.TLabel", font=(t.font_family, 16, "bold"))
        self.style.configure("Muted.TLabel", foreground=t.muted_color, font=(t.font_family, 9))
        self.style.configure("Error.TLabel", foreground=t.error_color, font=(t.font_family, 9))
        self.style.configure("TButton", padding=6)

    def run(self):
        self.render(self.app.refresh())
        self.root.mainloop()

    def render(self, view: Optional[BaseView]):
        for child in self.content.winfo_children():
            child.destroy()
        self._entries = {}

        if view is not None:
            self._build(view)
        self.status_bar.update_status()

    def _build(self, view: BaseView):
        ttk.Label(self.content, text=view.title, style="Header.TLabel").pack(pady=(0, 10))
        if view.message:
            ttk.Label(self.content, text=view.message).pack(pady=(0, 8))

        form = ttk.Frame(self.content, style="Main.TFrame")
        form.pack(fill=tk.X)
        form.columnconfigure(1, weight=1)
        for idx, spec in enumerate(view.fields):
            row = idx * 2
            ttk.Label(form, text=spec.label).grid(row=row, column=0, sticky="w", padx=(0, 8))
            entry = ttk.Entry(form, show="*" if spec.secret else "")
            entry.grid(row=row, column=1, sticky="ew", pady=(4, 0))
            if spec.placeholder:
                ttk.Label(form, text=spec.placeholder, style="Muted.TLabel").grid(
                    row=row + 1, column=1, sticky="w"
                )
            self._entries[spec.name] = entry

        for action in view.actions:
            line = ttk.Frame(self.content, style="Main.TFrame")
            line.pack(fill=tk.X, pady=(8, 0))
            if action.prompt:
                ttk.Label(line, text=action.prompt).pack(side=tk.LEFT)
            ttk.Button(
                line, text=action.label, command=lambda name=action.name: self._on_action(name)
            ).pack(side=tk.RIGHT)

        if view.submit_text:
            ttk.Button(self.content, text=view.submit_text, command=self._on_submit).pack(
                anchor="e", pady=(12, 0)
            )

    def _after(self, before: Optional[BaseView], after: Optional[BaseView]):
        if self.app.ui.error_message:
            messagebox.showerror("Eldar", self.app.ui.error_message, parent=self.root)
        if after is not before:
            self.render(after)
        else:
            self.status_bar.update_status()

    def _on_submit(self):
        before = self.app.view
        values = {name: entry.get() for name, entry in self._entries.items()}
        self._after(before, self.app.submit(values))

    def _on_action(self, name: str):
        before = self.app.view
        self._after(before, self.app.trigger(name))
