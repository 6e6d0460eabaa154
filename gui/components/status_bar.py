import tkinter as tk
from tkinter import ttk

from gui.state import UiState


class StatusBar(ttk.Frame):
    """
    Status line under the page: last message on the left,
    busy indicator on the right.
    """

    def __init__(self, parent, ui_state: UiState):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))
        self._ui_state = ui_state

        self.message_var = tk.StringVar(value=ui_state.status_message)
        self.message_label = ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel")
        self.message_label.pack(side=tk.LEFT)

        self.busy_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.busy_var,
                  style="Muted.TLabel", width=2).pack(side=tk.RIGHT, padx=(4, 0))

    def update_status(self):
        """Refresh status bar from UI state."""
        self.message_var.set(self._ui_state.status_message)
        self.busy_var.set("●" if self._ui_state.is_busy else "")
        style = "Error.TLabel" if self._ui_state.error_message else "Muted.TLabel"
        self.message_label.configure(style=style)
