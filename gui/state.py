"""UI-only state container.

Persisted records live in ``eldar.state.AppState``; this holds what the shell
shows around the current page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class UiState:
    status_message: str = "Ready"
    error_message: Optional[str] = None
    is_busy: bool = False

    def show_error(self, message: str) -> None:
        self.error_message = message
        self.status_message = message

    def clear_error(self) -> None:
        self.error_message = None
