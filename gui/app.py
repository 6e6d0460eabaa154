"""Main GUI application object.

``EldarApp`` turns user actions into controller calls and keeps track of the
view being shown. It never touches Tk itself; ``gui.window.TkShell`` renders
whatever view it returns.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, Optional

from eldar.config import get_settings
from eldar.controller import AppController
from eldar.errors import RepositoryError, StorageError
from eldar.navigation import AppPage, Resolution
from eldar.utils.logger import setup_logging
from gui.state import UiState
from gui.utils.logging import log
from gui.validators import (
    FormValidationError,
    validate_email,
    validate_password,
    validate_password_confirmation,
)
from gui.views import view_for
from gui.views.base import BaseView


@dataclass
class EldarApp:
    controller: AppController
    ui: UiState = field(default_factory=UiState)
    view: Optional[BaseView] = None

    def _show(self, resolution: Resolution) -> Optional[BaseView]:
        if not resolution.ok:
            self.ui.show_error(str(resolution.error))
            return self.view
        self.view = view_for(resolution.page)
        return self.view

    def refresh(self) -> Optional[BaseView]:
        """Render whatever the controller's current page resolves to."""
        return self._show(self.controller.current_page())

    def switch_view(self, page: AppPage) -> Optional[BaseView]:
        """Switch the active view."""
        self.ui.clear_error()
        return self._show(self.controller.request_page(page))

    # -------------------------
    # Form submissions
    # -------------------------

    def submit(self, values: Dict[str, str]) -> Optional[BaseView]:
        """Dispatch the current view's form to its handler."""
        name = self.view.name if self.view else None
        if name == "config":
            return self.submit_config(values.get("endpoint", ""), values.get("anon_key", ""))
        if name == "login":
            return self.submit_login(values.get("email", ""), values.get("password", ""))
        if name == "register":
            return self.submit_register(
                values.get("email", ""), values.get("password", ""), values.get("confirm", "")
            )
        return self.view

    def submit_config(self, endpoint: str, anon_key: str) -> Optional[BaseView]:
        try:
            self.controller.save_config(endpoint.strip(), anon_key.strip())
        except RepositoryError as exc:
            log(f"Saving config failed: {exc}", logging.ERROR)
            self.ui.show_error(str(exc))
            return self.view
        view = self.switch_view(AppPage.UNKNOWN)
        self.ui.status_message = "Config saved"
        return view

    def submit_login(self, email: str, password: str) -> Optional[BaseView]:
        try:
            validate_email(email)
        except FormValidationError as exc:
            self.ui.show_error(str(exc))
            return self.view
        self.ui.clear_error()
        log(f"Login requested for {email}")
        self.ui.status_message = "Login is not available yet"
        return self.view

    def submit_register(self, email: str, password: str, confirm: str) -> Optional[BaseView]:
        try:
            validate_email(email)
            validate_password(password)
            validate_password_confirmation(password, confirm)
        except FormValidationError as exc:
            self.ui.show_error(str(exc))
            return self.view
        self.ui.clear_error()
        log(f"Registration requested for {email}")
        self.ui.status_message = "Registration is not available yet"
        return self.view

    # -------------------------
    # Secondary actions
    # -------------------------

    def trigger(self, action: str) -> Optional[BaseView]:
        if action == "register":
            return self.switch_view(AppPage.REGISTER)
        if action == "sign_out":
            return self.sign_out()
        log(f"Ignoring unknown action {action!r}", logging.WARNING)
        return self.view

    def sign_out(self) -> Optional[BaseView]:
        try:
            self.controller.clear_credentials()
        except RepositoryError as exc:
            log(f"Clearing credentials failed: {exc}", logging.ERROR)
            self.ui.show_error(str(exc))
            return self.view
        view = self.switch_view(AppPage.UNKNOWN)
        self.ui.status_message = "Signed out"
        return view

    def run(self) -> None:
        """Start the Tk event loop."""
        from gui.window import TkShell

        TkShell(self).run()


def main(argv=None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        controller = AppController.start(settings)
    except StorageError as exc:
        log(f"Startup failed: {exc}", logging.CRITICAL)
        return 1

    app = EldarApp(controller)
    try:
        app.run()
    finally:
        controller.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
