"""Page view registry."""

from __future__ import annotations

from typing import Dict, Type

from eldar.navigation import AppPage
from gui.views.base import BaseView
from gui.views.config import ConfigView
from gui.views.login import LoginView
from gui.views.placeholder import BoardsView, GroupView, UsersView
from gui.views.register import RegisterView

VIEWS: Dict[AppPage, Type[BaseView]] = {
    AppPage.REGISTER: RegisterView,
    AppPage.CONFIG: ConfigView,
    AppPage.LOGIN: LoginView,
    AppPage.GROUP: GroupView,
    AppPage.BOARDS: BoardsView,
    AppPage.USERS: UsersView,
}


def view_for(page: AppPage) -> BaseView:
    """Build the view for a renderable page. UNKNOWN has no view."""
    try:
        return VIEWS[page]()
    except KeyError:
        raise ValueError(f"No view for page {page!r}") from None
