"""Page navigation state machine.

The current page is an explicit ``NavState`` value: callers pass it in and keep
the ``NavState`` returned inside the ``Resolution``. Every page except
``UNKNOWN`` renders as-is. ``UNKNOWN`` runs the decision procedure over the
cached AppState and re-dispatches once to the page it picks, so a resolution
visits at most two pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from eldar.errors import UnreachablePageError
from eldar.state import AppState
from eldar.utils.logger import get_logger

logger = get_logger(__name__)

# UNKNOWN -> decided page
MAX_DISPATCH = 2


class AppPage(str, Enum):
    REGISTER = "register"
    CONFIG = "config"
    LOGIN = "login"
    GROUP = "group"
    BOARDS = "boards"
    USERS = "users"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NavState:
    page: AppPage = AppPage.UNKNOWN


@dataclass(frozen=True)
class Resolution:
    """Outcome of one evaluation.

    ``state`` is the state to keep; ``path`` lists every page visited in
    order. When ``error`` is set the input state is returned unchanged.
    """

    state: NavState
    path: Tuple[AppPage, ...] = ()
    error: Optional[UnreachablePageError] = None

    @property
    def page(self) -> AppPage:
        return self.state.page

    @property
    def ok(self) -> bool:
        return self.error is None


def decide(app_state: AppState) -> AppPage:
    """Pick the landing page from what is stored. Never returns UNKNOWN."""
    if not app_state.config.is_complete:
        return AppPage.CONFIG
    if not app_state.credentials.is_complete:
        return AppPage.LOGIN
    return AppPage.BOARDS


def resolve(state: NavState, app_state: AppState) -> Resolution:
    page = state.page
    visited = []
    for _ in range(MAX_DISPATCH):
        if not isinstance(page, AppPage):
            return Resolution(state=state, path=tuple(visited), error=UnreachablePageError(page))
        visited.append(page)
        if page is not AppPage.UNKNOWN:
            return Resolution(state=NavState(page=page), path=tuple(visited))
        page = decide(app_state)
        logger.debug("Re-dispatching %s -> %s", AppPage.UNKNOWN.value, page.value)

    return Resolution(state=state, path=tuple(visited), error=UnreachablePageError(page))


class NavigationController:
    """Evaluates navigation against one AppState.

    ``reload`` is called before an explicit request for ``UNKNOWN`` so the
    decision procedure sees freshly loaded records.
    """

    def __init__(self, app_state: AppState, reload: Optional[Callable[[], None]] = None):
        self._app_state = app_state
        self._reload = reload

    def current_page(self, state: NavState) -> Resolution:
        return resolve(state, self._app_state)

    def request_page(self, page: AppPage) -> Resolution:
        if page is AppPage.UNKNOWN and self._reload is not None:
            self._reload()
        return resolve(NavState(page=page), self._app_state)
