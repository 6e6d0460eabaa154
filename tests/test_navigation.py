import pytest

from eldar.errors import UnreachablePageError
from eldar.models import Config, Credentials
from eldar.navigation import (
    MAX_DISPATCH,
    AppPage,
    NavigationController,
    NavState,
    decide,
    resolve,
)
from eldar.state import AppState

FULL_CONFIG = Config(endpoint="https://x", anon_key="key1")
FULL_CREDS = Credentials(username="bob", access_token="tok1", refresh_token="ref1")

RENDERED = [p for p in AppPage if p is not AppPage.UNKNOWN]


@pytest.mark.parametrize(
    "config",
    [
        Config(),
        Config(endpoint="https://x"),
        Config(anon_key="key1"),
    ],
)
@pytest.mark.parametrize("creds", [Credentials(), FULL_CREDS])
def test_incomplete_config_resolves_to_config(config, creds):
    res = resolve(NavState(), AppState(config=config, credentials=creds))
    assert res.ok
    assert res.page is AppPage.CONFIG
    assert res.path == (AppPage.UNKNOWN, AppPage.CONFIG)


@pytest.mark.parametrize(
    "creds",
    [
        Credentials(),
        Credentials(username="bob"),
        Credentials(username="bob", access_token="tok1"),
        Credentials(access_token="tok1", refresh_token="ref1"),
    ],
)
def test_incomplete_credentials_resolve_to_login(creds):
    res = resolve(NavState(), AppState(config=FULL_CONFIG, credentials=creds))
    assert res.page is AppPage.LOGIN


def test_complete_records_resolve_to_boards():
    res = resolve(NavState(), AppState(config=FULL_CONFIG, credentials=FULL_CREDS))
    assert res.page is AppPage.BOARDS
    assert res.state == NavState(page=AppPage.BOARDS)


@pytest.mark.parametrize("page", RENDERED)
def test_explicit_pages_render_regardless_of_state(page):
    for app_state in (AppState(), AppState(config=FULL_CONFIG, credentials=FULL_CREDS)):
        res = resolve(NavState(page=page), app_state)
        assert res.ok
        assert res.page is page
        assert res.path == (page,)


def test_resolution_never_visits_more_than_two_pages():
    for app_state in (
        AppState(),
        AppState(config=FULL_CONFIG),
        AppState(config=FULL_CONFIG, credentials=FULL_CREDS),
    ):
        res = resolve(NavState(), app_state)
        assert len(res.path) <= MAX_DISPATCH
        assert res.page is not AppPage.UNKNOWN


def test_decide_never_returns_unknown():
    assert decide(AppState()) is AppPage.CONFIG
    assert decide(AppState(config=FULL_CONFIG)) is AppPage.LOGIN
    assert decide(AppState(config=FULL_CONFIG, credentials=FULL_CREDS)) is AppPage.BOARDS


@pytest.mark.parametrize("bogus", ["boards", 3, None])
def test_value_outside_enum_is_reported_not_raised(bogus):
    state = NavState(page=bogus)
    res = resolve(state, AppState())
    assert not res.ok
    assert isinstance(res.error, UnreachablePageError)
    assert res.error.page == bogus
    assert res.state is state


def test_controller_request_bypasses_decision():
    app_state = AppState(config=FULL_CONFIG, credentials=FULL_CREDS)
    nav = NavigationController(app_state)
    assert nav.request_page(AppPage.REGISTER).page is AppPage.REGISTER
    assert nav.request_page(AppPage.CONFIG).page is AppPage.CONFIG


def test_request_unknown_reloads_before_deciding():
    app_state = AppState()

    def reload():
        app_state.config = FULL_CONFIG

    nav = NavigationController(app_state, reload=reload)
    assert nav.current_page(NavState()).page is AppPage.CONFIG
    assert nav.request_page(AppPage.UNKNOWN).page is AppPage.LOGIN


def test_request_explicit_page_does_not_reload():
    calls = []
    nav = NavigationController(AppState(), reload=lambda: calls.append(1))
    nav.request_page(AppPage.LOGIN)
    assert calls == []
