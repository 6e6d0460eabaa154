import pytest

from eldar.config import Settings
from eldar.controller import AppController
from eldar.state import AppState
from eldar.storage import BUCKETS, ConfigRepository, CredentialRepository, KeyValueStore


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "eldar" / "eldar.db"


@pytest.fixture()
def store(db_path):
    kv = KeyValueStore.open(db_path)
    for bucket in BUCKETS:
        kv.ensure_bucket(bucket)
    try:
        yield kv
    finally:
        kv.close()


@pytest.fixture()
def app_state():
    return AppState()


@pytest.fixture()
def config_repo(store, app_state):
    return ConfigRepository(store, app_state)


@pytest.fixture()
def credential_repo(store, app_state):
    return CredentialRepository(store, app_state)


@pytest.fixture()
def settings(tmp_path):
    return Settings(data_dir=str(tmp_path), api_timeout=5.0, log_level="INFO")


@pytest.fixture()
def controller(settings):
    ctrl = AppController.start(settings)
    try:
        yield ctrl
    finally:
        ctrl.close()
