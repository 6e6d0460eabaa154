import os

import pytest

from eldar.errors import BucketMissingError, RepositoryError, WriteFailureError
from eldar.models import Config, Credentials
from eldar.state import AppState
from eldar.storage import CredentialRepository, KeyValueStore, Transaction
from eldar.storage.repository import ConfigRepository


def test_fresh_store_loads_empty_config(config_repo):
    assert config_repo.load() == Config(endpoint="", anon_key="")


def test_save_then_load_config(config_repo, app_state):
    config_repo.save("https://x", "key1")
    assert app_state.config == Config(endpoint="https://x", anon_key="key1")

    loaded = config_repo.load()
    assert loaded.endpoint == "https://x"
    assert loaded.anon_key == "key1"


def test_config_stores_anon_key_as_camel_case(config_repo, store):
    config_repo.save("https://x", "key1")
    assert store.get("config", "endpoint") == b"https://x"
    assert store.get("config", "anonKey") == b"key1"


def test_credentials_round_trip(credential_repo):
    credential_repo.save("bob", "tok1", "ref1")
    creds = credential_repo.load()
    assert (creds.username, creds.access_token, creds.refresh_token) == ("bob", "tok1", "ref1")


def test_credentials_round_trip_unicode(credential_repo, store):
    credential_repo.save("zoë", "tök", "réf")
    assert credential_repo.load() == Credentials(username="zoë", access_token="tök", refresh_token="réf")
    assert store.get("credentials", "username") == "zoë".encode("utf-8")


def test_partial_keys_load_as_empty_strings(credential_repo, store):
    store.put("credentials", "username", b"bob")
    creds = credential_repo.load()
    assert creds == Credentials(username="bob")
    assert not creds.is_complete


def test_load_refreshes_app_state(credential_repo, store, app_state):
    store.put("credentials", "username", b"alice")
    credential_repo.load()
    assert app_state.credentials.username == "alice"


def test_save_clear_load(credential_repo, app_state):
    credential_repo.save("bob", "tok1", "ref1")
    assert credential_repo.clear() is True
    assert app_state.credentials == Credentials()
    assert credential_repo.load() == Credentials(username="", access_token="", refresh_token="")


def test_clear_twice_succeeds(credential_repo):
    credential_repo.save("bob", "tok1", "ref1")
    credential_repo.clear()
    credential_repo.clear()
    assert credential_repo.load().is_empty


def test_clear_without_store_file_creates_nothing(tmp_path):
    path = tmp_path / "eldar" / "eldar.db"
    repo = CredentialRepository(KeyValueStore(path), AppState())

    assert repo.clear() is False
    assert repo.clear() is False
    assert not path.exists()
    assert not path.parent.exists()


def test_clear_opens_existing_store_file(db_path, store):
    store.put("credentials", "username", b"bob")
    store.close()

    kv = KeyValueStore(db_path)
    repo = CredentialRepository(kv, AppState())
    assert repo.clear() is True
    kv.close()
    reopened = KeyValueStore.open(db_path)
    try:
        assert reopened.get("credentials", "username") is None
    finally:
        reopened.close()


def test_clear_with_missing_bucket_is_an_error(tmp_path):
    kv = KeyValueStore.open(tmp_path / "eldar.db")
    try:
        repo = CredentialRepository(kv, AppState())
        with pytest.raises(RepositoryError) as excinfo:
            repo.clear()
        assert isinstance(excinfo.value.__cause__, BucketMissingError)
    finally:
        kv.close()


def test_load_with_missing_bucket_is_an_error(tmp_path):
    kv = KeyValueStore.open(tmp_path / "eldar.db")
    try:
        with pytest.raises(RepositoryError):
            ConfigRepository(kv, AppState()).load()
    finally:
        kv.close()


def test_failed_field_write_persists_nothing(credential_repo, app_state, monkeypatch):
    credential_repo.save("bob", "tok1", "ref1")

    original_put = Transaction.put

    def flaky_put(self, bucket, key, value):
        if key == "refresh_token":
            raise WriteFailureError("failed to set refresh token")
        return original_put(self, bucket, key, value)

    monkeypatch.setattr(Transaction, "put", flaky_put)
    with pytest.raises(RepositoryError) as excinfo:
        credential_repo.save("eve", "tok2", "ref2")
    assert isinstance(excinfo.value.__cause__, WriteFailureError)

    # cache untouched by the failed save
    assert app_state.credentials == Credentials(username="bob", access_token="tok1", refresh_token="ref1")

    monkeypatch.undo()
    assert credential_repo.load() == Credentials(username="bob", access_token="tok1", refresh_token="ref1")


def test_config_and_credentials_are_independent(config_repo, credential_repo, monkeypatch):
    config_repo.save("https://x", "key1")

    def broken_put(self, bucket, key, value):
        raise WriteFailureError("nope")

    monkeypatch.setattr(Transaction, "put", broken_put)
    with pytest.raises(RepositoryError):
        credential_repo.save("bob", "tok1", "ref1")
    monkeypatch.undo()

    assert config_repo.load() == Config(endpoint="https://x", anon_key="key1")


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission checks are bypassed for root",
)
def test_read_only_directory_rejects_save_and_keeps_state(db_path, credential_repo):
    credential_repo.save("bob", "tok1", "ref1")
    directory = db_path.parent
    os.chmod(db_path, 0o444)
    os.chmod(directory, 0o555)
    try:
        with pytest.raises(RepositoryError) as excinfo:
            credential_repo.save("eve", "tok2", "ref2")
        assert isinstance(excinfo.value.__cause__, WriteFailureError)
        assert credential_repo.load() == Credentials(
            username="bob", access_token="tok1", refresh_token="ref1"
        )
    finally:
        os.chmod(directory, 0o755)
        os.chmod(db_path, 0o644)
