"""Repositories for the config and credentials buckets.

Each operation is one store transaction. Loads substitute the empty string for
any missing key; saves write every field or none. On success the shared
AppState is updated to the values just read or written.
"""
from typing import ClassVar, Dict, Generic, Type, TypeVar

from pydantic import BaseModel

from eldar.errors import RepositoryError, StorageError
from eldar.models import Config, Credentials
from eldar.state import AppState
from eldar.utils.logger import get_logger

from .kv_store import KeyValueStore

logger = get_logger(__name__)

CONFIG_BUCKET = "config"
CREDENTIALS_BUCKET = "credentials"
BUCKETS = (CONFIG_BUCKET, CREDENTIALS_BUCKET)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _decode(raw) -> str:
    if raw is None:
        return ""
    return raw.decode("utf-8", errors="replace")


class _BucketRepository(Generic[RecordT]):
    bucket: ClassVar[str]
    record_type: ClassVar[Type[BaseModel]]
    # model field name -> persisted key
    keys: ClassVar[Dict[str, str]]
    label: ClassVar[str]

    def __init__(self, store: KeyValueStore, state: AppState):
        self._store = store
        self._state = state

    def _cache(self, record: RecordT) -> None:
        raise NotImplementedError

    def load(self) -> RecordT:
        try:
            with self._store.view() as tx:
                values = {
                    field: _decode(tx.get(self.bucket, key))
                    for field, key in self.keys.items()
                }
        except StorageError as exc:
            raise RepositoryError(f"failed to load {self.label}: {exc}") from exc

        record = self.record_type(**values)
        self._cache(record)
        logger.debug("Loaded %s from %s", self.label, self._store.path)
        return record

    def _save(self, record: RecordT) -> RecordT:
        try:
            with self._store.update() as tx:
                for field, key in self.keys.items():
                    tx.put(self.bucket, key, getattr(record, field).encode("utf-8"))
        except StorageError as exc:
            raise RepositoryError(f"failed to save {self.label}: {exc}") from exc

        self._cache(record)
        logger.info("Saved %s to %s", self.label, self._store.path)
        return record


class ConfigRepository(_BucketRepository[Config]):
    bucket = CONFIG_BUCKET
    record_type = Config
    keys = {"endpoint": "endpoint", "anon_key": "anonKey"}
    label = "config"

    def _cache(self, record: Config) -> None:
        self._state.config = record

    def save(self, endpoint: str, anon_key: str) -> Config:
        return self._save(Config(endpoint=endpoint, anon_key=anon_key))


class CredentialRepository(_BucketRepository[Credentials]):
    bucket = CREDENTIALS_BUCKET
    record_type = Credentials
    keys = {
        "username": "username",
        "access_token": "access_token",
        "refresh_token": "refresh_token",
    }
    label = "credentials"

    def _cache(self, record: Credentials) -> None:
        self._state.credentials = record

    def save(self, username: str, access_token: str, refresh_token: str) -> Credentials:
        return self._save(
            Credentials(
                username=username,
                access_token=access_token,
                refresh_token=refresh_token,
            )
        )

    def clear(self) -> bool:
        """Delete all three credential keys in one transaction.

        Returns False when the store file does not exist (nothing to clear);
        no file is created in that case. A missing bucket in an existing store
        is an error.
        """
        if not self._store.is_open and not self._store.exists():
            logger.info("Database file %s does not exist. Nothing to clear.", self._store.path)
            return False

        try:
            self._store.connect()
            with self._store.update() as tx:
                for key in self.keys.values():
                    tx.delete(self.bucket, key)
        except StorageError as exc:
            raise RepositoryError(f"failed to clear credentials: {exc}") from exc

        self._cache(Credentials())
        logger.info("Credentials cleared successfully")
        return True
