"""Byte-level key-value store over a single SQLite file.

Keys live in named buckets. All access goes through a transaction: ``view()``
for reads and ``update()`` for writes. An update commits only if its block
exits cleanly; any exception rolls every write in the block back.

Usage:
    store = KeyValueStore.open(path)
    store.ensure_bucket("config")
    with store.update() as tx:
        tx.put("config", "endpoint", b"https://example")
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from eldar.errors import (
    BucketCreateError,
    BucketMissingError,
    DirectoryUnavailableError,
    StorageError,
    StoreClosedError,
    StoreOpenError,
    WriteFailureError,
)
from eldar.utils.logger import get_logger

from .engine import get_engine, init_db
from .models import Bucket, Entry

logger = get_logger(__name__)


class Transaction:
    """Bucket/key operations bound to one session."""

    def __init__(self, session: Session, writable: bool):
        self._session = session
        self.writable = writable

    def bucket_exists(self, bucket: str) -> bool:
        return self._session.get(Bucket, bucket) is not None

    def _require_bucket(self, bucket: str) -> None:
        if not self.bucket_exists(bucket):
            raise BucketMissingError(bucket)

    def _require_writable(self) -> None:
        if not self.writable:
            raise StorageError("cannot write inside a read-only transaction")

    def create_bucket_if_not_exists(self, bucket: str) -> None:
        self._require_writable()
        if not self.bucket_exists(bucket):
            self._session.add(Bucket(name=bucket))
            self._session.flush()

    def get(self, bucket: str, key: str, *, must_exist: bool = True) -> Optional[bytes]:
        """Return the stored bytes, or ``None`` when the key is absent.

        A missing bucket raises ``BucketMissingError`` unless ``must_exist`` is
        false, in which case it reads as absent too.
        """
        if not self.bucket_exists(bucket):
            if must_exist:
                raise BucketMissingError(bucket)
            return None
        entry = self._session.get(Entry, (bucket, key))
        return None if entry is None else bytes(entry.value)

    def put(self, bucket: str, key: str, value: bytes) -> None:
        self._require_writable()
        self._require_bucket(bucket)
        entry = self._session.get(Entry, (bucket, key))
        if entry is None:
            self._session.add(Entry(bucket_name=bucket, key=key, value=bytes(value)))
        else:
            entry.value = bytes(value)
        self._session.flush()

    def delete(self, bucket: str, key: str) -> None:
        """Delete ``key``; deleting an absent key is not an error."""
        self._require_writable()
        self._require_bucket(bucket)
        entry = self._session.get(Entry, (bucket, key))
        if entry is not None:
            self._session.delete(entry)
            self._session.flush()


class KeyValueStore:
    """File-backed transactional store, opened once per process."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._engine = None
        self._sessions: Optional[sessionmaker] = None
        self._closed = False

    @classmethod
    def open(cls, path: Union[str, Path]) -> "KeyValueStore":
        store = cls(path)
        store.connect()
        return store

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def exists(self) -> bool:
        """Whether the store file is present on disk."""
        return self.path.exists()

    def connect(self) -> None:
        """Create parent directories and the schema; idempotent while open."""
        if self._engine is not None:
            return
        if self._closed:
            raise StoreClosedError(f"store {self.path} was closed")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryUnavailableError(
                f"failed to create database directory {self.path.parent}: {exc}"
            ) from exc

        engine = get_engine(self.path)
        try:
            init_db(engine)
        except SQLAlchemyError as exc:
            engine.dispose()
            raise StoreOpenError(f"failed to open database {self.path}: {exc}") from exc

        self._engine = engine
        self._sessions = sessionmaker(bind=engine, autoflush=False, autocommit=False)
        logger.debug("Opened store at %s", self.path)

    def _new_session(self) -> Session:
        if self._sessions is None:
            raise StoreClosedError(f"store {self.path} is not open")
        return self._sessions()

    @contextmanager
    def view(self) -> Iterator[Transaction]:
        """Read-only transaction."""
        session = self._new_session()
        try:
            yield Transaction(session, writable=False)
        except SQLAlchemyError as exc:
            raise StorageError(f"read from {self.path} failed: {exc}") from exc
        finally:
            session.rollback()
            session.close()

    @contextmanager
    def update(self) -> Iterator[Transaction]:
        """Read-write transaction; commits on success, rolls back on any error."""
        session = self._new_session()
        try:
            yield Transaction(session, writable=True)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise WriteFailureError(f"write to {self.path} failed: {exc}") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ensure_bucket(self, name: str) -> None:
        try:
            with self.update() as tx:
                tx.create_bucket_if_not_exists(name)
        except WriteFailureError as exc:
            raise BucketCreateError(f"failed to create bucket {name}: {exc}") from exc

    def get(self, bucket: str, key: str, *, must_exist: bool = True) -> Optional[bytes]:
        with self.view() as tx:
            return tx.get(bucket, key, must_exist=must_exist)

    def put(self, bucket: str, key: str, value: bytes) -> None:
        with self.update() as tx:
            tx.put(bucket, key, value)

    def delete(self, bucket: str, key: str) -> None:
        with self.update() as tx:
            tx.delete(bucket, key)

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if self._engine is not None:
            self._engine.dispose()
            logger.debug("Closed store at %s", self.path)
        self._engine = None
        self._sessions = None
        self._closed = True

    def __enter__(self) -> "KeyValueStore":
        self.connect()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
