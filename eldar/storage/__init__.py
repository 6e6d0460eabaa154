"""Local persistence: key-value store and the repositories built on it."""
from .engine import get_engine, init_db
from .kv_store import KeyValueStore, Transaction
from .models import Base, Bucket, Entry
from .repository import (
    BUCKETS,
    CONFIG_BUCKET,
    CREDENTIALS_BUCKET,
    ConfigRepository,
    CredentialRepository,
)

__all__ = [
    "get_engine",
    "init_db",
    "KeyValueStore",
    "Transaction",
    "Base",
    "Bucket",
    "Entry",
    "BUCKETS",
    "CONFIG_BUCKET",
    "CREDENTIALS_BUCKET",
    "ConfigRepository",
    "CredentialRepository",
]
