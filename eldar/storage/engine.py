"""Database engine helpers.

The store is a single SQLite file. Every connection turns on foreign keys and
full fsync so a committed transaction survives a crash.
"""

from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from .models import Base


def get_engine(db_path: Path) -> Engine:
    """Return a SQLAlchemy engine bound to ``db_path``.

    The parent directory must already exist; SQLite creates the file lazily.
    """
    engine = create_engine(f"sqlite:///{db_path}", echo=False, future=True)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA synchronous=FULL")
        cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """Create tables if they don't exist."""
    Base.metadata.create_all(engine)
