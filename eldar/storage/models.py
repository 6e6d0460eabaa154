from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, LargeBinary, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Bucket(Base):
    """A named namespace of keys (``config``, ``credentials``)."""

    __tablename__ = "buckets"

    name = Column(String, primary_key=True)
    created_at = Column(DateTime, default=_utcnow)

    entries = relationship(
        "Entry", back_populates="bucket", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Bucket(name={self.name})"


class Entry(Base):
    __tablename__ = "entries"

    bucket_name = Column(String, ForeignKey("buckets.name"), primary_key=True)
    key = Column(String, primary_key=True)
    value = Column(LargeBinary, nullable=False)  # opaque bytes, UTF-8 by convention
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    bucket = relationship("Bucket", back_populates="entries")

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Entry(bucket={self.bucket_name}, key={self.key})"
