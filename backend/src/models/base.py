"""Base SQLAlchemy declarative base for all models"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base
from sqlalchemy import TypeDecorator, JSON
from sqlalchemy.dialects.postgresql import JSONB, ARRAY
from sqlalchemy.types import Text


class PortableJSONB(TypeDecorator):
    """JSON type that works with both PostgreSQL (JSONB) and SQLite (JSON).

    Uses JSONB on PostgreSQL for efficient indexing and querying,
    falls back to JSON on SQLite for testing compatibility.
    """
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class PortableTextArray(TypeDecorator):
    """TEXT[] on PostgreSQL, JSON list everywhere else.

    Design jobs keep file URLs as text arrays; SQLite has no array type
    so the list is stored as a JSON document instead.
    """
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(ARRAY(Text()))
        else:
            return dialect.type_descriptor(JSON())


def utcnow() -> datetime:
    """Naive UTC timestamp used for every stored datetime column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


Base = declarative_base()
