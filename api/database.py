"""
Store Gateway

This module owns the connection pool to the readings store and the
three queries the API runs against it.

Error policy:
- connect: raises StoreUnavailableError, startup must abort
- ensure_schema / insert: failures are logged and returned, never raised
- recent: failures are returned so the caller can fall back
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import ValidationError
from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    select,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool

from api.models import Reading
from engine.generator import GeneratedReading

logger = logging.getLogger(__name__)

T = TypeVar("T")

# =========================================
# Database Configuration
# =========================================

DEFAULT_DATABASE_URL = "postgresql://user:pass@db:5432/space_db"
RECENT_LIMIT = 10


def get_database_url() -> str:
    """Get database URL from environment."""
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


metadata = MetaData()

space_data = Table(
    "space_data",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("source", String(50)),
    Column("data", JSON().with_variant(JSONB(), "postgresql")),
    Column("fetched_at", DateTime(timezone=True)),
)


class StoreUnavailableError(RuntimeError):
    """The store could not be reached when connecting."""


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """
    Outcome of a store operation.

    Exactly one of `value` / `error` is meaningful; check `ok` first.
    """
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "StoreResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "StoreResult":
        return cls(error=error)


# =========================================
# Gateway
# =========================================

class StoreGateway:
    """
    Handle on the readings store.

    Wraps a SQLAlchemy engine; the engine's pool does its own locking, so
    one gateway is shared by all concurrent requests.

    Example:
        store = StoreGateway.connect(get_database_url())
        store.ensure_schema()
        store.insert(reading)
        result = store.recent()
    """

    def __init__(self, engine: Engine):
        """
        Initialize with an existing engine.

        Args:
            engine: SQLAlchemy engine bound to the store
        """
        self.engine = engine

    @classmethod
    def connect(cls, url: str) -> "StoreGateway":
        """
        Create a pooled engine and verify the store is reachable.

        Args:
            url: SQLAlchemy database URL

        Returns:
            Connected gateway

        Raises:
            StoreUnavailableError: if no connection could be opened
        """
        engine = None
        try:
            engine = create_engine(
                url,
                poolclass=QueuePool,
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
                echo=os.getenv("SQL_ECHO", "false").lower() == "true"
            )
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            if engine is not None:
                engine.dispose()
            raise StoreUnavailableError(f"Cannot connect to store: {e}") from e

        return cls(engine)

    def close(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()

    def ensure_schema(self) -> StoreResult:
        """Create the readings table if it does not exist."""
        try:
            metadata.create_all(self.engine, checkfirst=True)
            logger.info("Table space_data verified")
            return StoreResult.success()
        except SQLAlchemyError as e:
            logger.error(f"Failed to create schema: {e}")
            return StoreResult.failure(e)

    def insert(self, reading: GeneratedReading) -> StoreResult:
        """
        Store a freshly generated reading.

        Args:
            reading: Reading to persist

        Returns:
            Result carrying the new row id
        """
        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    space_data.insert().values(
                        source=reading.source,
                        data=reading.payload,
                        fetched_at=reading.fetched_at
                    )
                )
                return StoreResult.success(result.inserted_primary_key[0])
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert reading: {e}")
            return StoreResult.failure(e)

    def recent(self, limit: int = RECENT_LIMIT) -> StoreResult:
        """
        Fetch the most recently captured readings.

        Args:
            limit: Maximum readings to return

        Returns:
            Result carrying readings ordered newest first
        """
        query = (
            select(space_data)
            .order_by(space_data.c.fetched_at.desc(), space_data.c.id.desc())
            .limit(limit)
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
            readings: List[Reading] = [
                Reading.model_validate(dict(row)) for row in rows
            ]
            return StoreResult.success(readings)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Failed to read recent readings: {e}")
            return StoreResult.failure(e)
