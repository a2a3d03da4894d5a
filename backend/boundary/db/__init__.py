"""
Database boundary layer: ORM models and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - DocumentModel: Stored document row
  - create_all_tables(), drop_all_tables(): Schema helpers

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing physical storage for the document store.
"""

from backend.boundary.db.base import Base, TimestampMixin, utc_now
from backend.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models.document_model import DocumentModel
from backend.boundary.db.create_tables import create_all_tables, drop_all_tables

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "utc_now",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "DocumentModel",
    # Schema
    "create_all_tables",
    "drop_all_tables",
]
