"""
Document store adapter package.

Exports the DocumentStore contract, the StoredDocument snapshot type and
the SQLAlchemy-backed implementation.
"""

from backend.boundary.store.document_store import (
    CREATED_AT,
    UPDATED_AT,
    DocumentMissingError,
    DocumentStore,
    StoredDocument,
)
from backend.boundary.store.sql_document_store import SqlDocumentStore, generate_document_id

__all__ = [
    "CREATED_AT",
    "UPDATED_AT",
    "DocumentMissingError",
    "DocumentStore",
    "StoredDocument",
    "SqlDocumentStore",
    "generate_document_id",
]
