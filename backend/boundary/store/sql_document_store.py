"""
SQLAlchemy-backed document store.

Implements the DocumentStore contract on top of the documents table.
Documents are JSON objects grouped by collection; timestamps are stamped
here at write time, so callers treat them as store-assigned.

Ordering on a timestamp always carries the document id as a secondary
key in the same direction, and start_after resumes strictly after the
(timestamp, id) pair of the snapshot. Records that share a timestamp are
therefore never skipped or repeated across pages.

Dependencies: sqlalchemy, backend.boundary.db
System role: Document store adapter over a relational database
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from backend.boundary.db.base import utc_now
from backend.boundary.db.models.document_model import DocumentModel
from backend.boundary.store.document_store import (
    CREATED_AT,
    UPDATED_AT,
    DocumentMissingError,
    StoredDocument,
)

logger = logging.getLogger(__name__)

_ORDER_COLUMNS: dict[str, InstrumentedAttribute] = {
    CREATED_AT: DocumentModel.created_at,
    UPDATED_AT: DocumentModel.updated_at,
}


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything written here is UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def generate_document_id() -> str:
    """Return a new opaque document id."""
    return uuid.uuid4().hex


class SqlDocumentStore:
    """
    Document store over an async SQLAlchemy session factory.

    Every call opens its own session and transaction; the store keeps no
    per-request state and is safe to share between concurrent requests.

    Attributes:
        collection: Name of the collection this store instance addresses
    """

    def __init__(self, session_factory: async_sessionmaker, collection: str) -> None:
        """
        Initialize store for one collection.

        Args:
            session_factory: Async session factory bound to the engine
            collection: Collection name (e.g. "users")
        """
        self._session_factory = session_factory
        self.collection = collection

    async def get(self, doc_id: str) -> StoredDocument | None:
        """
        Fetch a single document.

        Args:
            doc_id: Document id

        Returns:
            StoredDocument if found, None otherwise
        """
        async with self._session_factory() as session:
            row = await session.get(DocumentModel, (self.collection, doc_id))
            if row is None:
                return None
            return self._to_document(row)

    async def put(self, fields: Mapping[str, Any], doc_id: str | None = None) -> str:
        """
        Write a document.

        A new id is generated when doc_id is omitted. Writing to an id that
        already exists replaces its fields and keeps its createdAt.

        Args:
            fields: Document fields
            doc_id: Optional explicit id

        Returns:
            str: Id of the written document
        """
        doc_id = doc_id or generate_document_id()
        now = utc_now()

        async with self._session_factory() as session, session.begin():
            row = await session.get(DocumentModel, (self.collection, doc_id))
            if row is None:
                session.add(
                    DocumentModel(
                        collection=self.collection,
                        id=doc_id,
                        data=dict(fields),
                        created_at=now,
                        updated_at=now,
                    )
                )
            else:
                row.data = dict(fields)
                row.updated_at = max(now, _as_utc(row.created_at))

        logger.debug(
            "Document written",
            extra={"collection": self.collection, "doc_id": doc_id},
        )
        return doc_id

    async def partial_update(self, doc_id: str, fields: Mapping[str, Any]) -> None:
        """
        Merge fields into an existing document and re-stamp updatedAt.

        Args:
            doc_id: Document id
            fields: Fields to overwrite; fields not named are left as they are

        Raises:
            DocumentMissingError: If the document does not exist
        """
        async with self._session_factory() as session, session.begin():
            row = await session.get(
                DocumentModel,
                (self.collection, doc_id),
                with_for_update=True,
            )
            if row is None:
                raise DocumentMissingError(self.collection, doc_id)

            # Reassign rather than mutate so the JSON column is flagged dirty
            row.data = {**row.data, **fields}
            row.updated_at = max(utc_now(), _as_utc(row.created_at))

    async def delete(self, doc_id: str) -> None:
        """
        Delete a document.

        Args:
            doc_id: Document id

        Raises:
            DocumentMissingError: If the document does not exist
        """
        stmt = delete(DocumentModel).where(
            DocumentModel.collection == self.collection,
            DocumentModel.id == doc_id,
        )
        async with self._session_factory() as session, session.begin():
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise DocumentMissingError(self.collection, doc_id)

    async def query(
        self,
        order_by: str | None = None,
        descending: bool = True,
        filters: Mapping[str, Any] | None = None,
        start_after: StoredDocument | None = None,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """
        Run an ordered, filtered query over the collection.

        Args:
            order_by: Timestamp field to order by (createdAt or updatedAt);
                None orders by id only
            descending: Sort direction for both the order key and the id
            filters: Field -> value equality filters on document fields
            start_after: Snapshot of the document to resume after
            limit: Maximum number of documents to return

        Returns:
            list[StoredDocument]: Matching documents in order

        Raises:
            ValueError: If order_by names an unsupported field
            TypeError: If a filter value has an unsupported type
        """
        stmt = select(DocumentModel).where(DocumentModel.collection == self.collection)

        for name, value in (filters or {}).items():
            stmt = stmt.where(self._field_expression(name, value) == value)

        id_column = DocumentModel.id
        if order_by is None:
            stmt = stmt.order_by(id_column.desc() if descending else id_column.asc())
            if start_after is not None:
                stmt = stmt.where(
                    id_column < start_after.id if descending else id_column > start_after.id
                )
        else:
            column = _ORDER_COLUMNS.get(order_by)
            if column is None:
                raise ValueError(f"Unsupported order_by field: {order_by}")

            if descending:
                stmt = stmt.order_by(column.desc(), id_column.desc())
            else:
                stmt = stmt.order_by(column.asc(), id_column.asc())

            if start_after is not None:
                key = start_after.timestamp(order_by)
                if descending:
                    stmt = stmt.where(
                        or_(column < key, and_(column == key, id_column < start_after.id))
                    )
                else:
                    stmt = stmt.where(
                        or_(column > key, and_(column == key, id_column > start_after.id))
                    )

        if limit is not None:
            stmt = stmt.limit(limit)

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_document(row) for row in result.scalars().all()]

    @staticmethod
    def _field_expression(name: str, value: Any):
        element = DocumentModel.data[name]
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return element.as_boolean()
        if isinstance(value, int):
            return element.as_integer()
        if isinstance(value, float):
            return element.as_float()
        if isinstance(value, str):
            return element.as_string()
        raise TypeError(
            f"Unsupported filter value for field {name!r}: {type(value).__name__}"
        )

    @staticmethod
    def _to_document(row: DocumentModel) -> StoredDocument:
        return StoredDocument(
            id=row.id,
            data=dict(row.data or {}),
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )
