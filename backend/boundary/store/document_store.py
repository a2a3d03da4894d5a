"""
Document store adapter contract.

A capability-limited view of a document database: single-document
get/put/partial-update/delete by opaque id, and an ordered, filtered,
cursor-resumable query with a result limit. The repository layer never
talks to the store through anything wider than this.

Dependencies: None (contract only)
System role: Port between the repository layer and the storage engine
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Protocol

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

TIMESTAMP_FIELDS = (CREATED_AT, UPDATED_AT)


class DocumentMissingError(LookupError):
    """Raised by partial_update and delete when the target document is absent."""

    def __init__(self, collection: str, doc_id: str) -> None:
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Document {collection}/{doc_id} does not exist")


@dataclass(frozen=True)
class StoredDocument:
    """
    Snapshot of a stored document.

    Attributes:
        id: Opaque store-assigned id
        data: Document fields as written by the caller
        created_at: Store timestamp of the first write (UTC)
        updated_at: Store timestamp of the last write (UTC)
    """

    id: str
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def timestamp(self, name: str) -> datetime | None:
        """Return the store timestamp called ``name`` (createdAt/updatedAt)."""
        if name == CREATED_AT:
            return self.created_at
        if name == UPDATED_AT:
            return self.updated_at
        raise ValueError(f"Unknown timestamp field: {name}")


class DocumentStore(Protocol):
    """Document store contract used by repositories."""

    async def get(self, doc_id: str) -> StoredDocument | None:
        """Return the document with ``doc_id`` or None when absent."""

    async def put(self, fields: Mapping[str, Any], doc_id: str | None = None) -> str:
        """Write a document, assigning an id when none is given; return the id."""

    async def partial_update(self, doc_id: str, fields: Mapping[str, Any]) -> None:
        """Merge ``fields`` into an existing document and re-stamp updatedAt."""

    async def delete(self, doc_id: str) -> None:
        """Delete an existing document."""

    async def query(
        self,
        order_by: str | None = None,
        descending: bool = True,
        filters: Mapping[str, Any] | None = None,
        start_after: StoredDocument | None = None,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """Return documents matching ``filters`` in order, resuming after ``start_after``."""
