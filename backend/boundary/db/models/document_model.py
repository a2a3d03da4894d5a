"""
Stored document ORM model.

One row per schema-flexible document. Documents are grouped into named
collections and addressed by collection + opaque id; the document body
lives in a JSON column.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Physical storage for the document store adapter
"""

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin


class DocumentModel(Base, TimestampMixin):
    """
    Document row.

    Attributes:
        collection: Collection name (e.g. "users")
        id: Opaque document id, unique within the collection
        data: Document fields (JSON object)
        created_at: Write timestamp of the first put (UTC)
        updated_at: Timestamp of the last write (UTC)

    Indexes:
        ix_documents_collection_created: keyset pagination by
        (created_at, id) within a collection
    """

    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        doc="Collection name",
    )

    id: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        doc="Opaque document id",
    )

    data: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Document fields",
    )

    __table_args__ = (
        Index("ix_documents_collection_created", "collection", "created_at", "id"),
    )
