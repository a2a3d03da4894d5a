"""
Database models package.

Exports:
  - DocumentModel: Stored document ORM model

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions
"""

from backend.boundary.db.models.document_model import DocumentModel

__all__ = [
    "DocumentModel",
]
