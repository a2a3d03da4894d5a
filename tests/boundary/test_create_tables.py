"""
Test suite for the schema helpers.

System role: Verification of table creation and teardown
"""

from sqlalchemy import inspect

from backend.boundary.db.create_tables import create_all_tables, drop_all_tables


async def _table_names(engine) -> list[str]:
    async with engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


class TestSchemaHelpers:
    """Test suite for create_all_tables/drop_all_tables."""

    async def test_create_is_idempotent(self, test_async_engine) -> None:
        """Test creating over an existing schema leaves the documents table in place."""
        await create_all_tables(test_async_engine)

        assert "documents" in await _table_names(test_async_engine)

    async def test_drop_removes_documents_table(self, test_async_engine) -> None:
        """Test drop_all_tables removes the schema and create restores it."""
        # Act
        await drop_all_tables(test_async_engine)
        dropped = await _table_names(test_async_engine)
        await create_all_tables(test_async_engine)

        # Assert
        assert "documents" not in dropped
        assert "documents" in await _table_names(test_async_engine)
