"""
Test suite for structured logging helpers.

System role: Verification of log value flattening and masking
"""

import logging

import pytest

from backend.models.user import UserRole
from backend.observability.log_utils import (
    log_with_context,
    mask_email,
    safe_log_value,
)


class TestMaskEmail:
    """Test suite for mask_email()."""

    @pytest.mark.parametrize(
        ("email", "expected"),
        [
            ("ada.lovelace@example.com", "a***@example.com"),
            ("x@example.com", "x***@example.com"),
            ("not-an-email", "***"),
            (None, "None"),
        ],
    )
    def test_masks_local_part(self, email, expected) -> None:
        """Test only the first character of the local part survives."""
        assert mask_email(email) == expected


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_enum_logs_its_value(self) -> None:
        assert safe_log_value(UserRole.ADMIN) == "admin"

    def test_collections_log_their_size(self) -> None:
        assert safe_log_value(["a", "b"]) == "list(2 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_values_are_truncated(self) -> None:
        result = safe_log_value("x" * 20, max_length=5)

        assert result.startswith("xxxxx...")
        assert "20 total" in result


class TestLogWithContext:
    """Test suite for log_with_context()."""

    def test_context_is_attached_as_strings(self, caplog) -> None:
        """Test context fields land on the record as flattened strings."""
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "Role check failed", caller_role=None, roles=["admin"])

        record = caplog.records[-1]
        assert record.getMessage() == "Role check failed"
        assert record.caller_role == "None"
        assert record.roles == "list(1 items)"
