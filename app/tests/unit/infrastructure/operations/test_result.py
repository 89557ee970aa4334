"""Unit tests for infrastructure.operations result types."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationResult:
    """Tests for OperationResult factories."""

    def test_success(self):
        """success() carries data and is_success."""
        result = OperationResult.success(data={"hash": "abc"}, message="done")

        assert result.status == OperationStatus.SUCCESS
        assert result.is_success is True
        assert result.data == {"hash": "abc"}
        assert result.message == "done"

    def test_permanent_error(self):
        """permanent_error() records message and code."""
        result = OperationResult.permanent_error("unreadable", error_code="FINGERPRINT_FAILED")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.is_success is False
        assert result.error_code == "FINGERPRINT_FAILED"

    def test_skipped(self):
        """skipped() is not a success."""
        result = OperationResult.skipped("not found")

        assert result.status == OperationStatus.SKIPPED
        assert result.is_success is False
