"""Unit tests for infrastructure.logging.context module."""

import pytest
import structlog

from infrastructure.logging.context import (
    bind_run_context,
    clear_run_context,
    get_run_id,
)


@pytest.mark.unit
class TestBindRunContext:
    """Test suite for bind_run_context context manager."""

    def test_generates_run_id(self):
        """A run id is generated and yielded when none is bound."""
        with bind_run_context() as run_id:
            assert run_id
            assert get_run_id() == run_id

    def test_uses_provided_run_id(self):
        """Provided run id is used instead of generating one."""
        with bind_run_context(run_id="run-123") as run_id:
            assert run_id == "run-123"
            assert get_run_id() == "run-123"

    def test_nested_blocks_reuse_run_id(self):
        """Nested blocks keep the outer run id."""
        with bind_run_context(run_id="outer"):
            with bind_run_context(locale="fr"):
                assert get_run_id() == "outer"
                assert structlog.contextvars.get_contextvars()["locale"] == "fr"
            assert get_run_id() == "outer"
            assert "locale" not in structlog.contextvars.get_contextvars()

    def test_nested_rebind_restores_outer_value(self):
        """A key rebound in a nested block gets its outer value back."""
        with bind_run_context(namespace="auth"):
            with bind_run_context(namespace="validation"):
                assert structlog.contextvars.get_contextvars()["namespace"] == "validation"
            assert structlog.contextvars.get_contextvars()["namespace"] == "auth"

    def test_none_values_are_skipped(self):
        """None values are not bound."""
        with bind_run_context(locale=None):
            assert "locale" not in structlog.contextvars.get_contextvars()

    def test_context_cleared_on_exit(self):
        """Context is removed after the block, even on error."""
        with pytest.raises(RuntimeError):
            with bind_run_context(locale="en"):
                raise RuntimeError("boom")

        assert get_run_id() is None
        assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.unit
def test_clear_run_context():
    """clear_run_context removes everything."""
    structlog.contextvars.bind_contextvars(run_id="abc", locale="en")

    clear_run_context()

    assert get_run_id() is None
