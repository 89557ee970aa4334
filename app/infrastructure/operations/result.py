"""Outcome of a single step that the driver reports but does not raise."""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one operation, such as a locale's version update.

    Attributes:
        status: How the operation ended.
        message: Short text for logs and the run summary.
        data: Payload on success (the new VersionEntry for version updates).
        error_code: Stable identifier for a failure, e.g. ``FINGERPRINT_FAILED``.
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(OperationStatus.SUCCESS, message, data=data)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that a re-run with the same input would repeat."""
        return cls(OperationStatus.PERMANENT_ERROR, message, error_code=error_code)

    @classmethod
    def skipped(cls, message: str) -> "OperationResult":
        return cls(OperationStatus.SKIPPED, message)
