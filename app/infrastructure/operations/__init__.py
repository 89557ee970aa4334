"""Operation result types and status enums.

This module contains standardized result types for operations across
the converter, such as per-locale version fingerprint updates.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
