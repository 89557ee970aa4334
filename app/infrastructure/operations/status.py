"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of operations
so the driver can decide how to report them.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Non-retryable error (unreadable or invalid input)
        SKIPPED: Operation was not attempted
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    SKIPPED = "skipped"
