"""Operation result types and status enums.

Standardized tagged-outcome type returned from lookups across the
application: either a value or a human-readable error, never both.
"""

from infrastructure.operations.result import Result
from infrastructure.operations.status import OperationStatus

__all__ = [
    "Result",
    "OperationStatus",
]
