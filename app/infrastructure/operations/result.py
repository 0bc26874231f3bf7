"""Operation result dataclass.

Uniform tagged outcome returned from lookups: either a value or an error
message describing why no value could be produced.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from infrastructure.operations.status import OperationStatus

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged outcome of an operation.

    Attributes:
        status: OperationStatus -- high-level outcome
        value: Optional[T] -- payload, set only on success
        error: Optional[str] -- human-friendly reason for logs/troubleshooting,
            set only on failure
    """

    status: OperationStatus
    value: Optional[T] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.status == OperationStatus.SUCCESS:
            if self.error is not None:
                raise ValueError("A successful Result cannot carry an error")
        elif self.error is None:
            raise ValueError("A failed Result requires an error message")
        elif self.value is not None:
            raise ValueError("A failed Result cannot carry a value")

    @property
    def has_value(self) -> bool:
        """True if the operation produced a value."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """Create a SUCCESS Result holding ``value``."""
        return cls(status=OperationStatus.SUCCESS, value=value)

    @classmethod
    def failure(
        cls, error: str, status: OperationStatus = OperationStatus.NOT_FOUND
    ) -> "Result[T]":
        """Create a failed Result.

        Args:
            error: Human-friendly error message
            status: OperationStatus describing the failure (default NOT_FOUND)

        Returns:
            Result with no value
        """
        if status == OperationStatus.SUCCESS:
            raise ValueError("failure() requires a non-success status")
        return cls(status=status, error=error)

    def unwrap(self) -> T:
        """Return the value or raise LookupError with the stored error."""
        if not self.has_value:
            raise LookupError(self.error)
        return self.value
