"""Operation status enumeration.

Status codes attached to lookup results so callers can tell a miss from
a malformed request without parsing the error message.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation produced a value
        NOT_FOUND: Requested key or resource does not exist
        INVALID: Request could not be served as given
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
