"""Domain error codes for the scheduled events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT = "INVALID_EVENT"
    STORE_FAILURE = "STORE_FAILURE"
    PARTIAL_DELETION = "PARTIAL_DELETION"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventError(DomainError):
    """Raised when a ScheduledEvent is built from inconsistent fields."""

    def __init__(self, reason: str) -> None:
        super().__init__(code=ErrorCode.INVALID_EVENT, message=reason)


class StoreFailure(DomainError):
    """Raised by store implementations when a backend read or write fails.

    The original backend exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message=f"Store operation failed: {operation}",
        )
        self.operation = operation


class PartialDeletionFailure(DomainError):
    """Raised when only one of the two deletions for an event went through.

    Nothing is rolled back. ``completed`` names the side that was removed
    ("event" or "confirms") and ``cause`` holds the failure of the other one.
    """

    def __init__(self, event_id: str, completed: str, cause: BaseException) -> None:
        super().__init__(
            code=ErrorCode.PARTIAL_DELETION,
            message=f"Event deletion partially applied, only {completed} removed",
        )
        self.event_id = event_id
        self.completed = completed
        self.cause = cause
