"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    BRANCH_NOT_FOUND = "BRANCH_NOT_FOUND"
    INVALID_STATE = "INVALID_STATE"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    NOT_REGISTERED = "NOT_REGISTERED"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    INVALID_RATING = "INVALID_RATING"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"


@dataclass(frozen=True)
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
        object.__setattr__(self, "event_id", event_id)


class VenueNotFoundError(DomainError):
    """Raised when a venue is not found."""

    def __init__(self, venue_id: str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        object.__setattr__(self, "venue_id", venue_id)


class BranchNotFoundError(DomainError):
    """Raised when a branch is not found."""

    def __init__(self, branch_id: str) -> None:
        super().__init__(
            code=ErrorCode.BRANCH_NOT_FOUND,
            message="Branch not found",
        )
        object.__setattr__(self, "branch_id", branch_id)


class InvalidEventStateError(DomainError):
    """Raised when an event's status does not allow the operation."""

    def __init__(self, event_id: str, status: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATE,
            message=f"Operation not allowed while event is {status}",
        )
        object.__setattr__(self, "event_id", event_id)
        object.__setattr__(self, "status", status)


class AlreadyRegisteredError(DomainError):
    """Raised when a student registers twice for the same event."""

    def __init__(self, event_id: str, student_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="Student is already registered for this event",
        )
        object.__setattr__(self, "event_id", event_id)
        object.__setattr__(self, "student_id", student_id)


class NotRegisteredError(DomainError):
    """Raised when cancelling a registration that does not exist."""

    def __init__(self, event_id: str, student_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_REGISTERED,
            message="Student is not registered for this event",
        )
        object.__setattr__(self, "event_id", event_id)
        object.__setattr__(self, "student_id", student_id)


class CapacityExceededError(DomainError):
    """Raised when an event has no remaining places."""

    def __init__(self, event_id: str, capacity: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message="Event is full",
        )
        object.__setattr__(self, "event_id", event_id)
        object.__setattr__(self, "capacity", capacity)


class InvalidRatingError(DomainError):
    """Raised when a feedback rating is outside the allowed range."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_RATING,
            message=detail,
        )


class ValidationError(DomainError):
    """Raised for malformed input such as an empty required field."""

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=f"{field}: {detail}",
        )
        object.__setattr__(self, "field", field)


class PermissionDeniedError(DomainError):
    """Raised when the caller's role may not perform an operation."""

    def __init__(self, role: str, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERMISSION_DENIED,
            message=f"Role '{role}' may not {operation.replace('_', ' ')}",
        )
        object.__setattr__(self, "operation", operation)


class StoreCorruptedError(RuntimeError):
    """A stored snapshot broke an invariant. Not recoverable."""

    def __init__(self, event_id: str, problems: list[str]) -> None:
        super().__init__(f"Event {event_id} is corrupted: {'; '.join(problems)}")
        self.event_id = event_id
        self.problems = problems
