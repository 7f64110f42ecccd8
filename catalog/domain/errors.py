"""Domain error codes for the catalog module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_VENUE_ID = "INVALID_VENUE_ID"
    EVENT_ALREADY_CANCELLED = "EVENT_ALREADY_CANCELLED"
    VENUE_IN_USE = "VENUE_IN_USE"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


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


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidVenueIdError(DomainError):
    """Raised when a venue ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VENUE_ID,
            message="Invalid venue ID format",
        )


class EventAlreadyCancelledError(DomainError):
    """Raised when a cancelled event is asked to transition again."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_CANCELLED,
            message="Event is already cancelled",
        )
        object.__setattr__(self, "event_id", event_id)


class VenueInUseError(DomainError):
    """Raised when deleting a venue that still has events."""

    def __init__(self, venue_id: str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_IN_USE,
            message="Venue still has events",
        )
        object.__setattr__(self, "venue_id", venue_id)


class PersistenceError(DomainError):
    """Raised when a store write fails. The change did not take effect."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILED,
            message="Could not save changes",
        )
        object.__setattr__(self, "operation", operation)
