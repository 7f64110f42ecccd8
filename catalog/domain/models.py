"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in catalog/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from catalog.domain.errors import EventAlreadyCancelledError
from catalog.domain.value_objects import Capacity, EventId, EventStatus, Money, VenueId

CANCELLATION_REASON = "Event cancelled by organizer"


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: VenueId
    name: str
    city: str
    capacity: Capacity
    event_count: int = 0


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``cancelled_at`` is set if and only if the event is CANCELLED.
    """

    id: EventId
    venue_id: VenueId
    title: str
    event_type: str
    event_date: datetime
    base_price: Money
    status: EventStatus = EventStatus.ACTIVE
    cancelled_at: datetime | None = None
    venue_name: str | None = None
    city: str | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Event title cannot be empty")
        if (self.status is EventStatus.CANCELLED) != (self.cancelled_at is not None):
            raise ValueError("cancelled_at must be set exactly when status is CANCELLED")

    @property
    def is_cancelled(self) -> bool:
        return self.status is EventStatus.CANCELLED

    def cancel(self, at: datetime) -> "Event":
        """Return a copy of this event moved to CANCELLED at ``at``.

        Raises:
            EventAlreadyCancelledError: If the event is already cancelled.
        """
        if self.is_cancelled:
            raise EventAlreadyCancelledError(str(self.id))
        return replace(
            self,
            status=EventStatus.CANCELLED,
            cancelled_at=at.astimezone(timezone.utc),
        )


@dataclass(frozen=True)
class RequestContext:
    """Values scoped to one inbound request, passed explicitly to services."""

    correlation_id: str


@dataclass(frozen=True)
class NotificationEnvelope:
    """Cancellation notice sent to the Order Service. Never persisted."""

    event_id: EventId
    event_title: str
    cancelled_at: datetime
    correlation_id: str
    reason: str = CANCELLATION_REASON

    @classmethod
    def for_event(cls, event: Event, context: RequestContext) -> "NotificationEnvelope":
        if event.cancelled_at is None:
            raise ValueError("Only cancelled events can be announced")
        return cls(
            event_id=event.id,
            event_title=event.title,
            cancelled_at=event.cancelled_at,
            correlation_id=context.correlation_id,
        )

    def to_payload(self) -> dict:
        """JSON body of the webhook; the correlation id travels as a header."""
        return {
            "eventId": self.event_id.value,
            "eventTitle": self.event_title,
            "cancelledAt": self.cancelled_at.astimezone(timezone.utc).isoformat(),
            "reason": self.reason,
        }
