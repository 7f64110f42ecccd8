from catalog.domain.models import (
    CANCELLATION_REASON,
    Event,
    NotificationEnvelope,
    RequestContext,
    Venue,
)
from catalog.domain.value_objects import Capacity, EventId, EventStatus, Money, VenueId

__all__ = [
    "CANCELLATION_REASON",
    "Event",
    "Venue",
    "NotificationEnvelope",
    "RequestContext",
    "EventId",
    "VenueId",
    "EventStatus",
    "Money",
    "Capacity",
]
