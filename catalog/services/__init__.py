from catalog.services.event_service import EventService, VenueService
from catalog.services.lifecycle import EventLifecycleManager
from catalog.services.notifications import DeliveryOutcome, NotificationDispatcher

__all__ = [
    "EventService",
    "VenueService",
    "EventLifecycleManager",
    "NotificationDispatcher",
    "DeliveryOutcome",
]
