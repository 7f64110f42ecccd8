"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from catalog.domain import Capacity, Event, EventId, EventStatus, Money, Venue, VenueId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def update_event(self, event: Event) -> Event:
        """Persist the mutable fields of an existing event.

        The write is visible to subsequent reads once this returns.

        Raises:
            PersistenceError: If the write fails or the row no longer exists.
        """
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by event_date ascending."""
        ...

    @abstractmethod
    def list_events_for_venue(self, venue_id: VenueId) -> list[Event]:
        ...

    @abstractmethod
    def list_events_by_status(self, status: EventStatus) -> list[Event]:
        ...

    @abstractmethod
    def list_events_by_city(self, city: str) -> list[Event]:
        ...

    @abstractmethod
    def search_events(self, query: str) -> list[Event]:
        """Case-insensitive match on title, type, venue name or city."""
        ...

    @abstractmethod
    def create_event(
        self,
        venue_id: VenueId,
        title: str,
        event_type: str,
        event_date: datetime,
        base_price: Money,
    ) -> Event:
        """Insert a new ACTIVE event and return it."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Return False if it did not exist."""
        ...


class VenueStore(ABC):
    """Interface for venue persistence operations."""

    @abstractmethod
    def get_venue(self, venue_id: VenueId) -> Venue | None:
        """Return a venue by ID, or None if not found."""
        ...

    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """Return all venues ordered by name."""
        ...

    @abstractmethod
    def list_venues_by_city(self, city: str) -> list[Venue]:
        ...

    @abstractmethod
    def create_venue(self, name: str, city: str, capacity: Capacity) -> Venue:
        ...

    @abstractmethod
    def update_venue(self, venue: Venue) -> Venue:
        """Raises PersistenceError if the write fails."""
        ...

    @abstractmethod
    def delete_venue(self, venue_id: VenueId) -> bool:
        """Delete a venue. Return False if it did not exist.

        Raises:
            VenueInUseError: If events still reference the venue.
        """
        ...
