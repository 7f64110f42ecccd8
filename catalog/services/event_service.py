"""Catalog services - business logic for events and venues lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from catalog.domain import Capacity, Event, EventId, EventStatus, Money, Venue, VenueId
from catalog.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidVenueIdError,
    VenueInUseError,
    VenueNotFoundError,
)
from catalog.stores.interfaces import EventStore, VenueStore


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError as exc:
        raise InvalidEventIdError() from exc


def parse_venue_id(venue_id: str) -> VenueId:
    try:
        return VenueId.from_string(venue_id)
    except ValueError as exc:
        raise InvalidVenueIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, venues: VenueStore) -> None:
        self._store = store
        self._venues = venues

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def list_events_for_venue(self, venue_id: str) -> list[Event]:
        return self._store.list_events_for_venue(parse_venue_id(venue_id))

    def list_events_by_status(self, status: str) -> list[Event]:
        """Return events with the given status; unknown statuses match nothing."""
        try:
            parsed = EventStatus(status.upper())
        except ValueError:
            return []
        return self._store.list_events_by_status(parsed)

    def list_events_by_city(self, city: str) -> list[Event]:
        return self._store.list_events_by_city(city)

    def search_events(self, query: str) -> list[Event]:
        return self._store.search_events(query.strip())

    def create_event(
        self,
        venue_id: int,
        title: str,
        event_type: str,
        event_date: datetime,
        base_price: Decimal,
    ) -> Event:
        """Create an ACTIVE event at an existing venue.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        venue = self._require_venue(venue_id)
        return self._store.create_event(
            venue_id=venue.id,
            title=title,
            event_type=event_type,
            event_date=event_date,
            base_price=Money(base_price),
        )

    def update_event(
        self,
        event_id: str,
        title: str | None = None,
        event_type: str | None = None,
        event_date: datetime | None = None,
        base_price: Decimal | None = None,
    ) -> Event:
        """Apply the provided fields to an event.

        Status is not editable here; cancellation goes through
        EventLifecycleManager so the Order Service is told about it.
        """
        event = self.get_event(event_id)
        changes: dict = {}
        if title:
            changes["title"] = title
        if event_type:
            changes["event_type"] = event_type
        if event_date is not None:
            changes["event_date"] = event_date
        if base_price is not None:
            changes["base_price"] = Money(base_price)
        if not changes:
            return event
        return self._store.update_event(replace(event, **changes))

    def delete_event(self, event_id: str) -> None:
        if not self._store.delete_event(parse_event_id(event_id)):
            raise EventNotFoundError(event_id)

    def _require_venue(self, venue_id: int) -> Venue:
        try:
            parsed = VenueId(venue_id)
        except ValueError as exc:
            raise InvalidVenueIdError() from exc
        venue = self._venues.get_venue(parsed)
        if venue is None:
            raise VenueNotFoundError(str(venue_id))
        return venue


class VenueService:
    """Service for venue operations."""

    def __init__(self, store: VenueStore) -> None:
        self._store = store

    def list_venues(self) -> list[Venue]:
        return self._store.list_venues()

    def list_venues_by_city(self, city: str) -> list[Venue]:
        return self._store.list_venues_by_city(city)

    def get_venue(self, venue_id: str) -> Venue:
        """Return a venue by ID.

        Raises:
            InvalidVenueIdError: If the venue_id is not a positive integer.
            VenueNotFoundError: If the venue does not exist.
        """
        venue = self._store.get_venue(parse_venue_id(venue_id))
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue

    def create_venue(self, name: str, city: str, capacity: int) -> Venue:
        return self._store.create_venue(name=name, city=city, capacity=Capacity(capacity))

    def update_venue(self, venue_id: str, name: str, city: str, capacity: int) -> Venue:
        venue = self.get_venue(venue_id)
        return self._store.update_venue(
            replace(venue, name=name, city=city, capacity=Capacity(capacity))
        )

    def delete_venue(self, venue_id: str) -> None:
        """Raises VenueInUseError if events still reference the venue."""
        parsed = parse_venue_id(venue_id)
        venue = self._store.get_venue(parsed)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        if venue.event_count:
            raise VenueInUseError(venue_id)
        self._store.delete_venue(parsed)
