"""In-memory collaborators and builders shared by the tests."""

from concurrent.futures import Executor, Future
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

import httpx

from catalog.domain import Capacity, Event, EventId, EventStatus, Money, Venue, VenueId
from catalog.domain.errors import PersistenceError
from catalog.stores.interfaces import EventStore, VenueStore

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
ORDER_SERVICE_URL = "http://orders.test"


class InMemoryEventStore(EventStore):
    def __init__(self, events=(), venues=None) -> None:
        self.events = {event.id: event for event in events}
        self.venues = venues
        self.updates: list[Event] = []
        self.fail_writes = False
        self._next_id = max((e.id.value for e in self.events.values()), default=0) + 1

    def get_event(self, event_id):
        return self.events.get(event_id)

    def update_event(self, event):
        if self.fail_writes or event.id not in self.events:
            raise PersistenceError("update_event")
        self.events[event.id] = event
        self.updates.append(event)
        return event

    def list_events(self):
        return sorted(self.events.values(), key=lambda e: e.event_date)

    def list_events_for_venue(self, venue_id):
        return [e for e in self.list_events() if e.venue_id == venue_id]

    def list_events_by_status(self, status):
        return [e for e in self.list_events() if e.status is status]

    def list_events_by_city(self, city):
        return [e for e in self.list_events() if e.city == city]

    def search_events(self, query):
        needle = query.lower()
        return [
            e
            for e in self.list_events()
            if any(needle in (v or "").lower() for v in (e.title, e.event_type, e.venue_name, e.city))
        ]

    def create_event(self, venue_id, title, event_type, event_date, base_price):
        if self.fail_writes:
            raise PersistenceError("create_event")
        event = Event(
            id=EventId(self._next_id),
            venue_id=venue_id,
            title=title,
            event_type=event_type,
            event_date=event_date,
            base_price=base_price,
        )
        self._next_id += 1
        self.events[event.id] = event
        return event

    def delete_event(self, event_id):
        return self.events.pop(event_id, None) is not None


class InMemoryVenueStore(VenueStore):
    def __init__(self, venues=()) -> None:
        self.venues = {venue.id: venue for venue in venues}
        self._next_id = max((v.id.value for v in self.venues.values()), default=0) + 1

    def get_venue(self, venue_id):
        return self.venues.get(venue_id)

    def list_venues(self):
        return sorted(self.venues.values(), key=lambda v: v.name)

    def list_venues_by_city(self, city):
        return [v for v in self.list_venues() if v.city == city]

    def create_venue(self, name, city, capacity):
        venue = Venue(id=VenueId(self._next_id), name=name, city=city, capacity=capacity)
        self._next_id += 1
        self.venues[venue.id] = venue
        return venue

    def update_venue(self, venue):
        self.venues[venue.id] = venue
        return venue

    def delete_venue(self, venue_id):
        return self.venues.pop(venue_id, None) is not None


class InlineExecutor(Executor):
    """Runs submitted work immediately and keeps the futures."""

    def __init__(self) -> None:
        self.futures: list[Future] = []

    def submit(self, fn, /, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        self.futures.append(future)
        return future


class RecordingObserver:
    def __init__(self) -> None:
        self.entries: list[tuple[str, str, dict]] = []

    def info(self, msg, **fields):
        self.entries.append(("info", msg, fields))

    def warn(self, msg, **fields):
        self.entries.append(("warn", msg, fields))

    def error(self, msg, exc_info=False, **fields):
        self.entries.append(("error", msg, fields))

    def messages(self) -> list[str]:
        return [msg for _, msg, _ in self.entries]


class WebhookRecorder:
    """httpx.MockTransport handler that records requests and replays a response."""

    def __init__(self, status_code: int = 200, exc: Exception | None = None) -> None:
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json={})


def make_event(event_id: int = 42, **overrides) -> Event:
    fields = dict(
        id=EventId(event_id),
        venue_id=VenueId(1),
        title="Proms Opening Night",
        event_type="Concert",
        event_date=datetime(2026, 12, 1, 19, 30, tzinfo=timezone.utc),
        base_price=Money(Decimal("45.00")),
        status=EventStatus.ACTIVE,
        cancelled_at=None,
        venue_name="Royal Albert Hall",
        city="London",
    )
    fields.update(overrides)
    return Event(**fields)


def make_cancelled_event(event_id: int = 42, at: datetime = FIXED_NOW) -> Event:
    return replace(make_event(event_id), status=EventStatus.CANCELLED, cancelled_at=at)


def make_venue(venue_id: int = 1, **overrides) -> Venue:
    fields = dict(
        id=VenueId(venue_id),
        name="Royal Albert Hall",
        city="London",
        capacity=Capacity(5272),
        event_count=0,
    )
    fields.update(overrides)
    return Venue(**fields)


