"""Django ORM implementation of the catalog stores."""

import logging
from datetime import datetime

from django.db import DatabaseError, transaction
from django.db.models import Count, ProtectedError, Q, QuerySet

from catalog import models
from catalog.domain import Capacity, Event, EventId, EventStatus, Money, Venue, VenueId
from catalog.domain.errors import PersistenceError, VenueInUseError
from catalog.stores.interfaces import EventStore, VenueStore

logger = logging.getLogger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        venue_id=VenueId(row.venue_id),
        title=row.title,
        event_type=row.event_type,
        event_date=row.event_date,
        base_price=Money(row.base_price),
        status=EventStatus(row.status),
        cancelled_at=row.cancelled_at,
        venue_name=row.venue.name,
        city=row.venue.city,
    )


def _to_venue(row: models.Venue) -> Venue:
    return Venue(
        id=VenueId(row.id),
        name=row.name,
        city=row.city,
        capacity=Capacity(row.capacity),
        event_count=getattr(row, "event_count", 0),
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def _events(self) -> QuerySet:
        return models.Event.objects.select_related("venue").order_by("event_date")

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._events().filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def update_event(self, event: Event) -> Event:
        try:
            with transaction.atomic():
                row = models.Event.objects.select_for_update().get(pk=event.id.value)
                row.venue_id = event.venue_id.value
                row.title = event.title
                row.event_type = event.event_type
                row.event_date = event.event_date
                row.base_price = event.base_price.amount
                fields = ["venue", "title", "event_type", "event_date", "base_price"]
                # CANCELLED is terminal: only the ACTIVE -> CANCELLED step writes lifecycle columns
                if event.is_cancelled and row.status != EventStatus.CANCELLED.value:
                    row.status = event.status.value
                    row.cancelled_at = event.cancelled_at
                    fields += ["status", "cancelled_at"]
                row.save(update_fields=fields)
        except models.Event.DoesNotExist as exc:
            logger.warning("event_update_missing event_id=%s", event.id)
            raise PersistenceError("update_event") from exc
        except DatabaseError as exc:
            logger.exception("event_update_failed event_id=%s", event.id)
            raise PersistenceError("update_event") from exc
        logger.info("event_updated event_id=%s", event.id)
        return _to_event(self._events().get(pk=row.pk))

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in self._events()]

    def list_events_for_venue(self, venue_id: VenueId) -> list[Event]:
        return [_to_event(row) for row in self._events().filter(venue_id=venue_id.value)]

    def list_events_by_status(self, status: EventStatus) -> list[Event]:
        return [_to_event(row) for row in self._events().filter(status=status.value)]

    def list_events_by_city(self, city: str) -> list[Event]:
        return [_to_event(row) for row in self._events().filter(venue__city=city)]

    def search_events(self, query: str) -> list[Event]:
        rows = self._events().filter(
            Q(title__icontains=query)
            | Q(event_type__icontains=query)
            | Q(venue__name__icontains=query)
            | Q(venue__city__icontains=query)
        )
        return [_to_event(row) for row in rows]

    def create_event(
        self,
        venue_id: VenueId,
        title: str,
        event_type: str,
        event_date: datetime,
        base_price: Money,
    ) -> Event:
        try:
            row = models.Event.objects.create(
                venue_id=venue_id.value,
                title=title,
                event_type=event_type,
                event_date=event_date,
                base_price=base_price.amount,
                status=EventStatus.ACTIVE.value,
            )
        except DatabaseError as exc:
            logger.exception("event_create_failed venue_id=%s", venue_id)
            raise PersistenceError("create_event") from exc
        logger.info("event_created event_id=%s", row.pk)
        return _to_event(self._events().get(pk=row.pk))

    def delete_event(self, event_id: EventId) -> bool:
        try:
            deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        except DatabaseError as exc:
            logger.exception("event_delete_failed event_id=%s", event_id)
            raise PersistenceError("delete_event") from exc
        if not deleted:
            logger.warning("event_delete_missing event_id=%s", event_id)
        return bool(deleted)


class DjangoVenueStore(VenueStore):
    """PostgreSQL-backed venue store using Django ORM."""

    def _venues(self) -> QuerySet:
        return models.Venue.objects.annotate(event_count=Count("events")).order_by("name")

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        row = self._venues().filter(pk=venue_id.value).first()
        return _to_venue(row) if row else None

    def list_venues(self) -> list[Venue]:
        return [_to_venue(row) for row in self._venues()]

    def list_venues_by_city(self, city: str) -> list[Venue]:
        return [_to_venue(row) for row in self._venues().filter(city=city)]

    def create_venue(self, name: str, city: str, capacity: Capacity) -> Venue:
        try:
            row = models.Venue.objects.create(name=name, city=city, capacity=capacity.value)
        except DatabaseError as exc:
            logger.exception("venue_create_failed name=%s", name)
            raise PersistenceError("create_venue") from exc
        logger.info("venue_created venue_id=%s", row.pk)
        return _to_venue(self._venues().get(pk=row.pk))

    def update_venue(self, venue: Venue) -> Venue:
        try:
            row = models.Venue.objects.get(pk=venue.id.value)
            row.name = venue.name
            row.city = venue.city
            row.capacity = venue.capacity.value
            row.save()
        except models.Venue.DoesNotExist as exc:
            logger.warning("venue_update_missing venue_id=%s", venue.id)
            raise PersistenceError("update_venue") from exc
        except DatabaseError as exc:
            logger.exception("venue_update_failed venue_id=%s", venue.id)
            raise PersistenceError("update_venue") from exc
        return _to_venue(self._venues().get(pk=row.pk))

    def delete_venue(self, venue_id: VenueId) -> bool:
        try:
            deleted, _ = models.Venue.objects.filter(pk=venue_id.value).delete()
        except ProtectedError as exc:
            raise VenueInUseError(str(venue_id)) from exc
        except DatabaseError as exc:
            logger.exception("venue_delete_failed venue_id=%s", venue_id)
            raise PersistenceError("delete_venue") from exc
        return bool(deleted)
