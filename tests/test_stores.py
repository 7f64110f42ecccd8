"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from catalog import models
from catalog.domain import EventId, EventStatus, Money, VenueId
from catalog.domain.errors import PersistenceError, VenueInUseError
from catalog.stores.django_store import DjangoEventStore, DjangoVenueStore
from tests.fakes import FIXED_NOW


@pytest.fixture
def london() -> models.Venue:
    return models.Venue.objects.create(name="Royal Albert Hall", city="London", capacity=5272)


@pytest.fixture
def rows(london):
    paris = models.Venue.objects.create(name="Olympia", city="Paris", capacity=1985)
    late = models.Event.objects.create(
        venue=london,
        title="Film Score Live",
        event_type="Concert",
        event_date=datetime(2026, 10, 5, 19, tzinfo=timezone.utc),
        base_price=Decimal("52.00"),
    )
    early = models.Event.objects.create(
        venue=paris,
        title="Stand-up Gala",
        event_type="Comedy",
        event_date=datetime(2026, 9, 12, 20, tzinfo=timezone.utc),
        base_price=Decimal("38.00"),
    )
    return early, late


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_get_event_maps_to_domain(self, rows):
        early, _ = rows
        event = DjangoEventStore().get_event(EventId(early.pk))
        assert event.title == "Stand-up Gala"
        assert event.base_price == Money(Decimal("38.00"))
        assert event.status is EventStatus.ACTIVE
        assert event.city == "Paris"

    def test_get_missing_event_returns_none(self):
        assert DjangoEventStore().get_event(EventId(9999)) is None

    def test_list_events_ordered_by_date(self, rows):
        titles = [e.title for e in DjangoEventStore().list_events()]
        assert titles == ["Stand-up Gala", "Film Score Live"]

    def test_search_matches_venue_city(self, rows):
        assert [e.title for e in DjangoEventStore().search_events("pari")] == ["Stand-up Gala"]

    def test_update_event_persists_cancellation(self, rows):
        _, late = rows
        store = DjangoEventStore()
        cancelled = store.get_event(EventId(late.pk)).cancel(FIXED_NOW)

        result = store.update_event(cancelled)

        assert result.status is EventStatus.CANCELLED
        late.refresh_from_db()
        assert late.status == "CANCELLED"
        assert late.cancelled_at == FIXED_NOW

    def test_stale_update_does_not_revert_cancellation(self, rows):
        _, late = rows
        store = DjangoEventStore()
        stale = store.get_event(EventId(late.pk))
        store.update_event(stale.cancel(FIXED_NOW))

        result = store.update_event(replace(stale, title="Film Score Live II"))

        assert result.title == "Film Score Live II"
        assert result.status is EventStatus.CANCELLED
        late.refresh_from_db()
        assert late.status == "CANCELLED"
        assert late.cancelled_at == FIXED_NOW

    def test_second_cancellation_keeps_first_timestamp(self, rows):
        _, late = rows
        store = DjangoEventStore()
        event = store.get_event(EventId(late.pk))
        store.update_event(event.cancel(FIXED_NOW))

        store.update_event(event.cancel(datetime(2027, 1, 1, tzinfo=timezone.utc)))

        late.refresh_from_db()
        assert late.cancelled_at == FIXED_NOW

    def test_update_missing_event_raises_persistence_error(self, rows):
        store = DjangoEventStore()
        ghost = replace(store.get_event(EventId(rows[0].pk)), id=EventId(9999))
        with pytest.raises(PersistenceError):
            store.update_event(ghost)

    def test_database_error_becomes_persistence_error(self, rows):
        store = DjangoEventStore()
        event = store.get_event(EventId(rows[0].pk)).cancel(FIXED_NOW)
        with patch.object(models.Event, "save", side_effect=DatabaseError("disk full")):
            with pytest.raises(PersistenceError):
                store.update_event(event)
        rows[0].refresh_from_db()
        assert rows[0].status == "ACTIVE"


@pytest.mark.django_db
class TestDjangoVenueStore:
    def test_list_venues_ordered_by_name_with_counts(self, rows):
        venues = DjangoVenueStore().list_venues()
        assert [(v.name, v.event_count) for v in venues] == [
            ("Olympia", 1),
            ("Royal Albert Hall", 1),
        ]

    def test_delete_venue_in_use_raises(self, rows, london):
        with pytest.raises(VenueInUseError):
            DjangoVenueStore().delete_venue(VenueId(london.pk))

    def test_delete_missing_venue_returns_false(self):
        assert DjangoVenueStore().delete_venue(VenueId(404)) is False
