"""Unit tests for domain primitives and models.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog.domain import (
    CANCELLATION_REASON,
    Capacity,
    EventId,
    EventStatus,
    Money,
    NotificationEnvelope,
    RequestContext,
)
from catalog.domain.errors import EventAlreadyCancelledError, ErrorCode
from tests.fakes import FIXED_NOW, make_cancelled_event, make_event


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        assert str(Money(Decimal("7.5"))) == "7.50"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_integer(self):
        assert EventId.from_string("42") == EventId(42)

    @pytest.mark.parametrize("raw", ["abc", "4.2", "", "0", "-3"])
    def test_from_string_rejects_invalid(self, raw):
        with pytest.raises(ValueError):
            EventId.from_string(raw)


class TestEvent:
    """Tests for the Event status/cancelled_at pairing."""

    def test_active_event_has_no_cancelled_at(self):
        event = make_event()
        assert event.status is EventStatus.ACTIVE
        assert event.cancelled_at is None

    def test_active_event_with_cancelled_at_is_rejected(self):
        with pytest.raises(ValueError):
            make_event(cancelled_at=FIXED_NOW)

    def test_cancelled_event_without_cancelled_at_is_rejected(self):
        with pytest.raises(ValueError):
            make_event(status=EventStatus.CANCELLED)

    def test_empty_title_is_rejected(self):
        with pytest.raises(ValueError):
            make_event(title="")

    def test_cancel_sets_status_and_timestamp(self):
        cancelled = make_event().cancel(FIXED_NOW)
        assert cancelled.status is EventStatus.CANCELLED
        assert cancelled.cancelled_at == FIXED_NOW
        assert cancelled.id == EventId(42)

    def test_cancel_normalises_timestamp_to_utc(self):
        local = FIXED_NOW.astimezone(timezone(timedelta(hours=2)))
        cancelled = make_event().cancel(local)
        assert cancelled.cancelled_at.utcoffset() == timedelta(0)
        assert cancelled.cancelled_at == FIXED_NOW

    def test_cancel_leaves_original_untouched(self):
        event = make_event()
        event.cancel(FIXED_NOW)
        assert event.status is EventStatus.ACTIVE

    def test_cancel_twice_raises(self):
        with pytest.raises(EventAlreadyCancelledError) as exc_info:
            make_cancelled_event().cancel(FIXED_NOW)
        assert exc_info.value.code is ErrorCode.EVENT_ALREADY_CANCELLED


class TestNotificationEnvelope:
    """Tests for the webhook payload."""

    def test_payload_matches_wire_contract(self):
        envelope = NotificationEnvelope.for_event(
            make_cancelled_event(), RequestContext(correlation_id="corr-1")
        )
        assert envelope.to_payload() == {
            "eventId": 42,
            "eventTitle": "Proms Opening Night",
            "cancelledAt": "2026-10-19T12:00:00+00:00",
            "reason": CANCELLATION_REASON,
        }
        assert envelope.correlation_id == "corr-1"

    def test_reason_is_fixed(self):
        assert CANCELLATION_REASON == "Event cancelled by organizer"

    def test_active_event_cannot_be_announced(self):
        with pytest.raises(ValueError):
            NotificationEnvelope.for_event(make_event(), RequestContext(correlation_id="c"))

    def test_payload_renders_cancelled_at_in_utc(self):
        local = FIXED_NOW.astimezone(timezone(timedelta(hours=-5)))
        event = replace(make_cancelled_event(), cancelled_at=local)
        payload = NotificationEnvelope.for_event(event, RequestContext("c")).to_payload()
        assert payload["cancelledAt"] == "2026-10-19T12:00:00+00:00"

    def test_cancelled_at_parses_as_iso8601(self):
        payload = NotificationEnvelope.for_event(
            make_cancelled_event(), RequestContext("c")
        ).to_payload()
        assert datetime.fromisoformat(payload["cancelledAt"]) == FIXED_NOW
