"""Seed venues and events from CSV files.

Tables that already hold rows are left alone.
"""

import csv
import logging
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from django.conf import settings
from django.core.cache import cache
from django.core.management.base import BaseCommand
from django.core.management.color import no_style
from django.db import connection, transaction

from catalog.models import Event, Venue

logger = logging.getLogger(__name__)

EVENT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BATCH_SIZE = 100


def read_rows(path: Path) -> list[dict] | None:
    if not path.exists():
        logger.warning("seed_file_missing path=%s", path)
        return None
    with path.open(newline="", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_venue(row: dict) -> Venue:
    return Venue(
        id=int(row["venue_id"]),
        name=row["name"],
        city=row["city"],
        capacity=int(row["capacity"]),
    )


def parse_event(row: dict) -> Event:
    status = (row.get("status") or Event.Status.ACTIVE).upper()
    cancelled = status == Event.Status.CANCELLED
    event_date = datetime.strptime(row["event_date"], EVENT_DATE_FORMAT).replace(
        tzinfo=timezone.utc
    )
    return Event(
        id=int(row["event_id"]),
        venue_id=int(row["venue_id"]),
        title=row["title"],
        event_type=row["event_type"],
        event_date=event_date,
        base_price=Decimal(row["base_price"]),
        status=Event.Status.CANCELLED if cancelled else Event.Status.ACTIVE,
        # seed files carry no cancellation time; keep the status/timestamp pairing
        cancelled_at=event_date if cancelled else None,
    )


def reset_sequence(model) -> None:
    """Move the id sequence past explicitly inserted ids (PostgreSQL only)."""
    if connection.vendor != "postgresql":
        return

    with connection.cursor() as cursor:
        for sql in connection.ops.sequence_reset_sql(no_style(), [model]):
            cursor.execute(sql)
    logger.info("sequence_reset table=%s", model._meta.db_table)


class Command(BaseCommand):
    help = "Load venues and events from CSV seed files."

    def add_arguments(self, parser):
        seed_dir = Path(getattr(settings, "SEED_DATA_DIR", "seed_data"))
        parser.add_argument("--venues", type=Path, default=seed_dir / "venues.csv")
        parser.add_argument("--events", type=Path, default=seed_dir / "events.csv")

    def handle(self, *args, **options):
        logger.info("seed_started")
        self.seed_venues(options["venues"])
        self.seed_events(options["events"])
        # bulk_create skips post_save, so the invalidation signals never fire
        cache.clear()
        logger.info("seed_completed")

    def seed_venues(self, path: Path) -> None:
        existing = Venue.objects.count()
        if existing:
            logger.info("seed_skipped table=venues rows=%s", existing)
            return
        rows = read_rows(path)
        if rows is None:
            return
        with transaction.atomic():
            Venue.objects.bulk_create([parse_venue(row) for row in rows])
        reset_sequence(Venue)
        logger.info("seed_loaded table=venues rows=%s", len(rows))
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(rows)} venues"))

    def seed_events(self, path: Path) -> None:
        existing = Event.objects.count()
        if existing:
            logger.info("seed_skipped table=events rows=%s", existing)
            return
        rows = read_rows(path)
        if rows is None:
            return
        events = [parse_event(row) for row in rows]
        for start in range(0, len(events), BATCH_SIZE):
            batch = events[start : start + BATCH_SIZE]
            with transaction.atomic():
                Event.objects.bulk_create(batch)
            logger.info("seed_batch table=events loaded=%s total=%s", start + len(batch), len(events))
        reset_sequence(Event)
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(events)} events"))
