"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Venue(models.Model):
    """Persistence model for venues."""

    id = models.AutoField(primary_key=True, db_column="venue_id")
    name = models.CharField(max_length=200)
    city = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField()

    class Meta:
        db_table = "venues"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["city"], name="idx_venues_city"),
            models.Index(fields=["name"], name="idx_venues_name"),
        ]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        ACTIVE = "ACTIVE"
        CANCELLED = "CANCELLED"

    id = models.AutoField(primary_key=True, db_column="event_id")
    venue = models.ForeignKey(
        Venue, on_delete=models.PROTECT, related_name="events", db_column="venue_id"
    )
    title = models.CharField(max_length=300)
    event_type = models.CharField(max_length=50)
    event_date = models.DateTimeField()
    base_price = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=50, choices=Status.choices, default=Status.ACTIVE)
    cancelled_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = "events"
        ordering = ["event_date"]
        indexes = [
            models.Index(fields=["venue"], name="idx_events_venue_id"),
            models.Index(fields=["event_date"], name="idx_events_event_date"),
            models.Index(fields=["status"], name="idx_events_status"),
            models.Index(fields=["event_type"], name="idx_events_event_type"),
        ]

    def __str__(self) -> str:
        return self.title
