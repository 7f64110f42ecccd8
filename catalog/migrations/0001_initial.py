import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Venue",
            fields=[
                ("id", models.AutoField(db_column="venue_id", primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("city", models.CharField(max_length=100)),
                ("capacity", models.PositiveIntegerField()),
            ],
            options={
                "db_table": "venues",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["city"], name="idx_venues_city"),
                    models.Index(fields=["name"], name="idx_venues_name"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.AutoField(db_column="event_id", primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=300)),
                ("event_type", models.CharField(max_length=50)),
                ("event_date", models.DateTimeField()),
                ("base_price", models.DecimalField(decimal_places=2, max_digits=10)),
                (
                    "status",
                    models.CharField(
                        choices=[("ACTIVE", "Active"), ("CANCELLED", "Cancelled")],
                        default="ACTIVE",
                        max_length=50,
                    ),
                ),
                ("cancelled_at", models.DateTimeField(blank=True, null=True)),
                (
                    "venue",
                    models.ForeignKey(
                        db_column="venue_id",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="events",
                        to="catalog.venue",
                    ),
                ),
            ],
            options={
                "db_table": "events",
                "ordering": ["event_date"],
                "indexes": [
                    models.Index(fields=["venue"], name="idx_events_venue_id"),
                    models.Index(fields=["event_date"], name="idx_events_event_date"),
                    models.Index(fields=["status"], name="idx_events_status"),
                    models.Index(fields=["event_type"], name="idx_events_event_type"),
                ],
            },
        ),
    ]
