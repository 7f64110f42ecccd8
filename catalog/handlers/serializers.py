"""Serializers for transforming domain models to API responses and parsing input."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    event_id = serializers.IntegerField(source="id.value")
    venue_id = serializers.IntegerField(source="venue_id.value")
    title = serializers.CharField()
    event_type = serializers.CharField()
    event_date = serializers.DateTimeField()
    base_price = serializers.DecimalField(
        source="base_price.amount", max_digits=10, decimal_places=2
    )
    status = serializers.CharField(source="status.value")
    cancelled_at = serializers.DateTimeField(allow_null=True)
    venue_name = serializers.CharField(allow_null=True)
    city = serializers.CharField(allow_null=True)


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    venue_id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    city = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    event_count = serializers.IntegerField()


class EventCreateSerializer(serializers.Serializer):
    venue_id = serializers.IntegerField(min_value=1)
    title = serializers.CharField(max_length=300)
    event_type = serializers.CharField(max_length=50)
    event_date = serializers.DateTimeField()
    base_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)


class EventUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300, required=False, allow_blank=True)
    event_type = serializers.CharField(max_length=50, required=False, allow_blank=True)
    event_date = serializers.DateTimeField(required=False)
    base_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False
    )


class VenueWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    city = serializers.CharField(max_length=100)
    capacity = serializers.IntegerField(min_value=0)
