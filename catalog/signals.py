"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from catalog import cache
from catalog.models import Event, Venue


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    cache.invalidate_event(instance.pk, instance.venue_id)


@receiver([post_save, post_delete], sender=Venue)
def invalidate_venue_cache(sender, instance, **kwargs):
    """Invalidate caches when a venue is saved or deleted."""
    event_ids = Event.objects.filter(venue_id=instance.pk).values_list("pk", flat=True)
    cache.invalidate_venue(instance.pk, list(event_ids))
