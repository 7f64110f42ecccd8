"""Cache keys shared by the handlers and the invalidation signals."""

from django.conf import settings
from django.core.cache import cache

EVENTS_LIST = "events:list"
VENUES_LIST = "venues:list"


def event_key(event_id) -> str:
    return f"events:{event_id}"


def venue_key(venue_id) -> str:
    return f"venues:{venue_id}"


def get_or_set(key: str, build):
    data = cache.get(key)
    if data is None:
        data = build()
        cache.set(key, data, timeout=settings.CATALOG_CACHE_TIMEOUT)
    return data


def invalidate_event(event_id, venue_id=None) -> None:
    keys = [EVENTS_LIST, event_key(event_id)]
    if venue_id is not None:
        keys += [VENUES_LIST, venue_key(venue_id)]
    cache.delete_many(keys)


def invalidate_venue(venue_id, event_ids=()) -> None:
    """Drop venue entries and every event entry that embeds the venue."""
    keys = [VENUES_LIST, venue_key(venue_id), EVENTS_LIST]
    keys += [event_key(event_id) for event_id in event_ids]
    cache.delete_many(keys)
