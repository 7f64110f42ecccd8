"""Builds services for a request from Django settings.

Services and stores are created per call. The dispatcher's HTTP connection
pool and the dispatch thread pool are shared and created on first use.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import httpx
from django.conf import settings

from catalog.services.event_service import EventService, VenueService
from catalog.services.lifecycle import EventLifecycleManager
from catalog.services.notifications import NotificationDispatcher
from catalog.stores.django_store import DjangoEventStore, DjangoVenueStore

_lock = threading.Lock()
_dispatcher: NotificationDispatcher | None = None
_executor: ThreadPoolExecutor | None = None


def get_dispatcher() -> NotificationDispatcher:
    global _dispatcher
    with _lock:
        if _dispatcher is None:
            _dispatcher = NotificationDispatcher(
                base_url=getattr(settings, "ORDER_SERVICE_URL", None),
                client=httpx.Client(),
            )
        return _dispatcher


def get_executor() -> ThreadPoolExecutor:
    global _executor
    with _lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=getattr(settings, "NOTIFICATION_WORKERS", 4),
                thread_name_prefix="order-notify",
            )
        return _executor


def shutdown() -> None:
    """Wait for in-flight notifications, then release the shared resources."""
    global _dispatcher, _executor
    with _lock:
        if _executor is not None:
            _executor.shutdown(wait=True)
            _executor = None
        if _dispatcher is not None:
            _dispatcher.close()
            _dispatcher = None


def event_service() -> EventService:
    return EventService(DjangoEventStore(), DjangoVenueStore())


def venue_service() -> VenueService:
    return VenueService(DjangoVenueStore())


def lifecycle_manager() -> EventLifecycleManager:
    return EventLifecycleManager(
        store=DjangoEventStore(),
        dispatcher=get_dispatcher(),
        executor=get_executor(),
    )
