"""Event lifecycle: the ACTIVE -> CANCELLED transition.

The cancellation is persisted first, then exactly one notification is handed
to the executor. Notification results never reach the caller.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Executor
from datetime import datetime, timezone

from catalog.domain import Event, EventId, RequestContext
from catalog.domain.errors import EventNotFoundError
from catalog.services.notifications import NotificationDispatcher
from catalog.services.observer import LoggingObserver, Observer
from catalog.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventLifecycleManager:
    """Owns event state transitions."""

    def __init__(
        self,
        store: EventStore,
        dispatcher: NotificationDispatcher,
        executor: Executor,
        observer: Observer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._executor = executor
        self._observer = observer or LoggingObserver(logger)
        self._clock = clock

    def cancel_event(self, event_id: EventId, context: RequestContext) -> Event:
        """Cancel an event and schedule the Order Service notification.

        Cancelling an already cancelled event returns it unchanged; the
        original ``cancelled_at`` is kept and no notification is sent.

        Raises:
            EventNotFoundError: If the event does not exist.
            PersistenceError: If the store write fails. Nothing is dispatched.
        """
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))

        if event.is_cancelled:
            self._observer.info(
                "event_already_cancelled",
                event_id=event_id,
                correlation_id=context.correlation_id,
            )
            return event

        cancelled = self._store.update_event(event.cancel(self._clock()))
        self._observer.info(
            "event_cancelled",
            event_id=event_id,
            cancelled_at=cancelled.cancelled_at.isoformat(),
            correlation_id=context.correlation_id,
        )
        self._schedule_notification(cancelled, context)
        return cancelled

    def _schedule_notification(self, event: Event, context: RequestContext) -> None:
        try:
            self._executor.submit(self._dispatcher.notify, event, context)
        except RuntimeError:
            # executor already shut down
            self._observer.error(
                "order_service_notify_not_scheduled",
                exc_info=True,
                event_id=event.id,
                correlation_id=context.correlation_id,
            )
