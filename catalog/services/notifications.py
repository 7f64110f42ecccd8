"""Best-effort delivery of event cancellations to the Order Service.

One POST per cancelled event, bounded by a fixed timeout. Every outcome is
logged and returned; nothing is raised, retried or queued.
"""

import logging
from enum import Enum

import httpx

from catalog.domain import Event, NotificationEnvelope, RequestContext
from catalog.metrics import record_notification
from catalog.services.observer import LoggingObserver, Observer

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/api/webhooks/event-cancelled"
CORRELATION_HEADER = "X-Correlation-ID"
DELIVERY_TIMEOUT_SECONDS = 10.0


class DeliveryOutcome(Enum):
    DELIVERED = "delivered"
    REJECTED = "rejected"
    TIMED_OUT = "timed_out"
    FAILED = "failed"
    NOT_CONFIGURED = "not_configured"


class NotificationDispatcher:
    """Posts cancellation notices to ``{base_url}/api/webhooks/event-cancelled``.

    The ``httpx.Client`` is a shared connection pool. Correlation ids are
    attached per request and never written to the client's default headers,
    so concurrent dispatches on the same client stay isolated.
    """

    def __init__(
        self,
        base_url: str | None,
        client: httpx.Client | None = None,
        observer: Observer | None = None,
        timeout: float = DELIVERY_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url.rstrip("/") if base_url else None
        self._client = client or httpx.Client()
        self._observer = observer or LoggingObserver(logger)
        self._timeout = timeout

    @property
    def webhook_url(self) -> str | None:
        if not self._base_url:
            return None
        return f"{self._base_url}{WEBHOOK_PATH}"

    def notify(self, event: Event, context: RequestContext) -> DeliveryOutcome:
        """Send one cancellation notice for ``event``."""
        outcome = self._deliver(event, context)
        record_notification(outcome)
        return outcome

    def _deliver(self, event: Event, context: RequestContext) -> DeliveryOutcome:
        correlation_id = context.correlation_id
        try:
            url = self.webhook_url
            if url is None:
                self._observer.error(
                    "order_service_url_missing",
                    event_id=event.id,
                    correlation_id=correlation_id,
                )
                return DeliveryOutcome.NOT_CONFIGURED

            envelope = NotificationEnvelope.for_event(event, context)
            response = self._client.post(
                url,
                json=envelope.to_payload(),
                headers={CORRELATION_HEADER: envelope.correlation_id},
                timeout=self._timeout,
            )
        except httpx.TimeoutException:
            self._observer.error(
                "order_service_notify_timeout",
                event_id=event.id,
                timeout=self._timeout,
                correlation_id=correlation_id,
            )
            return DeliveryOutcome.TIMED_OUT
        except Exception:
            self._observer.error(
                "order_service_notify_failed",
                exc_info=True,
                event_id=event.id,
                correlation_id=correlation_id,
            )
            return DeliveryOutcome.FAILED

        if response.is_success:
            self._observer.info(
                "order_service_notified",
                event_id=event.id,
                status_code=response.status_code,
                correlation_id=correlation_id,
            )
            return DeliveryOutcome.DELIVERED

        self._observer.warn(
            "order_service_notify_rejected",
            event_id=event.id,
            status_code=response.status_code,
            correlation_id=correlation_id,
        )
        return DeliveryOutcome.REJECTED

    def close(self) -> None:
        self._client.close()
