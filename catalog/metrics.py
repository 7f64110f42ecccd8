import time

from django.http import HttpRequest, HttpResponse
from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "path", "status"],
)
NOTIFICATION_OUTCOMES = Counter(
    "order_service_notifications_total",
    "Event cancellation notifications sent to the Order Service, by outcome",
    ["outcome"],
)


def record_notification(outcome) -> None:
    NOTIFICATION_OUTCOMES.labels(outcome=outcome.value).inc()


class HttpMetricsMiddleware:
    """Counts requests and their latency per route pattern."""

    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        start = time.perf_counter()
        response = self.get_response(request)
        match = getattr(request, "resolver_match", None)
        # label by route pattern, never the raw path
        path = match.route if match is not None else "unmatched"
        labels = {"method": request.method, "path": path, "status": str(response.status_code)}
        REQUEST_COUNT.labels(**labels).inc()
        REQUEST_LATENCY.labels(**labels).observe(time.perf_counter() - start)
        return response
