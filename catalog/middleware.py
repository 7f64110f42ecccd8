"""Correlation id handling for inbound requests."""

import re
import uuid

from django.http import HttpRequest, HttpResponse

from catalog.domain import RequestContext

CORRELATION_HEADER = "X-Correlation-ID"
_VALID_ID = re.compile(r"[A-Za-z0-9._-]{1,128}")


class CorrelationIdMiddleware:
    """Reuse the caller's X-Correlation-ID or mint one, and echo it back."""

    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = request.headers.get(CORRELATION_HEADER, "")
        request.correlation_id = incoming if _VALID_ID.fullmatch(incoming) else uuid.uuid4().hex
        response = self.get_response(request)
        response[CORRELATION_HEADER] = request.correlation_id
        return response


def request_context(request: HttpRequest) -> RequestContext:
    correlation_id = getattr(request, "correlation_id", None) or uuid.uuid4().hex
    return RequestContext(correlation_id=correlation_id)
