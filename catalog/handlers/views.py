"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.db import connection
from django.db.utils import OperationalError
from django.http import HttpRequest, HttpResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog import cache
from catalog.domain.errors import DomainError, ErrorCode
from catalog.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    EventUpdateSerializer,
    VenueSerializer,
    VenueWriteSerializer,
)
from catalog.middleware import request_context
from catalog.services import wiring
from catalog.services.event_service import parse_event_id, parse_venue_id

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VENUE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_VENUE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_ALREADY_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.VENUE_IN_USE: status.HTTP_409_CONFLICT,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    code = ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code >= 500:
        logger.error("request_failed code=%s", error.code.value)
    return Response({"code": error.code.value, "message": error.message}, status=code)


def events_data(events) -> list[dict]:
    return EventSerializer(events, many=True).data


class EventListView(APIView):
    """Handler for GET/POST /api/v1/events"""

    def get(self, request: Request) -> Response:
        service = wiring.event_service()
        data = cache.get_or_set(cache.EVENTS_LIST, lambda: events_data(service.list_events()))
        return Response(data)

    def post(self, request: Request) -> Response:
        payload = EventCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        try:
            event = wiring.event_service().create_event(**payload.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/v1/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = wiring.event_service()
        try:
            key = cache.event_key(parse_event_id(event_id))
            data = cache.get_or_set(key, lambda: EventSerializer(service.get_event(event_id)).data)
        except DomainError as e:
            return error_response(e)
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        payload = EventUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        try:
            event = wiring.event_service().update_event(event_id, **payload.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            wiring.event_service().delete_event(event_id)
        except DomainError as e:
            return error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventCancelView(APIView):
    """Handler for POST /api/v1/events/{event_id}/cancel

    Succeeds once the cancellation is stored, whatever happens to the
    Order Service notification.
    """

    def post(self, request: Request, event_id: str) -> Response:
        try:
            event = wiring.lifecycle_manager().cancel_event(
                parse_event_id(event_id), request_context(request)
            )
        except DomainError as e:
            return error_response(e)
        return Response(EventSerializer(event).data)


class EventsByVenueView(APIView):
    """Handler for GET /api/v1/events/venue/{venue_id}"""

    def get(self, request: Request, venue_id: str) -> Response:
        try:
            events = wiring.event_service().list_events_for_venue(venue_id)
        except DomainError as e:
            return error_response(e)
        return Response(events_data(events))


class EventsByStatusView(APIView):
    """Handler for GET /api/v1/events/status/{status}"""

    def get(self, request: Request, event_status: str) -> Response:
        return Response(events_data(wiring.event_service().list_events_by_status(event_status)))


class EventsByCityView(APIView):
    """Handler for GET /api/v1/events/city/{city}"""

    def get(self, request: Request, city: str) -> Response:
        return Response(events_data(wiring.event_service().list_events_by_city(city)))


class EventSearchView(APIView):
    """Handler for GET /api/v1/events/search?query="""

    def get(self, request: Request) -> Response:
        query = request.query_params.get("query", "")
        if not query.strip():
            return Response(
                {"code": "INVALID_QUERY", "message": "Search query cannot be empty"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(events_data(wiring.event_service().search_events(query)))


class VenueListView(APIView):
    """Handler for GET/POST /api/v1/venues"""

    def get(self, request: Request) -> Response:
        service = wiring.venue_service()
        data = cache.get_or_set(
            cache.VENUES_LIST, lambda: VenueSerializer(service.list_venues(), many=True).data
        )
        return Response(data)

    def post(self, request: Request) -> Response:
        payload = VenueWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        try:
            venue = wiring.venue_service().create_venue(**payload.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response(VenueSerializer(venue).data, status=status.HTTP_201_CREATED)


class VenueDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/v1/venues/{venue_id}"""

    def get(self, request: Request, venue_id: str) -> Response:
        service = wiring.venue_service()
        try:
            key = cache.venue_key(parse_venue_id(venue_id))
            data = cache.get_or_set(key, lambda: VenueSerializer(service.get_venue(venue_id)).data)
        except DomainError as e:
            return error_response(e)
        return Response(data)

    def put(self, request: Request, venue_id: str) -> Response:
        payload = VenueWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        try:
            venue = wiring.venue_service().update_venue(venue_id, **payload.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response(VenueSerializer(venue).data)

    def delete(self, request: Request, venue_id: str) -> Response:
        try:
            wiring.venue_service().delete_venue(venue_id)
        except DomainError as e:
            return error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)


class VenuesByCityView(APIView):
    """Handler for GET /api/v1/venues/city/{city}"""

    def get(self, request: Request, city: str) -> Response:
        venues = wiring.venue_service().list_venues_by_city(city)
        return Response(VenueSerializer(venues, many=True).data)


class LivenessView(APIView):
    def get(self, request: Request) -> Response:
        return Response({"status": "Healthy", "service": "catalog-service"})


class ReadinessView(APIView):
    def get(self, request: Request) -> Response:
        try:
            connection.ensure_connection()
        except OperationalError:
            logger.warning("readiness_check_failed database=unreachable")
            return Response(
                {"status": "Unavailable", "database": "Disconnected"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({"status": "Ready", "database": "Connected"})


def metrics_view(request: HttpRequest) -> HttpResponse:
    """Prometheus scrape endpoint."""
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
