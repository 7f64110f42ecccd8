from django.urls import path

from catalog.handlers import (
    EventCancelView,
    EventDetailView,
    EventListView,
    EventsByCityView,
    EventsByStatusView,
    EventsByVenueView,
    EventSearchView,
    LivenessView,
    ReadinessView,
    VenueDetailView,
    VenueListView,
    VenuesByCityView,
    metrics_view,
)

urlpatterns = [
    path("api/v1/events", EventListView.as_view(), name="event-list"),
    path("api/v1/events/search", EventSearchView.as_view(), name="event-search"),
    path(
        "api/v1/events/venue/<str:venue_id>",
        EventsByVenueView.as_view(),
        name="event-by-venue",
    ),
    path(
        "api/v1/events/status/<str:event_status>",
        EventsByStatusView.as_view(),
        name="event-by-status",
    ),
    path("api/v1/events/city/<str:city>", EventsByCityView.as_view(), name="event-by-city"),
    path("api/v1/events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "api/v1/events/<str:event_id>/cancel",
        EventCancelView.as_view(),
        name="event-cancel",
    ),
    path("api/v1/venues", VenueListView.as_view(), name="venue-list"),
    path("api/v1/venues/city/<str:city>", VenuesByCityView.as_view(), name="venue-by-city"),
    path("api/v1/venues/<str:venue_id>", VenueDetailView.as_view(), name="venue-detail"),
    path("health/live", LivenessView.as_view(), name="health-live"),
    path("health/ready", ReadinessView.as_view(), name="health-ready"),
    path("metrics", metrics_view, name="metrics"),
]
