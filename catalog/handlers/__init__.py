from catalog.handlers.views import (
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

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventCancelView",
    "EventsByVenueView",
    "EventsByStatusView",
    "EventsByCityView",
    "EventSearchView",
    "VenueListView",
    "VenueDetailView",
    "VenuesByCityView",
    "LivenessView",
    "ReadinessView",
    "metrics_view",
]
