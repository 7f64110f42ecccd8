from django.contrib import admin

from catalog.models import Event, Venue


class EventInline(admin.TabularInline):
    model = Event
    extra = 0
    fields = ["title", "event_type", "event_date", "status"]
    readonly_fields = ["status"]


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "city", "capacity"]
    search_fields = ["name", "city"]
    inlines = [EventInline]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "venue", "event_type", "event_date", "status", "cancelled_at"]
    list_filter = ["status", "event_type", "venue__city"]
    search_fields = ["title", "venue__name"]
    # cancellation must go through the API so the Order Service is notified
    readonly_fields = ["status", "cancelled_at"]
