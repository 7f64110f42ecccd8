from catalog.stores.interfaces import EventStore, VenueStore

__all__ = ["EventStore", "VenueStore"]
