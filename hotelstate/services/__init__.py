"""Hotel state services package."""

from hotelstate.services.persistence_service import HotelPersistenceService
from hotelstate.services.room_store import RoomStore

__all__ = [
    "HotelPersistenceService",
    "RoomStore",
]
