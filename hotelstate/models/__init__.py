"""Hotel state models."""

from hotelstate.models.event import GuestEvent
from hotelstate.models.room import Guest, Reservation, Room, RoomPatch

__all__ = [
    "GuestEvent",
    "Guest",
    "Reservation",
    "Room",
    "RoomPatch",
]
