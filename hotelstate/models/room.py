"""Pydantic models for the hotel room state."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hotelstate.models.event import GuestEvent


class Guest(BaseModel):
    """Guest record attached to a reservation."""

    identity: str = Field(description="Opaque identity, e.g. document or ID number")
    number_of_guests: int = Field(
        gt=0,
        alias="numberOfGuests",
        description="Number of persons covered by this guest record",
    )
    events: list[GuestEvent] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class Reservation(BaseModel):
    """Reservation of a room. Dates are None when no date was given."""

    date_from: Optional[date] = Field(None, alias="dateFrom")
    date_to: Optional[date] = Field(None, alias="dateTo")
    guests: list[Guest] = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class Room(BaseModel):
    """Hotel room with its reservations."""

    number: int = Field(gt=0, description="Unique room number")
    number_of_beds: int = Field(default=0, ge=0, alias="numberOfBeds")
    note: str = ""
    reservations: list[Reservation] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def guest_count(self) -> int:
        """Total persons across all reservations of the room."""
        return sum(
            guest.number_of_guests
            for reservation in self.reservations
            for guest in reservation.guests
        )


class RoomPatch(BaseModel):
    """Decoded replacement for the room at a given position in the hotel."""

    position: int = Field(ge=0)
    room: Room
