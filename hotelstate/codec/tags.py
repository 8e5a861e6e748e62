"""Tag vocabulary shared by the encoder and decoder.

Both directions must agree byte-for-byte on these spellings.
"""

from enum import Enum
from typing import Optional


class Tag(str, Enum):
    """Element and attribute names of the tagged hotel format."""
    ROOM = "room"
    NUMBER = "number"
    NUMBER_OF_BEDS = "numberOfBeds"
    NOTE = "note"
    RESERVATIONS = "reservations"
    RESERVATION = "reservation"
    DATE_FROM = "dateFrom"
    DATE_TO = "dateTo"
    GUESTS = "guests"
    GUEST_DETAILS = "guestDetails"
    IDENTITY = "identity"
    NUMBER_OF_GUESTS = "numberOfGuests"
    EVENTS = "events"
    EVENT = "event"

    @property
    def open(self) -> str:
        return f"<{self.value}>"

    @property
    def close(self) -> str:
        return f"</{self.value}>"


# <room number="
ROOM_NUMBER_PREFIX = f'<{Tag.ROOM.value} {Tag.NUMBER.value}="'
ATTRIBUTE_END = '">'
NULL_DATE = "null"

RESERVED_DELIMITERS: tuple[str, ...] = (ROOM_NUMBER_PREFIX,) + tuple(
    delimiter for tag in Tag for delimiter in (tag.open, tag.close)
)


def find_reserved(text: str) -> Optional[str]:
    """Return the first reserved delimiter contained in free text, if any.

    Args:
        text: Note or identity text about to be written

    Returns:
        The offending delimiter, or None when the text is safe to embed
    """
    for delimiter in RESERVED_DELIMITERS:
        if delimiter in text:
            return delimiter
    return None
