"""Encoder writing hotel rooms to the tagged text format."""

from collections.abc import Sequence
from datetime import date
from typing import Optional

from structlog import get_logger

from hotelstate.codec.tags import ATTRIBUTE_END, NULL_DATE, ROOM_NUMBER_PREFIX, Tag, find_reserved
from hotelstate.exceptions import EncodeError
from hotelstate.models import Guest, Reservation, Room

logger = get_logger(__name__)


def _element(tag: Tag, content: str) -> str:
    return f"{tag.open}{content}{tag.close}"


class HotelEncoder:
    """Encodes the ordered room sequence into one flat tagged string.

    No escaping is performed: note and identity text must not contain any of
    the reserved delimiters. With ``reject_reserved_text`` set (the default)
    such text raises EncodeError; otherwise it is written unchecked and the
    result will not decode back to the same state.
    """

    def __init__(self, reject_reserved_text: bool = True):
        self.reject_reserved_text = reject_reserved_text

    def _check_text(self, text: str, path: str, field: str) -> str:
        delimiter = find_reserved(text)
        if delimiter is not None:
            if self.reject_reserved_text:
                raise EncodeError(
                    f"{path}/{field}: text contains reserved delimiter {delimiter!r}"
                )
            logger.warning(
                "Writing text that contains a reserved delimiter",
                path=path,
                field=field,
                delimiter=delimiter,
            )
        return text

    @staticmethod
    def _encode_date(value: Optional[date]) -> str:
        return NULL_DATE if value is None else value.isoformat()

    def _encode_guest(self, guest: Guest, path: str) -> str:
        events = "".join(_element(Tag.EVENT, str(int(event))) for event in guest.events)
        return _element(
            Tag.GUESTS,
            _element(Tag.IDENTITY, self._check_text(guest.identity, path, Tag.IDENTITY.value))
            + _element(Tag.NUMBER_OF_GUESTS, str(guest.number_of_guests))
            + _element(Tag.EVENTS, events),
        )

    def _encode_reservation(self, reservation: Reservation, path: str) -> str:
        guests = "".join(
            self._encode_guest(guest, f"{path}/guest[{index}]")
            for index, guest in enumerate(reservation.guests)
        )
        return _element(
            Tag.RESERVATION,
            _element(Tag.DATE_FROM, self._encode_date(reservation.date_from))
            + _element(Tag.DATE_TO, self._encode_date(reservation.date_to))
            + _element(Tag.GUESTS, _element(Tag.GUEST_DETAILS, guests)),
        )

    def encode_room(self, room: Room, index: int = 0) -> str:
        """Encode a single room fragment, closing tag included.

        Args:
            room: Room to encode
            index: Position of the room, used in error paths

        Returns:
            The room fragment

        Raises:
            EncodeError: If note or identity text contains a reserved delimiter
        """
        path = f"room[{index}]"
        reservations = "".join(
            self._encode_reservation(reservation, f"{path}/reservation[{r_index}]")
            for r_index, reservation in enumerate(room.reservations)
        )
        return (
            f"{ROOM_NUMBER_PREFIX}{room.number}{ATTRIBUTE_END}"
            + _element(Tag.NUMBER_OF_BEDS, str(room.number_of_beds))
            + _element(Tag.NOTE, self._check_text(room.note, path, Tag.NOTE.value))
            + _element(Tag.RESERVATIONS, reservations)
            + Tag.ROOM.close
        )

    def encode(self, rooms: Sequence[Room]) -> str:
        """Encode all rooms, in order, into the tagged text.

        Args:
            rooms: Current ordered room sequence

        Returns:
            Encoded text

        Raises:
            EncodeError: If note or identity text contains a reserved delimiter
        """
        logger.info("Encoding rooms", room_count=len(rooms))

        data = "".join(self.encode_room(room, index) for index, room in enumerate(rooms))

        logger.info(
            "Successfully encoded rooms",
            room_count=len(rooms),
            reservation_count=sum(len(room.reservations) for room in rooms),
            length=len(data),
        )
        return data
