"""Decoder reading hotel rooms back from the tagged text format.

The text is never tokenised. Each field is found by locating its opening
tag, locating the first matching closing tag and slicing between them; lists
are recovered by splitting on the element's closing tag. Nesting is therefore
fixed: room -> reservations -> reservation -> guests/guestDetails -> guests
-> events -> event.
"""

import re
from collections.abc import Sequence
from datetime import date
from typing import Optional

from pydantic import ValidationError
from structlog import get_logger

from hotelstate.codec.matching import PositionalMatcher, RoomMatcher
from hotelstate.codec.tags import ATTRIBUTE_END, NULL_DATE, ROOM_NUMBER_PREFIX, Tag
from hotelstate.exceptions import DecodeError
from hotelstate.models import Guest, GuestEvent, Reservation, Room, RoomPatch

logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class HotelDecoder:
    """Decodes tagged text into room updates for the current hotel."""

    @staticmethod
    def _slice(data: str, tag: Tag, path: str) -> str:
        """Return the text between the first ``<tag>`` and the first ``</tag>``."""
        start = data.find(tag.open)
        if start == -1:
            raise DecodeError("missing opening tag", path=path, field=tag.value)
        end = data.find(tag.close)
        if end == -1:
            raise DecodeError("missing closing tag", path=path, field=tag.value)
        start += len(tag.open)
        if end < start:
            raise DecodeError("closing tag precedes opening tag", path=path, field=tag.value)
        return data[start:end]

    @staticmethod
    def _parse_int(text: str, path: str, field: str) -> int:
        if not _INTEGER.fullmatch(text):
            raise DecodeError(f"not an integer: {text!r}", path=path, field=field)
        return int(text)

    @staticmethod
    def split_rooms(data: str) -> list[str]:
        """Split the text into room fragments.

        Whatever follows the last room closing tag is dropped, so a
        well-formed text yields exactly one fragment per room.
        """
        return data.split(Tag.ROOM.close)[:-1]

    @staticmethod
    def extract_number(fragment: str, path: str) -> int:
        """Read the room number attribute of a room fragment."""
        start = fragment.find(ROOM_NUMBER_PREFIX)
        if start == -1:
            raise DecodeError("missing room number attribute", path=path, field=Tag.NUMBER.value)
        end = fragment.find(ATTRIBUTE_END)
        start += len(ROOM_NUMBER_PREFIX)
        if end < start:
            raise DecodeError("unterminated room number attribute", path=path, field=Tag.NUMBER.value)
        return HotelDecoder._parse_int(fragment[start:end], path, Tag.NUMBER.value)

    @staticmethod
    def _extract_date(fragment: str, tag: Tag, path: str) -> Optional[date]:
        text = HotelDecoder._slice(fragment, tag, path)
        if text == NULL_DATE:
            return None
        if not _ISO_DATE.fullmatch(text):
            raise DecodeError(f"not a YYYY-MM-DD date: {text!r}", path=path, field=tag.value)
        try:
            return date.fromisoformat(text)
        except ValueError as e:
            raise DecodeError(f"invalid date {text!r}: {e}", path=path, field=tag.value) from e

    @staticmethod
    def _extract_events(fragment: str, path: str) -> list[GuestEvent]:
        events: list[GuestEvent] = []
        if Tag.EVENTS.open not in fragment:
            return events
        block = HotelDecoder._slice(fragment, Tag.EVENTS, path)
        for index, piece in enumerate(block.split(Tag.EVENT.close)):
            if Tag.EVENT.open not in piece:
                continue
            event_path = f"{path}/event[{index}]"
            code_text = piece[piece.find(Tag.EVENT.open) + len(Tag.EVENT.open):]
            code = HotelDecoder._parse_int(code_text, event_path, Tag.EVENT.value)
            events.append(GuestEvent.from_code(code, path=event_path))
        return events

    @staticmethod
    def _extract_guests(fragment: str, path: str) -> list[Guest]:
        guests: list[Guest] = []
        if Tag.GUESTS.open not in fragment:
            return guests
        block = HotelDecoder._slice(fragment, Tag.GUEST_DETAILS, path)
        for index, piece in enumerate(block.split(Tag.GUESTS.close)):
            if Tag.IDENTITY.open not in piece:
                continue
            guest_path = f"{path}/guest[{index}]"
            identity = HotelDecoder._slice(piece, Tag.IDENTITY, guest_path)
            number_of_guests = HotelDecoder._parse_int(
                HotelDecoder._slice(piece, Tag.NUMBER_OF_GUESTS, guest_path),
                guest_path,
                Tag.NUMBER_OF_GUESTS.value,
            )
            events = HotelDecoder._extract_events(piece, guest_path)
            try:
                guests.append(
                    Guest(identity=identity, number_of_guests=number_of_guests, events=events)
                )
            except ValidationError as e:
                raise DecodeError(f"invalid guest: {e}", path=guest_path) from e
        return guests

    @staticmethod
    def _extract_reservations(fragment: str, path: str) -> list[Reservation]:
        reservations: list[Reservation] = []
        if Tag.RESERVATIONS.open not in fragment:
            return reservations
        block = HotelDecoder._slice(fragment, Tag.RESERVATIONS, path)
        for index, piece in enumerate(block.split(Tag.RESERVATION.close)):
            if Tag.DATE_FROM.open not in piece:
                continue
            reservation_path = f"{path}/reservation[{index}]"
            date_from = HotelDecoder._extract_date(piece, Tag.DATE_FROM, reservation_path)
            date_to = HotelDecoder._extract_date(piece, Tag.DATE_TO, reservation_path)
            guests = HotelDecoder._extract_guests(piece, reservation_path)
            if not guests:
                logger.debug("Dropping reservation without guests", path=reservation_path)
                continue
            reservations.append(Reservation(date_from=date_from, date_to=date_to, guests=guests))
        return reservations

    @staticmethod
    def decode_room(fragment: str, index: int = 0) -> Room:
        """Parse one room fragment in full.

        Args:
            fragment: Text of one room, without its closing tag
            index: Position of the fragment, used in error paths

        Returns:
            The decoded Room

        Raises:
            DecodeError: If any field of the fragment cannot be parsed
        """
        path = f"room[{index}]"
        number = HotelDecoder.extract_number(fragment, path)
        number_of_beds = HotelDecoder._parse_int(
            HotelDecoder._slice(fragment, Tag.NUMBER_OF_BEDS, path),
            path,
            Tag.NUMBER_OF_BEDS.value,
        )
        note = HotelDecoder._slice(fragment, Tag.NOTE, path)
        reservations = HotelDecoder._extract_reservations(fragment, path)
        try:
            return Room(
                number=number,
                number_of_beds=number_of_beds,
                note=note,
                reservations=reservations,
            )
        except ValidationError as e:
            raise DecodeError(f"invalid room: {e}", path=path) from e

    @staticmethod
    def decode_all(data: str) -> list[Room]:
        """Parse every room fragment without matching against a hotel."""
        return [
            HotelDecoder.decode_room(fragment, index)
            for index, fragment in enumerate(HotelDecoder.split_rooms(data))
        ]

    @staticmethod
    def decode(
        data: str,
        rooms: Sequence[Room],
        matcher: Optional[RoomMatcher] = None,
    ) -> list[RoomPatch]:
        """Decode the text into patches for the given room sequence.

        The room number of each fragment is read first; fragments the
        matcher rejects are skipped without parsing the rest of them. The
        room sequence itself is not modified.

        Args:
            data: Encoded text
            rooms: Current ordered room sequence
            matcher: Fragment-to-room policy, positional by default

        Returns:
            One RoomPatch per accepted fragment, in text order

        Raises:
            DecodeError: If any accepted fragment cannot be parsed
        """
        matcher = matcher or PositionalMatcher()
        fragments = HotelDecoder.split_rooms(data)

        logger.info(
            "Decoding rooms",
            fragment_count=len(fragments),
            room_count=len(rooms),
            matcher=matcher.name,
        )

        patches: list[RoomPatch] = []
        matched_by: dict[int, int] = {}
        for index, fragment in enumerate(fragments):
            number = HotelDecoder.extract_number(fragment, f"room[{index}]")
            position = matcher.match(index, number, rooms)
            if position is None:
                continue
            if position in matched_by:
                logger.warning(
                    "Room matched by more than one fragment, last one wins",
                    room_number=number,
                    position=position,
                    fragment_index=index,
                    previous_fragment_index=matched_by[position],
                )
            matched_by[position] = index
            room = HotelDecoder.decode_room(fragment, index)
            patches.append(RoomPatch(position=position, room=room))
            logger.debug(
                "Decoded room fragment",
                room_number=number,
                fragment_index=index,
                position=position,
                reservation_count=len(room.reservations),
            )

        logger.info(
            "Successfully decoded rooms",
            fragment_count=len(fragments),
            matched=len(patches),
            rooms_matched=len(matched_by),
            skipped=len(fragments) - len(patches),
        )
        return patches
