"""Policies pairing decoded room fragments with rooms of the current hotel."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from structlog import get_logger

from hotelstate.models import Room

logger = get_logger(__name__)


class RoomMatcher(ABC):
    """Decides which room, if any, a decoded fragment updates."""

    name: str = "matcher"

    @abstractmethod
    def match(self, index: int, number: int, rooms: Sequence[Room]) -> Optional[int]:
        """Return the position of the room fragment ``index`` updates.

        Args:
            index: Zero-based position of the fragment in the encoded text
            number: Room number read from the fragment
            rooms: Current ordered room sequence

        Returns:
            Target position in ``rooms``, or None to skip the fragment
        """


class PositionalMatcher(RoomMatcher):
    """Fragment i updates room i, and only when both carry the same number."""

    name = "positional"

    def match(self, index: int, number: int, rooms: Sequence[Room]) -> Optional[int]:
        if index >= len(rooms):
            logger.warning(
                "Fragment has no room at its position, skipping",
                fragment_index=index,
                room_count=len(rooms),
                room_number=number,
            )
            return None
        if rooms[index].number != number:
            logger.info(
                "Room number mismatch, leaving room untouched",
                fragment_index=index,
                decoded_number=number,
                room_number=rooms[index].number,
            )
            return None
        return index


class KeyedMatcher(RoomMatcher):
    """Fragment updates whichever room has the same number, wherever it sits."""

    name = "keyed"

    def match(self, index: int, number: int, rooms: Sequence[Room]) -> Optional[int]:
        for position, room in enumerate(rooms):
            if room.number == number:
                return position
        logger.info(
            "No room with decoded number, skipping",
            fragment_index=index,
            room_number=number,
        )
        return None


MATCHERS: dict[str, type[RoomMatcher]] = {
    PositionalMatcher.name: PositionalMatcher,
    KeyedMatcher.name: KeyedMatcher,
}


def get_matcher(policy: str) -> RoomMatcher:
    """Build the matcher for a configured policy name.

    Raises:
        ValueError: If the policy is unknown
    """
    try:
        return MATCHERS[policy]()
    except KeyError:
        raise ValueError(f"Unknown match policy: {policy}") from None
