"""Owner of the hotel's ordered room sequence."""

from collections.abc import Iterable, Sequence

from structlog import get_logger

from hotelstate.models import Room, RoomPatch

logger = get_logger(__name__)


class RoomStore:
    """Holds the ordered room sequence of one hotel.

    The order is significant: positional decoding pairs fragment i with the
    room at index i. The store is not thread-safe; callers must not read it
    while patches are being applied from another thread.
    """

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: list[Room] = list(rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def get_rooms(self) -> list[Room]:
        """Return the current rooms, in order."""
        return list(self._rooms)

    def replace_rooms(self, rooms: Iterable[Room]) -> None:
        """Install a new room sequence wholesale."""
        self._rooms = list(rooms)
        logger.info("Replaced rooms", room_count=len(self._rooms))

    def apply_patches(self, patches: Sequence[RoomPatch]) -> int:
        """Replace the fields of the patched rooms in one step.

        Every patch is checked before anything changes, so either all
        patches are applied or none is. The number of rooms never changes.

        Args:
            patches: Decoded room patches

        Returns:
            Number of distinct rooms updated; when several patches target
            the same position the last one wins

        Raises:
            ValueError: If a patch targets a missing position or a room with a different number
        """
        for patch in patches:
            if patch.position >= len(self._rooms):
                raise ValueError(
                    f"Patch position {patch.position} outside of {len(self._rooms)} rooms"
                )
            current = self._rooms[patch.position]
            if current.number != patch.room.number:
                raise ValueError(
                    f"Patch for room {patch.room.number} does not match room "
                    f"{current.number} at position {patch.position}"
                )

        rooms = list(self._rooms)
        for patch in patches:
            rooms[patch.position] = rooms[patch.position].model_copy(
                update={
                    "number_of_beds": patch.room.number_of_beds,
                    "note": patch.room.note,
                    "reservations": patch.room.reservations,
                }
            )
            logger.debug("Patched room", room_number=patch.room.number, position=patch.position)
        self._rooms = rooms

        updated = len({patch.position for patch in patches})
        logger.info(
            "Applied room patches",
            patch_count=len(patches),
            rooms_updated=updated,
            room_count=len(rooms),
        )
        return updated
