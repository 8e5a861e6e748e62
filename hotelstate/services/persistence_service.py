"""Saving and loading hotel state through the tagged-text codec."""

from typing import Any, Optional

from structlog import get_logger

from hotelstate.codec import HotelDecoder, HotelEncoder, RoomMatcher, get_matcher
from hotelstate.config import settings
from hotelstate.exceptions import DecodeError, EncodeError, StorageError
from hotelstate.services.room_store import RoomStore
from hotelstate.storage import TextStorage

logger = get_logger(__name__)


class HotelPersistenceService:
    """Moves hotel state between a RoomStore and its encoded text."""

    def __init__(
        self,
        store: RoomStore,
        storage: Optional[TextStorage] = None,
        matcher: Optional[RoomMatcher] = None,
        encoder: Optional[HotelEncoder] = None,
    ):
        """Initialize the service.

        Args:
            store: Room sequence to save from and load into
            storage: Backend for persist/load_data; not needed for save_data/restore
            matcher: Fragment-to-room policy, from settings when omitted
            encoder: Encoder, from settings when omitted
        """
        self.store = store
        self.storage = storage
        self.matcher = matcher or get_matcher(settings.codec.match_policy)
        self.encoder = encoder or HotelEncoder(
            reject_reserved_text=settings.codec.reject_reserved_text
        )

    def _require_storage(self) -> TextStorage:
        if self.storage is None:
            raise StorageError("No storage backend configured")
        return self.storage

    def save_data(self) -> str:
        """Encode the current rooms.

        Raises:
            EncodeError: If a note or identity contains a reserved delimiter
        """
        try:
            return self.encoder.encode(self.store.get_rooms())
        except EncodeError as e:
            logger.error("Failed to encode rooms", error=str(e))
            raise

    def restore(self, data: str) -> dict[str, Any]:
        """Decode the text and apply it to the store.

        Nothing is applied unless the whole text decodes.

        Args:
            data: Encoded text

        Returns:
            Statistics: fragments, applied, skipped

        Raises:
            DecodeError: If any matched fragment cannot be parsed
        """
        rooms = self.store.get_rooms()
        try:
            patches = HotelDecoder.decode(data, rooms, self.matcher)
        except DecodeError as e:
            logger.error(
                "Failed to decode hotel data, rooms left unchanged",
                path=e.path,
                field=e.field,
                error=str(e),
            )
            raise

        applied = self.store.apply_patches(patches)
        fragments = len(HotelDecoder.split_rooms(data))
        stats = {
            "fragments": fragments,
            "applied": applied,
            "skipped": fragments - applied,
            "guests": sum(room.guest_count for room in self.store.get_rooms()),
        }
        logger.info("Restored hotel data", **stats)
        return stats

    def persist(self) -> str:
        """Encode the current rooms and write them to storage.

        Returns:
            Location the text was written to
        """
        storage = self._require_storage()
        return storage.write_text(self.save_data())

    def load_data(self) -> dict[str, Any]:
        """Read the encoded text from storage and apply it to the store.

        Raises:
            StorageError: If the text cannot be read
            DecodeError: If the text cannot be decoded
        """
        storage = self._require_storage()
        return self.restore(storage.read_text())
