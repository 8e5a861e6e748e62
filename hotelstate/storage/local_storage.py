"""Local file storage for the encoded hotel text."""

from pathlib import Path

from structlog import get_logger

from hotelstate.exceptions import StorageError
from hotelstate.storage.base import TextStorage

logger = get_logger(__name__)


class LocalFileStorage(TextStorage):
    """Keeps the encoded text in a single file."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def read_text(self) -> str:
        logger.info("Reading hotel data", path=str(self.path))
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read hotel data", path=str(self.path), error=str(e))
            raise StorageError(f"Failed to read {self.path}: {e}") from e

    def write_text(self, text: str) -> str:
        logger.info("Writing hotel data", path=str(self.path), length=len(text))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding=self.encoding)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Failed to write hotel data", path=str(self.path), error=str(e))
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        return str(self.path)
