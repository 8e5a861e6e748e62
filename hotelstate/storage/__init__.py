"""Storage backends for the encoded hotel text."""

from hotelstate.config.settings import Settings
from hotelstate.storage.base import TextStorage
from hotelstate.storage.local_storage import LocalFileStorage
from hotelstate.storage.s3_storage import S3TextStorage


def build_storage(settings: Settings) -> TextStorage:
    """Build the storage backend selected by ``storage.backend``."""
    if settings.storage.backend == "s3":
        return S3TextStorage(
            bucket=settings.aws.bucket,
            key=settings.aws.key,
            encoding=settings.storage.encoding,
        )
    return LocalFileStorage(settings.storage.path, encoding=settings.storage.encoding)


__all__ = [
    "TextStorage",
    "LocalFileStorage",
    "S3TextStorage",
    "build_storage",
]
