"""Custom exceptions for hotel state persistence."""
from __future__ import annotations

from typing import Optional


class HotelStateError(Exception):
    """Base exception for all hotel state errors."""
    pass


class CodecError(HotelStateError):
    """Raised when the tagged-text codec cannot encode or decode."""
    pass


class EncodeError(CodecError):
    """Raised when room state cannot be written without corrupting the format."""
    pass


class DecodeError(CodecError):
    """Raised when a fragment of the encoded text cannot be parsed.

    Attributes:
        path: Fragment location, e.g. ``room[1]/reservation[0]/guest[2]``
        field: Tag or attribute that failed, e.g. ``dateFrom``
    """

    def __init__(self, message: str, path: str = "", field: Optional[str] = None):
        self.message = message
        self.path = path
        self.field = field
        location = path
        if field:
            location = f"{path}/{field}" if path else field
        super().__init__(f"{location}: {message}" if location else message)


class UnknownEventCodeError(DecodeError):
    """Raised when an event code has no matching guest event."""

    def __init__(self, code: int, path: str = ""):
        self.code = code
        super().__init__(f"unknown event code {code}", path=path, field="event")


class StorageError(HotelStateError):
    """Raised when the encoded text cannot be read from or written to storage."""
    pass
