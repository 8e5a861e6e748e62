"""Guest event enumeration referenced by integer code in the tagged text."""

from enum import IntEnum

from hotelstate.exceptions import UnknownEventCodeError


class GuestEvent(IntEnum):
    """Events recorded against a guest.

    Codes are stable and written to the encoded text as plain integers:
    - 0: CHECK_IN
    - 1: CHECK_OUT
    - 2: BREAKFAST
    - 3: DINNER
    - 4: ROOM_SERVICE
    - 5: LATE_CHECK_OUT
    """
    CHECK_IN = 0
    CHECK_OUT = 1
    BREAKFAST = 2
    DINNER = 3
    ROOM_SERVICE = 4
    LATE_CHECK_OUT = 5

    @classmethod
    def from_code(cls, code: int, path: str = "") -> "GuestEvent":
        """Resolve an integer code to its event.

        Args:
            code: Event code read from the encoded text
            path: Fragment location used in the error message

        Returns:
            Matching GuestEvent

        Raises:
            UnknownEventCodeError: If no event has this code
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownEventCodeError(code, path=path) from None
