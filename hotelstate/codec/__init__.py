"""Tagged-text codec package."""

from hotelstate.codec.decoder import HotelDecoder
from hotelstate.codec.encoder import HotelEncoder
from hotelstate.codec.matching import KeyedMatcher, PositionalMatcher, RoomMatcher, get_matcher
from hotelstate.codec.tags import Tag, find_reserved

__all__ = [
    "HotelDecoder",
    "HotelEncoder",
    "KeyedMatcher",
    "PositionalMatcher",
    "RoomMatcher",
    "get_matcher",
    "Tag",
    "find_reserved",
]
