"""Tests for RoomStore and room matchers."""

import pytest

from hotelstate.codec import KeyedMatcher, PositionalMatcher, get_matcher
from hotelstate.models import Room, RoomPatch
from hotelstate.services import RoomStore


class TestMatchers:
    """Tests for positional and keyed matchers."""

    def test_positional(self):
        rooms = [Room(number=1), Room(number=2)]
        matcher = PositionalMatcher()

        assert matcher.match(1, 2, rooms) == 1
        assert matcher.match(0, 2, rooms) is None
        assert matcher.match(2, 3, rooms) is None

    def test_keyed(self):
        rooms = [Room(number=1), Room(number=2)]
        matcher = KeyedMatcher()

        assert matcher.match(0, 2, rooms) == 1
        assert matcher.match(5, 1, rooms) == 0
        assert matcher.match(0, 3, rooms) is None

    def test_get_matcher(self):
        assert isinstance(get_matcher("positional"), PositionalMatcher)
        assert isinstance(get_matcher("keyed"), KeyedMatcher)

        with pytest.raises(ValueError, match="Unknown match policy"):
            get_matcher("by-floor")


class TestRoomStore:
    """Tests for RoomStore."""

    def test_get_rooms_returns_copy(self):
        store = RoomStore([Room(number=1)])

        rooms = store.get_rooms()
        rooms.append(Room(number=2))

        assert len(store) == 1

    def test_replace_rooms(self):
        store = RoomStore([Room(number=1)])

        store.replace_rooms([Room(number=7), Room(number=8)])

        assert [r.number for r in store.get_rooms()] == [7, 8]

    def test_apply_patches(self, example_room):
        store = RoomStore([Room(number=4), Room(number=5)])

        applied = store.apply_patches([RoomPatch(position=1, room=example_room)])

        assert applied == 1
        assert store.get_rooms() == [Room(number=4), example_room]

    def test_apply_patches_is_all_or_nothing(self, example_room):
        """Test a bad patch leaves every room untouched."""
        store = RoomStore([Room(number=5), Room(number=6)])
        patches = [
            RoomPatch(position=0, room=example_room),
            RoomPatch(position=1, room=example_room),
        ]

        with pytest.raises(ValueError, match="does not match"):
            store.apply_patches(patches)

        assert store.get_rooms() == [Room(number=5), Room(number=6)]

    def test_apply_patch_outside_sequence(self, example_room):
        store = RoomStore([Room(number=5)])

        with pytest.raises(ValueError, match="outside"):
            store.apply_patches([RoomPatch(position=3, room=example_room)])

        assert len(store) == 1

    def test_apply_patches_counts_distinct_rooms(self, example_room):
        store = RoomStore([Room(number=5)])
        later = example_room.model_copy(update={"note": "later"})

        applied = store.apply_patches(
            [RoomPatch(position=0, room=example_room), RoomPatch(position=0, room=later)]
        )

        assert applied == 1
        assert store.get_rooms()[0].note == "later"
