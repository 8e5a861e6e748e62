import logging
from datetime import date
from pathlib import Path

import pytest
import structlog

from hotelstate.models import Guest, GuestEvent, Reservation, Room
from hotelstate.services import RoomStore


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def two_rooms_text():
    """Load encoded text holding rooms 101 and 102."""
    with open(FIXTURES_DIR / "encoded" / "two_rooms.xml", encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def example_room():
    """Room 5 with one open-ended reservation and a single guest."""
    return Room(
        number=5,
        number_of_beds=2,
        note="clean",
        reservations=[
            Reservation(
                date_from=date(2024, 1, 1),
                date_to=None,
                guests=[Guest(identity="A123", number_of_guests=1)],
            )
        ],
    )


@pytest.fixture
def two_rooms():
    """Rooms 101 and 102 as held in two_rooms.xml."""
    return [
        Room(
            number=101,
            number_of_beds=2,
            note="sea view",
            reservations=[
                Reservation(
                    date_from=date(2024, 3, 1),
                    date_to=date(2024, 3, 5),
                    guests=[
                        Guest(
                            identity="PT-884213",
                            number_of_guests=2,
                            events=[GuestEvent.CHECK_IN, GuestEvent.BREAKFAST],
                        ),
                        Guest(identity="ES-117", number_of_guests=1),
                    ],
                ),
                Reservation(
                    date_from=date(2024, 4, 10),
                    date_to=None,
                    guests=[
                        Guest(
                            identity="FR-55",
                            number_of_guests=3,
                            events=[GuestEvent.ROOM_SERVICE],
                        ),
                    ],
                ),
            ],
        ),
        Room(number=102, number_of_beds=1, note=""),
    ]


@pytest.fixture
def empty_store():
    """Store with bare rooms 101 and 102, waiting to be loaded."""
    return RoomStore([Room(number=101), Room(number=102)])


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging so they never outlive a test."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
