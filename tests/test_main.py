"""Tests for the command line entry point."""

import io
import json

import structlog

from hotelstate.config.logging import add_room_number_prefix, configure_logging
from hotelstate.main import inspect_storage, main
from hotelstate.storage import LocalFileStorage


def test_inspect_decodes_every_room(tmp_path, two_rooms_text):
    path = tmp_path / "hotel.xml"
    path.write_text(two_rooms_text, encoding="utf-8")

    result = inspect_storage(LocalFileStorage(path))

    assert result["success"] is True
    assert result["room_count"] == 2
    assert result["reservation_count"] == 2
    assert result["rooms"][0]["numberOfBeds"] == 2
    assert result["rooms"][0]["reservations"][1]["dateTo"] is None
    assert result["rooms"][0]["reservations"][0]["guests"][0]["events"] == [0, 2]


def test_main_exit_codes(tmp_path, two_rooms_text):
    good = tmp_path / "good.xml"
    good.write_text(two_rooms_text, encoding="utf-8")
    bad = tmp_path / "bad.xml"
    bad.write_text(two_rooms_text.replace("<event>2</event>", "<event>77</event>"), encoding="utf-8")

    assert main(["inspect", str(good)]) == 0
    assert main(["inspect", str(bad)]) == 1
    assert main(["inspect", str(tmp_path / "missing.xml")]) == 1


def test_main_stdout_is_only_json(tmp_path, two_rooms_text, capsys):
    """Test log lines go to stderr so the result can be piped."""
    path = tmp_path / "hotel.xml"
    path.write_text(two_rooms_text, encoding="utf-8")

    assert main(["inspect", str(path)]) == 0

    captured = capsys.readouterr()
    result = json.loads(captured.out)
    assert result["room_count"] == 2
    assert "Reading hotel data" in captured.err


def test_main_undecodable_file(tmp_path, capsys):
    path = tmp_path / "hotel.xml"
    path.write_bytes(b"\xff")

    assert main(["inspect", str(path)]) == 1

    result = json.loads(capsys.readouterr().out)
    assert result["success"] is False
    assert "Failed to read" in result["error"]


class TestLogging:
    """Tests for the logging configuration."""

    def test_room_number_prefix(self):
        event_dict = add_room_number_prefix(None, "info", {"event": "Patched room", "room_number": 101})

        assert event_dict["event"] == "[room 101] Patched room"

    def test_no_prefix_without_room_number(self):
        event_dict = add_room_number_prefix(None, "info", {"event": "Decoding rooms"})

        assert event_dict["event"] == "Decoding rooms"

    def test_configure_logging_stream(self):
        stream = io.StringIO()
        configure_logging(stream=stream)

        structlog.get_logger("hotelstate.tests").info("Room matched", room_number=7)

        assert "[room 7] Room matched" in stream.getvalue()
