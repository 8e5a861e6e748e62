"""Command line entry point for inspecting encoded hotel data."""

import argparse
import json
import sys
from typing import Any, Optional

from hotelstate.codec import HotelDecoder
from hotelstate.config import configure_logging, get_logger, settings
from hotelstate.exceptions import HotelStateError
from hotelstate.storage import LocalFileStorage, TextStorage, build_storage

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotelstate",
        description="Inspect encoded hotel room data",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Decode every room of an encoded file and print it as JSON",
    )
    inspect_parser.add_argument(
        "path",
        nargs="?",
        help="Encoded file (defaults to the configured storage)",
    )
    return parser


def inspect_storage(storage: TextStorage) -> dict[str, Any]:
    """Decode every room fragment held by the storage.

    Returns:
        Dictionary with the decoded rooms and counts
    """
    rooms = HotelDecoder.decode_all(storage.read_text())
    return {
        "success": True,
        "room_count": len(rooms),
        "reservation_count": sum(len(room.reservations) for room in rooms),
        "rooms": [room.model_dump(mode="json", by_alias=True) for room in rooms],
    }


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line.

    Returns:
        Exit code: 0 on success, 1 on any codec, storage or configuration error
    """
    args = _build_parser().parse_args(argv)
    # stdout carries the JSON result only
    configure_logging(stream=sys.stderr)

    if args.path:
        storage: TextStorage = LocalFileStorage(args.path, encoding=settings.storage.encoding)
    else:
        missing = settings.validate_storage()
        if missing:
            logger.error("Storage config incomplete", missing=missing)
            print(json.dumps({"success": False, "error": f"Missing: {', '.join(missing)}"}))
            return 1
        storage = build_storage(settings)

    try:
        result = inspect_storage(storage)
    except HotelStateError as e:
        logger.error("Inspection failed", error=str(e))
        print(json.dumps({"success": False, "error": str(e)}))
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
