"""Price a hostel booking and record it.

Purpose:
  - Resolve the room price and each add-on price, sum them, and save the booking.
Inputs:
  - CLI args for room type, repeated add-ons, config id/dir, booking seed and SQLite path.
Outputs:
  - Printed receipt to stdout.
Example:
  - python -m campusdesk.cli.run_hostel_fee --room DOUBLE --add-on LAUNDRY --add-on MESS
Debug:
  - --debug prints every strategy match and fallback.
"""

from __future__ import annotations

import argparse

from campusdesk.app_api.factories import build_hostel_app
from campusdesk.app_api.presenters import format_receipt
from campusdesk.cli._debug_utils import _dbg, clear_engine_debug, install_engine_debug
from campusdesk.core.config import DEFAULT_HOSTEL_CONFIG_ID
from campusdesk.core.domain.enums import AddOn, RoomType
from campusdesk.core.domain.models import BookingRequest
from campusdesk.infra.memory.stores import InMemoryBookingRepo
from campusdesk.infra.sqlite.db import get_connection
from campusdesk.infra.sqlite.migrator import apply_migrations
from campusdesk.infra.sqlite.repos.booking_repo import SQLiteBookingRepo


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate hostel fees for a booking")
    parser.add_argument("--room", required=True, choices=[r.name for r in RoomType], help="Room type")
    parser.add_argument(
        "--add-on",
        dest="add_ons",
        action="append",
        default=[],
        choices=[a.name for a in AddOn],
        help="Add-on (repeatable)",
    )
    parser.add_argument("--config-id", default=DEFAULT_HOSTEL_CONFIG_ID, help="Pricing config id")
    parser.add_argument("--config-dir", default=None, help="Directory holding <config-id>.json")
    parser.add_argument("--seed", type=int, default=1, help="Booking id generator seed")
    parser.add_argument("--db", default=None, help="SQLite path (in-memory repo when omitted)")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    return parser.parse_args()


def build_request(args: argparse.Namespace) -> BookingRequest:
    return BookingRequest(
        room_type=RoomType[args.room],
        add_ons=tuple(AddOn[name] for name in args.add_ons),
    )


def main() -> None:
    args = parse_args()
    request = build_request(args)
    install_engine_debug(args)
    conn = get_connection(args.db) if args.db else None
    try:
        if conn is not None:
            apply_migrations(conn)
            repo = SQLiteBookingRepo(conn)
        else:
            repo = InMemoryBookingRepo()
        try:
            app = build_hostel_app(
                repo,
                config_id=args.config_id,
                config_dir=args.config_dir,
                booking_seed=args.seed,
            )
        except ValueError as exc:
            raise SystemExit(f"ERROR: {exc}") from None
        _dbg(args, f"config_id={args.config_id} room={request.room_type.name} add_ons={len(request.add_ons)}")

        print("=== Hostel Fee Calculator ===")
        receipt = app.process(request)
        if conn is not None:
            conn.commit()
        print(format_receipt(receipt), end="")
        print(f"Saved booking: {receipt.booking_id}")
    finally:
        clear_engine_debug()
        if conn is not None:
            conn.close()


if __name__ == "__main__":
    main()
