"""SQLite repository for hostel bookings (hostel_booking).

Responsibilities:
  - Persist booking id, room, add-ons, monthly amount and deposit.
Must not:
  - Recompute prices; amounts are stored as handed in.
"""

from __future__ import annotations

import json
import sqlite3
from typing import Any, Optional

from campusdesk.core.domain.models import BookingRequest
from campusdesk.core.engine.result import FeeTotal


class SQLiteBookingRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def save(self, booking_id: str, request: BookingRequest, monthly: FeeTotal, deposit: float) -> None:
        add_ons_json = json.dumps(
            [add_on.name for add_on in request.add_ons],
            separators=(",", ":"),
            ensure_ascii=False,
        )
        self._conn.execute(
            """
            INSERT INTO hostel_booking (
                booking_id,
                room_type,
                add_ons_json,
                monthly,
                deposit
            ) VALUES (?, ?, ?, ?, ?)
            """,
            (
                booking_id,
                request.room_type.name,
                add_ons_json,
                monthly.amount,
                deposit,
            ),
        )

    def exists(self, booking_id: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM hostel_booking WHERE booking_id = ?",
            (booking_id,),
        ).fetchone()
        return row is not None

    def get(self, booking_id: str) -> Optional[dict[str, Any]]:
        row = self._conn.execute(
            """
            SELECT booking_id, room_type, add_ons_json, monthly, deposit
            FROM hostel_booking
            WHERE booking_id = ?
            """,
            (booking_id,),
        ).fetchone()
        if row is None:
            return None
        return {
            "booking_id": row[0],
            "room_type": row[1],
            "add_ons": json.loads(row[2]),
            "monthly": row[3],
            "deposit": row[4],
        }

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM hostel_booking").fetchone()[0]
