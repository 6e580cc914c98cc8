"""SQLite store for placement eligibility outcomes (eligibility_result)."""

from __future__ import annotations

import sqlite3
from typing import Optional


class SQLiteEligibilityStore:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def save(self, roll_no: str, status_label: str) -> None:
        self._conn.execute(
            """
            INSERT INTO eligibility_result (roll_no, status)
            VALUES (?, ?)
            ON CONFLICT(roll_no) DO UPDATE SET
                status=excluded.status
            """,
            (roll_no, status_label),
        )

    def get(self, roll_no: str) -> Optional[str]:
        row = self._conn.execute(
            "SELECT status FROM eligibility_result WHERE roll_no = ?",
            (roll_no,),
        ).fetchone()
        if row is None:
            return None
        return row[0]

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM eligibility_result").fetchone()[0]
