"""In-memory persistence fakes for demos and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from campusdesk.core.domain.models import BookingRequest
from campusdesk.core.engine.result import FeeTotal


class InMemoryEligibilityStore:
    def __init__(self) -> None:
        self._rows: dict[str, str] = {}

    def save(self, roll_no: str, status_label: str) -> None:
        self._rows[roll_no] = status_label

    def get(self, roll_no: str) -> Optional[str]:
        return self._rows.get(roll_no)

    def count(self) -> int:
        return len(self._rows)


@dataclass(frozen=True)
class BookingRecord:
    booking_id: str
    request: BookingRequest
    monthly: FeeTotal
    deposit: float


class InMemoryBookingRepo:
    def __init__(self) -> None:
        self._rows: dict[str, BookingRecord] = {}

    def save(self, booking_id: str, request: BookingRequest, monthly: FeeTotal, deposit: float) -> None:
        if booking_id in self._rows:
            raise ValueError(f"Duplicate booking id: {booking_id}")
        self._rows[booking_id] = BookingRecord(
            booking_id=booking_id,
            request=request,
            monthly=monthly,
            deposit=deposit,
        )

    def exists(self, booking_id: str) -> bool:
        return booking_id in self._rows

    def get(self, booking_id: str) -> Optional[BookingRecord]:
        return self._rows.get(booking_id)

    def count(self) -> int:
        return len(self._rows)
