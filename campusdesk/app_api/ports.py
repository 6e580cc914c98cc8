"""Port definitions for app-level dependencies.

Responsibilities:
  - Define interface contracts for persistence collaborators.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Protocol

from campusdesk.core.domain.models import BookingRequest
from campusdesk.core.engine.result import FeeTotal


class EligibilityStore(Protocol):
    def save(self, roll_no: str, status_label: str) -> None:
        ...


class BookingRepository(Protocol):
    def exists(self, booking_id: str) -> bool:
        ...

    def save(self, booking_id: str, request: BookingRequest, monthly: FeeTotal, deposit: float) -> None:
        ...
