"""Domain models for evaluation subjects and booking requests.

Responsibilities:
  - Define immutable snapshots handed to the rule chain and the pricing resolver.

Invariants:
  - Models must be deterministic containers with no behavior.
  - Optional numeric fields stand for "not reported"; rules decide how to treat them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import AddOn, DisciplinaryFlag, RoomType


@dataclass(frozen=True)
class StudentProfile:
    roll_no: str
    name: str
    cgpa: Optional[float]
    attendance_pct: Optional[int]
    earned_credits: Optional[int]
    disciplinary_flag: Optional[DisciplinaryFlag] = DisciplinaryFlag.NONE


@dataclass(frozen=True)
class BookingRequest:
    room_type: RoomType
    add_ons: tuple[AddOn, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "add_ons", tuple(self.add_ons))
