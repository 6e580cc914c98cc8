"""Domain enums for eligibility outcomes and hostel pricing keys.

Responsibilities:
  - Define EvaluationStatus and the persisted labels written to storage.
  - Define discriminant keys (RoomType, AddOn) and disciplinary flags.

Invariants:
  - Enum values must remain stable for persistence and audits.
  - Every EvaluationStatus must have a persisted label.
"""

from __future__ import annotations

from enum import Enum


class EvaluationStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"


class DisciplinaryFlag(Enum):
    NONE = "NONE"
    WARNING = "WARNING"
    PROBATION = "PROBATION"
    SUSPENDED = "SUSPENDED"


# Values match the legacy integer room codes.
class RoomType(Enum):
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    DELUXE = 4


class AddOn(Enum):
    MESS = "MESS"
    LAUNDRY = "LAUNDRY"
    GYM = "GYM"


_STATUS_PERSISTED: dict[EvaluationStatus, str] = {
    EvaluationStatus.PASS: "ELIGIBLE",
    EvaluationStatus.FAIL: "NOT_ELIGIBLE",
}


def status_to_persisted(status: EvaluationStatus) -> str:
    return _STATUS_PERSISTED[status]


def status_from_persisted(label: str) -> EvaluationStatus | None:
    if not label:
        return None
    for status, persisted in _STATUS_PERSISTED.items():
        if persisted == label:
            return status
    try:
        return EvaluationStatus(label)
    except ValueError:
        return None


def room_type_from_name(name: str) -> RoomType:
    try:
        return RoomType[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown room type: {name}") from None


def add_on_from_name(name: str) -> AddOn:
    try:
        return AddOn[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown add-on: {name}") from None


_missing = [s for s in EvaluationStatus if s not in _STATUS_PERSISTED]
if _missing:
    raise RuntimeError(f"Missing persisted label for: {[m.value for m in _missing]}")
