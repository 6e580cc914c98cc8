"""Placement eligibility rules.

Responsibilities:
  - One rule per disqualifying condition (disciplinary, CGPA, attendance, credits).
  - Treat a missing attribute as a violation of the rule that reads it.
Must not:
  - Decide ordering; the rule chain order comes from configuration.
Key definitions:
  - DisciplinaryRule, CgpaRule, AttendanceRule, CreditsRule, build_eligibility_rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from campusdesk.core.domain.enums import DisciplinaryFlag
from campusdesk.core.domain.models import StudentProfile
from .types import Rule

if TYPE_CHECKING:
    from campusdesk.core.config import EligibilityConfig


def _plain(number: float) -> str:
    if float(number).is_integer():
        return str(int(number))
    return str(number)


@dataclass(frozen=True)
class DisciplinaryRule:
    name: str = "disciplinary"

    def check(self, subject: StudentProfile) -> Optional[str]:
        if subject.disciplinary_flag != DisciplinaryFlag.NONE:
            return "Disciplinary flag present"
        return None


@dataclass(frozen=True)
class CgpaRule:
    min_cgpa: float = 6.0
    name: str = "cgpa"

    def check(self, subject: StudentProfile) -> Optional[str]:
        if subject.cgpa is None or subject.cgpa < self.min_cgpa:
            return f"CGPA below {float(self.min_cgpa)}"
        return None


@dataclass(frozen=True)
class AttendanceRule:
    min_attendance_pct: float = 75
    name: str = "attendance"

    def check(self, subject: StudentProfile) -> Optional[str]:
        if subject.attendance_pct is None or subject.attendance_pct < self.min_attendance_pct:
            return f"Attendance below {_plain(self.min_attendance_pct)}%"
        return None


@dataclass(frozen=True)
class CreditsRule:
    min_credits: int = 15
    name: str = "credits"

    def check(self, subject: StudentProfile) -> Optional[str]:
        if subject.earned_credits is None or subject.earned_credits < self.min_credits:
            return f"Credits below {self.min_credits}"
        return None


DEFAULT_RULE_ORDER = ("disciplinary", "cgpa", "attendance", "credits")

RULE_BUILDERS: Dict[str, Callable[["EligibilityConfig"], Rule]] = {
    "disciplinary": lambda cfg: DisciplinaryRule(),
    "cgpa": lambda cfg: CgpaRule(min_cgpa=cfg.min_cgpa),
    "attendance": lambda cfg: AttendanceRule(min_attendance_pct=cfg.min_attendance_pct),
    "credits": lambda cfg: CreditsRule(min_credits=cfg.min_credits),
}


def build_eligibility_rules(config: "EligibilityConfig") -> List[Rule]:
    rules: List[Rule] = []
    for rule_name in config.rule_order:
        builder = RULE_BUILDERS.get(rule_name)
        if builder is None:
            raise ValueError(f"Unknown eligibility rule: {rule_name}")
        rules.append(builder(config))
    return rules


def default_eligibility_rules() -> List[Rule]:
    return [DisciplinaryRule(), CgpaRule(), AttendanceRule(), CreditsRule()]
