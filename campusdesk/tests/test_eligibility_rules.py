"""Tests for individual placement eligibility rules."""

from __future__ import annotations

from campusdesk.core.config import load_eligibility_config
from campusdesk.core.domain.enums import DisciplinaryFlag
from campusdesk.core.domain.models import StudentProfile
from campusdesk.core.rules.eligibility import (
    AttendanceRule,
    CgpaRule,
    CreditsRule,
    DisciplinaryRule,
    build_eligibility_rules,
    default_eligibility_rules,
)


def mk_profile(**overrides) -> StudentProfile:
    fields = dict(
        roll_no="23BCS1001",
        name="Ayaan",
        cgpa=8.10,
        attendance_pct=80,
        earned_credits=18,
        disciplinary_flag=DisciplinaryFlag.NONE,
    )
    fields.update(overrides)
    return StudentProfile(**fields)


def test_disciplinary_rule():
    assert DisciplinaryRule().check(mk_profile()) is None
    assert DisciplinaryRule().check(mk_profile(disciplinary_flag=DisciplinaryFlag.PROBATION)) == (
        "Disciplinary flag present"
    )
    assert DisciplinaryRule().check(mk_profile(disciplinary_flag=None)) == "Disciplinary flag present"


def test_cgpa_rule_threshold_is_inclusive():
    rule = CgpaRule(min_cgpa=6.0)
    assert rule.check(mk_profile(cgpa=6.0)) is None
    assert rule.check(mk_profile(cgpa=5.99)) == "CGPA below 6.0"
    assert rule.check(mk_profile(cgpa=None)) == "CGPA below 6.0"


def test_cgpa_rule_reason_keeps_two_decimal_minimum():
    assert CgpaRule(min_cgpa=6.25).check(mk_profile(cgpa=6.0)) == "CGPA below 6.25"
    assert CgpaRule(min_cgpa=6.04).check(mk_profile(cgpa=6.0)) == "CGPA below 6.04"
    assert CgpaRule(min_cgpa=7).check(mk_profile(cgpa=6.0)) == "CGPA below 7.0"


def test_attendance_rule_reason_uses_configured_minimum():
    assert AttendanceRule(75).check(mk_profile(attendance_pct=75)) is None
    assert AttendanceRule(75).check(mk_profile(attendance_pct=72)) == "Attendance below 75%"
    assert AttendanceRule(80.5).check(mk_profile(attendance_pct=80)) == "Attendance below 80.5%"
    assert AttendanceRule(75).check(mk_profile(attendance_pct=None)) == "Attendance below 75%"


def test_credits_rule():
    assert CreditsRule(15).check(mk_profile(earned_credits=15)) is None
    assert CreditsRule(15).check(mk_profile(earned_credits=14)) == "Credits below 15"
    assert CreditsRule(15).check(mk_profile(earned_credits=None)) == "Credits below 15"


def test_build_rules_follows_configured_order():
    config = load_eligibility_config("PLACEMENT_V1")
    rules = build_eligibility_rules(config)
    assert [r.name for r in rules] == ["disciplinary", "cgpa", "attendance", "credits"]
    assert rules == default_eligibility_rules()
