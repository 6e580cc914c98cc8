"""Run the placement eligibility check for one student.

Purpose:
  - Evaluate a student profile against the configured rule chain and record the outcome.
Inputs:
  - CLI args for the profile fields, config id/dir and optional SQLite path.
Outputs:
  - Printed report to stdout; exit code 0 when ELIGIBLE, 1 when NOT_ELIGIBLE.
Example:
  - python -m campusdesk.cli.run_eligibility --roll-no 23BCS1001 --name Ayaan \
      --cgpa 8.10 --attendance 72 --credits 18
Debug:
  - --debug prints every rule-chain decision.
"""

from __future__ import annotations

import argparse

from campusdesk.app_api.factories import build_placement_app
from campusdesk.app_api.presenters import format_eligibility_report
from campusdesk.cli._debug_utils import _dbg, clear_engine_debug, install_engine_debug
from campusdesk.core.config import DEFAULT_ELIGIBILITY_CONFIG_ID
from campusdesk.core.domain.enums import DisciplinaryFlag, status_to_persisted
from campusdesk.core.domain.models import StudentProfile
from campusdesk.infra.memory.stores import InMemoryEligibilityStore
from campusdesk.infra.sqlite.db import get_connection
from campusdesk.infra.sqlite.migrator import apply_migrations
from campusdesk.infra.sqlite.repos.eligibility_repo import SQLiteEligibilityStore


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check placement eligibility for a student")
    parser.add_argument("--roll-no", required=True, help="Student roll number")
    parser.add_argument("--name", required=True, help="Student name")
    parser.add_argument("--cgpa", type=float, default=None, help="Cumulative GPA")
    parser.add_argument("--attendance", type=int, default=None, help="Attendance percentage")
    parser.add_argument("--credits", type=int, default=None, help="Earned credits")
    parser.add_argument(
        "--flag",
        choices=[flag.name for flag in DisciplinaryFlag],
        default=DisciplinaryFlag.NONE.name,
        help="Disciplinary flag",
    )
    parser.add_argument("--config-id", default=DEFAULT_ELIGIBILITY_CONFIG_ID, help="Eligibility config id")
    parser.add_argument("--config-dir", default=None, help="Directory holding <config-id>.json")
    parser.add_argument("--db", default=None, help="SQLite path (in-memory store when omitted)")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    return parser.parse_args()


def build_profile(args: argparse.Namespace) -> StudentProfile:
    return StudentProfile(
        roll_no=args.roll_no.strip(),
        name=args.name.strip(),
        cgpa=args.cgpa,
        attendance_pct=args.attendance,
        earned_credits=args.credits,
        disciplinary_flag=DisciplinaryFlag[args.flag],
    )


def main() -> None:
    args = parse_args()
    profile = build_profile(args)
    install_engine_debug(args)
    conn = get_connection(args.db) if args.db else None
    try:
        if conn is not None:
            apply_migrations(conn)
            store = SQLiteEligibilityStore(conn)
        else:
            store = InMemoryEligibilityStore()
        try:
            app = build_placement_app(store, config_id=args.config_id, config_dir=args.config_dir)
        except ValueError as exc:
            raise SystemExit(f"ERROR: {exc}") from None
        _dbg(args, f"config_id={args.config_id} rules={','.join(app.rule_names)}")

        print("=== Placement Eligibility ===")
        result = app.run(profile)
        if conn is not None:
            conn.commit()
        print(format_eligibility_report(profile, result), end="")
        print(f"Saved: {profile.roll_no} -> {status_to_persisted(result.status)}")
    finally:
        clear_engine_debug()
        if conn is not None:
            conn.close()

    raise SystemExit(0 if result.passed else 1)


if __name__ == "__main__":
    main()
