"""Plain-text rendering of eligibility reports and hostel receipts.

Responsibilities:
  - Turn result values into human-readable text for the CLI.
Must not:
  - Evaluate rules, price anything, or write to storage.
"""

from __future__ import annotations

from campusdesk.core.domain.enums import status_to_persisted
from campusdesk.core.domain.models import StudentProfile
from campusdesk.core.engine.result import EvaluationResult, ResolutionResult
from .facade import BookingReceipt


def _money(amount: float) -> str:
    return f"{amount:.2f}"


def _or_missing(value: object) -> str:
    return "n/a" if value is None else str(value)


def format_eligibility_report(profile: StudentProfile, result: EvaluationResult) -> str:
    flag = profile.disciplinary_flag.value if profile.disciplinary_flag is not None else "n/a"
    cgpa = f"{profile.cgpa:.2f}" if profile.cgpa is not None else "n/a"
    lines = [
        f"Student: {profile.name} ({profile.roll_no})",
        (
            f"CGPA={cgpa} attendance={_or_missing(profile.attendance_pct)} "
            f"credits={_or_missing(profile.earned_credits)} flag={flag}"
        ),
        f"RESULT: {status_to_persisted(result.status)}",
    ]
    for reason in result.reasons:
        lines.append(f"- {reason}")
    return "\n".join(lines) + "\n"


def _line_label(resolution: ResolutionResult) -> str:
    name = getattr(resolution.discriminant, "name", str(resolution.discriminant))
    if resolution.matched:
        return name
    return f"{name} (default)"


def format_receipt(receipt: BookingReceipt) -> str:
    monthly = receipt.monthly
    lines = [
        f"Booking: {receipt.booking_id}",
        f"Room: {_line_label(monthly.primary)} {_money(monthly.primary.value)}",
    ]
    for add_on in monthly.add_ons:
        lines.append(f"Add-on: {_line_label(add_on)} {_money(add_on.value)}")
    lines.append(f"Monthly: {_money(monthly.amount)}")
    lines.append(f"Deposit: {_money(receipt.deposit)}")
    lines.append(f"TOTAL DUE NOW: {_money(receipt.due_now)}")
    return "\n".join(lines) + "\n"
