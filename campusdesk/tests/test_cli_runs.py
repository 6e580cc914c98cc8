"""Tests for eligibility and hostel fee CLIs."""

from __future__ import annotations

import sqlite3
import sys

import pytest


def test_run_eligibility_not_eligible_exit_code(capsys, monkeypatch):
    from campusdesk.cli import run_eligibility as mod

    monkeypatch.setattr(
        sys,
        "argv",
        [
            "run_eligibility.py",
            "--roll-no", "23BCS1001",
            "--name", "Ayaan",
            "--cgpa", "8.10",
            "--attendance", "72",
            "--credits", "18",
        ],
    )
    with pytest.raises(SystemExit) as exc:
        mod.main()
    assert exc.value.code == 1

    out = capsys.readouterr().out
    assert "RESULT: NOT_ELIGIBLE" in out
    assert "- Attendance below 75%" in out
    assert "Saved: 23BCS1001 -> NOT_ELIGIBLE" in out


def test_run_eligibility_persists_to_db_with_debug(tmp_path, capsys, monkeypatch):
    from campusdesk.cli import run_eligibility as mod

    db_path = tmp_path / "campus.db"
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "run_eligibility.py",
            "--roll-no", "23BCS1002",
            "--name", "Riya",
            "--cgpa", "9.2",
            "--attendance", "91",
            "--credits", "20",
            "--db", str(db_path),
            "--debug",
        ],
    )
    with pytest.raises(SystemExit) as exc:
        mod.main()
    assert exc.value.code == 0

    out = capsys.readouterr().out
    assert "[debug] config_id=PLACEMENT_V1 rules=disciplinary,cgpa,attendance,credits" in out
    assert "[debug] RULE_CHAIN_PASS subject=23BCS1002" in out

    conn = sqlite3.connect(db_path)
    try:
        row = conn.execute("SELECT status FROM eligibility_result WHERE roll_no = ?", ("23BCS1002",)).fetchone()
    finally:
        conn.close()
    assert row == ("ELIGIBLE",)


def test_run_hostel_fee_prints_total(tmp_path, capsys, monkeypatch):
    from campusdesk.cli import run_hostel_fee as mod

    db_path = tmp_path / "campus.db"
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "run_hostel_fee.py",
            "--room", "DOUBLE",
            "--add-on", "LAUNDRY",
            "--add-on", "MESS",
            "--db", str(db_path),
        ],
    )
    mod.main()

    out = capsys.readouterr().out
    assert "Monthly: 16500.00" in out
    assert "Deposit: 5000.00" in out
    assert "TOTAL DUE NOW: 21500.00" in out

    conn = sqlite3.connect(db_path)
    try:
        count = conn.execute("SELECT COUNT(*) FROM hostel_booking").fetchone()[0]
    finally:
        conn.close()
    assert count == 1


def test_run_hostel_fee_twice_on_same_db_keeps_both_bookings(tmp_path, capsys, monkeypatch):
    from campusdesk.cli import run_hostel_fee as mod

    db_path = tmp_path / "campus.db"
    saved = []
    for room in ("DOUBLE", "SINGLE"):
        monkeypatch.setattr(sys, "argv", ["run_hostel_fee.py", "--room", room, "--db", str(db_path)])
        mod.main()
        out = capsys.readouterr().out
        saved.append(out.split("Saved booking: ")[1].strip())

    assert saved[0] != saved[1]
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT booking_id, room_type FROM hostel_booking ORDER BY room_type").fetchall()
    finally:
        conn.close()
    assert sorted(rows) == sorted([(saved[0], "DOUBLE"), (saved[1], "SINGLE")])


def test_run_eligibility_unknown_config_id_exits_with_message(capsys, monkeypatch):
    from campusdesk.cli import run_eligibility as mod

    monkeypatch.setattr(
        sys,
        "argv",
        [
            "run_eligibility.py",
            "--roll-no", "23BCS1001",
            "--name", "Ayaan",
            "--cgpa", "8.10",
            "--attendance", "80",
            "--credits", "18",
            "--config-id", "NOPE",
        ],
    )
    with pytest.raises(SystemExit) as exc:
        mod.main()
    assert exc.value.code == "ERROR: Unknown eligibility config_id: NOPE"
    assert "Saved:" not in capsys.readouterr().out


def test_run_hostel_fee_unknown_config_id_exits_with_message(tmp_path, monkeypatch):
    from campusdesk.cli import run_hostel_fee as mod

    monkeypatch.setattr(
        sys,
        "argv",
        ["run_hostel_fee.py", "--room", "DOUBLE", "--config-id", "NOPE", "--db", str(tmp_path / "campus.db")],
    )
    with pytest.raises(SystemExit) as exc:
        mod.main()
    assert exc.value.code == "ERROR: Unknown hostel pricing config_id: NOPE"
