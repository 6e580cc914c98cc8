"""SQLite schema migration helpers for eligibility and booking tables.

Responsibilities:
  - Apply migrations/*.sql in file-name order, each at most once per database.
Must not:
  - Embed business logic; migrations only.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path


def _default_migrations_dir() -> Path:
    return Path(__file__).resolve().parent / "migrations"


def apply_migrations(conn: sqlite3.Connection, migrations_dir: Path | None = None) -> list[str]:
    migrations_dir = migrations_dir or _default_migrations_dir()
    conn.execute("CREATE TABLE IF NOT EXISTS schema_migration (name TEXT PRIMARY KEY)")
    conn.commit()
    applied = {row[0] for row in conn.execute("SELECT name FROM schema_migration").fetchall()}

    newly_applied: list[str] = []
    for migration in sorted(migrations_dir.glob("*.sql")):
        if migration.name in applied:
            continue
        _apply_one(conn, migration)
        newly_applied.append(migration.name)
    return newly_applied


def _apply_one(conn: sqlite3.Connection, migration: Path) -> None:
    # Script and bookkeeping row commit together or not at all.
    name = migration.name.replace("'", "''")
    script = (
        "BEGIN;\n"
        f"{migration.read_text()}\n"
        f"INSERT INTO schema_migration (name) VALUES ('{name}');\n"
        "COMMIT;\n"
    )
    try:
        conn.executescript(script)
    except sqlite3.Error:
        if conn.in_transaction:
            conn.rollback()
        raise
