"""
Database Migrations - Schema setup and versioning.

The schema version lives in SQLite's ``user_version`` pragma. Each entry of
``MIGRATIONS`` upgrades the database by exactly one version.
"""

import logging
import sqlite3
from pathlib import Path


logger = logging.getLogger(__name__)


MIGRATIONS = [
    # 1: saved logins
    """
    CREATE TABLE IF NOT EXISTS logins (
        guid TEXT PRIMARY KEY,
        origin TEXT NOT NULL,
        username TEXT NOT NULL DEFAULT '',
        password TEXT NOT NULL,
        time_created DATETIME DEFAULT CURRENT_TIMESTAMP,
        time_password_changed DATETIME,
        UNIQUE(origin, username)
    );
    CREATE INDEX IF NOT EXISTS idx_logins_origin ON logins(origin);
    """,
]

SCHEMA_VERSION = len(MIGRATIONS)


def schema_version(conn: sqlite3.Connection) -> int:
    """Read the version recorded in the database."""
    return conn.execute("PRAGMA user_version").fetchone()[0]


def run_migrations(db_path: Path) -> int:
    """
    Bring the database schema up to ``SCHEMA_VERSION``.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        The schema version after migrating.
    """
    with sqlite3.connect(str(db_path)) as conn:
        current = schema_version(conn)
        for version, script in enumerate(MIGRATIONS[current:], start=current + 1):
            logger.info(f"Migrating {db_path.name} to schema version {version}")
            conn.executescript(script)
            conn.execute(f"PRAGMA user_version = {version}")
        current = schema_version(conn)
    conn.close()
    return current
