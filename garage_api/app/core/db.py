"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  It backs
the ``sqlite`` storage backend; the in‑memory backend does not touch
it.

Records of every kind share one ``records`` table keyed by
``(collection, id)``.  Each row stores the record as a JSON document so
that the store stays a plain key‑value map.  The migration mechanism
stores applied migration versions in the ``migrations`` table and
executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: key-value record table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS records (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            collection TEXT NOT NULL,
            id TEXT NOT NULL,
            payload TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(collection, id)
        );

        CREATE INDEX IF NOT EXISTS idx_records_collection ON records(collection);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    An absolute path is used directly.  Otherwise the path is resolved
    relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block exits normally and
    rolled back when it raises.
    """
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_url: str) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Returns the resulting schema version.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] or 0

        # Apply new migrations
        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
    return current_version
