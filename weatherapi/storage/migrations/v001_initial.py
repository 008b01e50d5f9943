"""Initial schema: response cache entries."""

import sqlite3

DDL = [
    """
    CREATE TABLE IF NOT EXISTS cache_entries (
        cache_key TEXT PRIMARY KEY,
        payload_json TEXT NOT NULL,
        expires_at REAL NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    (
        "CREATE INDEX IF NOT EXISTS idx_cache_entries_expires_at "
        "ON cache_entries(expires_at)"
    ),
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
