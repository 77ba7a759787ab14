"""
database/db.py
SQLite database connection and schema initialisation using aiosqlite.
"""

from __future__ import annotations
import logging
from pathlib import Path

import aiosqlite

log = logging.getLogger("vcnotf.database")

MEMORY = ":memory:"

_connection: aiosqlite.Connection | None = None


CREATE_GUILD_NOTF_CHANNELS = """
CREATE TABLE IF NOT EXISTS guild_notf_channels (
    guild_id        INTEGER PRIMARY KEY,
    channel_name    TEXT NOT NULL,
    updated_at      TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


def sqlite_path_from_url(url: str) -> str:
    """Turn a ``sqlite://`` URL (or a bare path) into an aiosqlite database path.

    ``sqlite:///rel.db`` -> ``rel.db``, ``sqlite:////abs/x.db`` -> ``/abs/x.db``,
    ``sqlite://:memory:`` -> ``:memory:``. Any other scheme is rejected.
    """
    url = url.strip()
    if not url:
        raise ValueError("Database connection string is empty")
    if "://" not in url:
        return url

    scheme, _, rest = url.partition("://")
    if scheme.lower() not in ("sqlite", "sqlite3"):
        raise ValueError(f"Unsupported database scheme {scheme!r}, only sqlite is supported")
    if rest in (MEMORY, "/" + MEMORY):
        return MEMORY
    if not rest.startswith("/") or rest == "/":
        raise ValueError(f"Invalid sqlite URL: {url!r}")
    return rest[1:]


async def init_db(url: str) -> None:
    """Open the database at ``url`` and create tables if they do not exist."""
    global _connection
    if _connection is not None:
        await close_db()

    path = sqlite_path_from_url(url)
    if path != MEMORY:
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    log.info("Initialising SQLite database at: %s", path)
    _connection = await aiosqlite.connect(path)
    _connection.row_factory = aiosqlite.Row
    if path != MEMORY:
        await _connection.execute("PRAGMA journal_mode=WAL;")
    await _connection.execute(CREATE_GUILD_NOTF_CHANNELS)
    await _connection.commit()
    log.info("Database initialised successfully.")


async def get_db() -> aiosqlite.Connection:
    """Return the active database connection."""
    if _connection is None:
        raise RuntimeError("Database is not initialised; call init_db() first")
    return _connection


async def close_db() -> None:
    """Close the database connection gracefully."""
    global _connection
    if _connection is not None:
        await _connection.close()
        _connection = None
        log.info("Database connection closed.")
