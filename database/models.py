"""
database/models.py
CRUD helpers for the per-guild notification channel table.
"""

import logging
from typing import Optional

import aiosqlite

from .db import get_db

log = logging.getLogger("vcnotf.models")


async def get_notf_channel(guild_id: int) -> Optional[aiosqlite.Row]:
    """Fetch the stored notification channel row for a guild."""
    db = await get_db()
    async with db.execute(
        "SELECT guild_id, channel_name, updated_at FROM guild_notf_channels WHERE guild_id = ?",
        (guild_id,),
    ) as cursor:
        return await cursor.fetchone()


async def upsert_notf_channel(guild_id: int, channel_name: str) -> None:
    """Insert or update the notification channel name for a guild."""
    db = await get_db()
    await db.execute(
        """
        INSERT INTO guild_notf_channels (guild_id, channel_name)
        VALUES (?, ?)
        ON CONFLICT(guild_id) DO UPDATE SET
            channel_name = excluded.channel_name,
            updated_at = datetime('now')
        WHERE channel_name != excluded.channel_name
        """,
        (guild_id, channel_name),
    )
    await db.commit()
    log.debug("Upserted notification channel for guild %s: %s", guild_id, channel_name)
