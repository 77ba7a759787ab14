"""
presence/resolver.py
Per-guild notification channel lookup with fallback to the configured default.
"""

from __future__ import annotations
import logging
from typing import Any, Awaitable, Callable, Optional

import discord

log = logging.getLogger("vcnotf.resolver")

Lookup = Callable[[int], Awaitable[Optional[Any]]]


class ChannelResolver:
    """Resolves the notification channel name for a guild.

    ``lookup`` returns the stored row (anything indexable by
    ``"channel_name"``) or None. ``resolve`` never raises: a miss, a
    malformed row or a failing store all yield the default name.
    """

    def __init__(self, default_channel_name: str, lookup: Lookup):
        self.default_channel_name = default_channel_name
        self._lookup = lookup

    async def resolve(self, guild_id: int) -> str:
        try:
            row = await self._lookup(guild_id)
        except Exception as e:
            log.error("Notification channel lookup failed for guild %s: %s", guild_id, e)
            return self.default_channel_name

        if row is None:
            return self.default_channel_name

        try:
            name = row["channel_name"]
        except (KeyError, IndexError, TypeError):
            name = None
        if not isinstance(name, str) or not name.strip():
            log.warning("Malformed notification channel row for guild %s: %r", guild_id, row)
            return self.default_channel_name
        return name


def text_channels_named(guild: Any, name: str) -> list:
    """All plain text channels in ``guild`` whose name is exactly ``name``."""
    return [
        ch for ch in guild.text_channels
        if ch.name == name and ch.type == discord.ChannelType.text
    ]
