"""
presence/notifier.py

Builds the join/move/leave embed and posts it to every target channel.
Each target is delivered independently: a failure is logged and recorded
in that target's DeliveryResult, nothing is retried.
"""

from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import discord

from presence.classifier import PresenceTransition, VoiceEventKind

log = logging.getLogger("vcnotf.notifier")

EVENT_COLOURS = {
    VoiceEventKind.JOIN:  discord.Colour.from_rgb(40, 167, 69),
    VoiceEventKind.MOVE:  discord.Colour.from_rgb(23, 162, 184),
    VoiceEventKind.LEAVE: discord.Colour.from_rgb(220, 53, 59),
}


@dataclass(frozen=True)
class DeliveryResult:
    channel_id: int
    channel_name: str
    ok: bool
    error: Optional[str] = None


def build_embed(kind: VoiceEventKind, transition: PresenceTransition) -> Optional[discord.Embed]:
    """Return the notification embed for ``kind``, or None for NOOP."""
    who  = transition.display_name
    old  = transition.previous.channel_name
    new  = transition.current.channel_name

    if kind == VoiceEventKind.JOIN:
        title = f"{who} joined VC!"
        description = f"{transition.mention} joined {new}!"
    elif kind == VoiceEventKind.LEAVE:
        title = f"{who} left VC!"
        description = f"{transition.mention} left {old}!"
    elif kind == VoiceEventKind.MOVE:
        title = f"{who} moved VC!"
        description = f"{transition.mention} moved from {old} to {new}!"
    else:
        return None

    embed = discord.Embed(title=title, description=description, colour=EVENT_COLOURS[kind])
    if transition.avatar_url:
        embed.set_thumbnail(url=transition.avatar_url)
    return embed


class Notifier:
    async def broadcast(
        self,
        kind: VoiceEventKind,
        transition: PresenceTransition,
        targets: Sequence[Any],
    ) -> list[DeliveryResult]:
        """Send one notification per target; returns a result per target."""
        embed = build_embed(kind, transition)
        if embed is None or not targets:
            return []
        return list(await asyncio.gather(*(self._deliver(ch, embed) for ch in targets)))

    async def _deliver(self, channel: Any, embed: discord.Embed) -> DeliveryResult:
        try:
            await channel.send(embed=embed)
        except Exception as e:
            log.error("Failed to post notification to #%s (%s): %s", channel.name, channel.id, e)
            return DeliveryResult(channel.id, channel.name, ok=False, error=str(e) or type(e).__name__)
        return DeliveryResult(channel.id, channel.name, ok=True)
