"""
bot/events.py
Discord event handlers: on_ready and on_voice_state_update.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from database.models import get_notf_channel
from presence.classifier import PresenceTransition, VoiceEventKind, classify
from presence.notifier import DeliveryResult, Notifier
from presence.resolver import ChannelResolver, text_channels_named

if TYPE_CHECKING:
    from bot.settings import Settings

log = logging.getLogger("vcnotf.events")


class PresenceEvents(commands.Cog):
    def __init__(self, bot: commands.Bot, settings: Settings):
        self.bot      = bot
        self.resolver = ChannelResolver(settings.default_channel_name, get_notf_channel)
        self.notifier = Notifier()
        self._synced  = False

    # ────────────────────────────────────────
    # on_ready
    # ────────────────────────────────────────

    @commands.Cog.listener()
    async def on_ready(self) -> None:
        log.info("Bot logged in as %s (ID: %s)", self.bot.user, self.bot.user.id)
        # on_ready fires again after every reconnect
        if self._synced:
            return
        try:
            synced = await self.bot.tree.sync()
            self._synced = True
            log.info("Synced %d slash commands.", len(synced))
        except Exception as e:
            log.error("Failed to sync slash commands: %s", e)

    # ────────────────────────────────────────
    # Voice presence
    # ────────────────────────────────────────

    @commands.Cog.listener()
    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        await self.announce(member, before, after)

    async def announce(self, member, before, after) -> list[DeliveryResult]:
        """Classify a voice state change and post it to the guild's notification channels."""
        transition = PresenceTransition.from_voice_states(member, before, after)
        kind = classify(transition.previous, transition.current)
        if kind == VoiceEventKind.NOOP:
            return []

        guild = member.guild
        channel_name = await self.resolver.resolve(guild.id)
        targets = text_channels_named(guild, channel_name)
        if not targets:
            log.debug("No #%s channel in guild %s, skipping %s.", channel_name, guild.id, kind.name)
            return []

        results = await self.notifier.broadcast(kind, transition, targets)
        failed = sum(1 for r in results if not r.ok)
        log.info(
            "%s %s in guild %s: %d/%d notifications sent.",
            transition.display_name, kind.name, guild.id, len(results) - failed, len(results),
        )
        return results


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(PresenceEvents(bot, bot.settings))
