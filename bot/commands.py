"""
bot/commands.py
Discord slash commands for the VC notification bot.
"""

from __future__ import annotations
import logging

import discord
from discord import app_commands
from discord.ext import commands

from database.models import upsert_notf_channel

log = logging.getLogger("vcnotf.commands")

NOT_IMPLEMENTED = "not implemented :("
MEMBERS_COLOUR  = discord.Colour.from_rgb(40, 167, 69)


async def _respond(interaction: discord.Interaction, command: str, **kwargs) -> None:
    try:
        await interaction.response.send_message(**kwargs)
    except discord.HTTPException as e:
        log.error("Cannot respond to slash command /%s: %s", command, e)


class NotifierTree(app_commands.CommandTree):
    """Command tree that answers commands it does not know about."""

    async def on_error(
        self,
        interaction: discord.Interaction,
        error: app_commands.AppCommandError,
    ) -> None:
        if isinstance(error, app_commands.CommandNotFound):
            log.info("Unknown slash command /%s", error.name)
            await _respond(interaction, error.name, content=NOT_IMPLEMENTED)
            return
        command = interaction.command.name if interaction.command else "?"
        log.error("Error in slash command /%s: %s", command, error, exc_info=error)


class NotifierCommands(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    # ──────────────────────────────────────────────
    # /members
    # ──────────────────────────────────────────────

    @app_commands.command(name="members", description="Get members of voice channel")
    @app_commands.describe(channel="voice channel")
    @app_commands.guild_only()
    async def members(
        self,
        interaction: discord.Interaction,
        channel: app_commands.AppCommandChannel,
    ) -> None:
        if channel.type != discord.ChannelType.voice:
            log.debug("/members ignored: #%s is a %s channel", channel.name, channel.type)
            return

        voice = channel.resolve()
        if voice is None:
            try:
                voice = await channel.fetch()
            except discord.HTTPException as e:
                log.error("Could not fetch voice channel %s: %s", channel.id, e)
                return

        occupants = list(voice.members)
        embed = discord.Embed(
            title=f"{len(occupants)} members in {voice.name}",
            colour=MEMBERS_COLOUR,
        )
        embed.add_field(
            name="Members",
            value=" ".join(m.mention for m in occupants) or "Nobody is here.",
            inline=False,
        )
        await _respond(interaction, "members", embed=embed)

    # ──────────────────────────────────────────────
    # /notfchannel
    # ──────────────────────────────────────────────

    @app_commands.command(name="notfchannel", description="Set the channel for voice notifications")
    @app_commands.describe(channel="text channel")
    @app_commands.guild_only()
    @app_commands.default_permissions(manage_guild=True)
    async def notfchannel(
        self,
        interaction: discord.Interaction,
        channel: app_commands.AppCommandChannel,
    ) -> None:
        if channel.type != discord.ChannelType.text:
            log.debug("/notfchannel ignored: #%s is a %s channel", channel.name, channel.type)
            return

        try:
            await upsert_notf_channel(interaction.guild_id, channel.name)
        except Exception as e:
            log.error("Failed to store notification channel for guild %s: %s", interaction.guild_id, e)
            return

        log.info("Guild %s notification channel set to #%s", interaction.guild_id, channel.name)
        await _respond(
            interaction, "notfchannel",
            content=f"✅ Voice notifications will be posted in {channel.mention}.",
        )

    # ──────────────────────────────────────────────
    # Per-event opt-outs (not yet supported)
    # ──────────────────────────────────────────────

    @app_commands.command(name="onjoin", description="Send notifications when someone joins VC")
    @app_commands.describe(send="send join notifications")
    async def onjoin(self, interaction: discord.Interaction, send: bool) -> None:
        await self._not_supported(interaction, "onjoin", send)

    @app_commands.command(name="onmove", description="Send notifications when someone moves VC")
    @app_commands.describe(send="send move notifications")
    async def onmove(self, interaction: discord.Interaction, send: bool) -> None:
        await self._not_supported(interaction, "onmove", send)

    @app_commands.command(name="onleave", description="Send notifications when someone leaves VC")
    @app_commands.describe(send="send leave notifications")
    async def onleave(self, interaction: discord.Interaction, send: bool) -> None:
        await self._not_supported(interaction, "onleave", send)

    async def _not_supported(self, interaction: discord.Interaction, command: str, send: bool) -> None:
        log.debug("/%s send=%s requested in guild %s", command, send, interaction.guild_id)
        await _respond(interaction, command, content=NOT_IMPLEMENTED)


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(NotifierCommands(bot))
