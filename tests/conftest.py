"""Shared fixtures and Discord fakes for the test suite."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import discord
import pytest

from bot.settings import Settings
from database.db import close_db, init_db


@pytest.fixture
async def db(tmp_path):
    """Initialise a temporary SQLite database for the test."""
    await init_db(f"sqlite:///{tmp_path / 'test.db'}")
    yield
    await close_db()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        token="test-token",
        application_id=1234,
        database_url="sqlite://:memory:",
    )


def make_text_channel(channel_id: int, name: str, send=None, kind=discord.ChannelType.text):
    return SimpleNamespace(id=channel_id, name=name, type=kind, send=send or AsyncMock())


def make_voice_state(channel_id=None, name=None):
    channel = SimpleNamespace(id=channel_id, name=name) if channel_id is not None else None
    return SimpleNamespace(channel=channel)


def make_member(member_id: int = 42, display_name: str = "Mika", guild=None):
    return SimpleNamespace(
        id=member_id,
        display_name=display_name,
        display_avatar=SimpleNamespace(url=f"https://cdn.example/avatars/{member_id}.png"),
        mention=f"<@{member_id}>",
        guild=guild,
    )


def make_guild(guild_id: int = 100, text_channels=()):
    return SimpleNamespace(id=guild_id, text_channels=list(text_channels))
