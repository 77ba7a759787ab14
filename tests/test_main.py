"""Tests for the entry point and bot wiring."""

import logging
from unittest.mock import AsyncMock

import pytest

import main
from bot.commands import NotifierTree
from bot.settings import ConfigError, load_settings


def test_bot_uses_settings(settings):
    bot = main.VCNotfBot(settings)

    assert bot.settings is settings
    assert bot.application_id == settings.application_id
    assert bot.intents.members
    assert bot.intents.voice_states
    assert not bot.intents.message_content
    assert isinstance(bot.tree, NotifierTree)


def test_missing_config_exits_before_connecting(monkeypatch):
    def fail():
        raise ConfigError("Discord bot token missing! Set DISCORD_BOT_TOKEN in the environment or .env")

    started = []
    monkeypatch.setattr(main, "load_settings", fail)
    monkeypatch.setattr(main, "setup_logging", lambda *a, **kw: None)
    monkeypatch.setattr(main, "VCNotfBot", lambda settings: started.append(settings))

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 1
    assert started == []


def test_bad_log_level_exits_before_logging_setup(monkeypatch):
    env = {
        "DISCORD_BOT_TOKEN": "token-abc",
        "DISCORD_APPLICATION_ID": "987654321",
        "DATABASE_URL": "sqlite:///vc_notf.db",
        "LOG_LEVEL": "verbose",
    }
    levels = []
    monkeypatch.setattr(main, "load_settings", lambda: load_settings(env))
    monkeypatch.setattr(main, "setup_logging", lambda *a, **kw: levels.append(a))
    monkeypatch.setattr(main, "VCNotfBot", lambda settings: pytest.fail("bot must not start"))

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 1
    assert levels == [()]


@pytest.mark.asyncio
async def test_setup_hook_logs_default_channel(settings, monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="vcnotf.main")
    monkeypatch.setattr(main, "init_db", AsyncMock())
    bot = main.VCNotfBot(settings)
    monkeypatch.setattr(bot, "_load_ext", AsyncMock())

    await bot.setup_hook()

    main.init_db.assert_awaited_once_with(settings.database_url)
    assert "Default notification channel: #vc-notf" in caplog.text
