"""
bot/settings.py
Runtime configuration loaded from the environment (and .env).
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from database.db import sqlite_path_from_url

DEFAULT_CHANNEL_NAME = "vc-notf"
DEFAULT_LOG_FILE     = "logs/vc_notf.log"


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Configuration for the bot.

    Attributes:
        token: Discord bot token
        application_id: Discord application ID
        database_url: SQLite connection string or bare file path
        default_channel_name: notification channel used when a guild has none stored
        log_level: root logging level name
        log_file: path of the rotating log file
    """

    token: str
    application_id: int
    database_url: str
    default_channel_name: str = DEFAULT_CHANNEL_NAME
    log_level: str = "INFO"
    log_file: str = DEFAULT_LOG_FILE


def _require(env: Mapping[str, str], key: str, what: str) -> str:
    value = env.get(key, "").strip()
    if not value:
        raise ConfigError(f"{what} missing! Set {key} in the environment or .env")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ after loading .env)."""
    if env is None:
        load_dotenv()
        env = os.environ

    token   = _require(env, "DISCORD_BOT_TOKEN", "Discord bot token")
    raw_id  = _require(env, "DISCORD_APPLICATION_ID", "Discord application ID")
    db_url  = _require(env, "DATABASE_URL", "Database connection string")

    try:
        application_id = int(raw_id)
    except ValueError:
        raise ConfigError(f"Invalid application ID: {raw_id!r}") from None

    # Fail here rather than on first connect
    try:
        sqlite_path_from_url(db_url)
    except ValueError as e:
        raise ConfigError(str(e)) from None

    channel_name = env.get("NOTF_CHANNEL_NAME", "").strip() or DEFAULT_CHANNEL_NAME

    log_level = env.get("LOG_LEVEL", "").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Invalid log level: {log_level!r}")

    return Settings(
        token=token,
        application_id=application_id,
        database_url=db_url,
        default_channel_name=channel_name,
        log_level=log_level,
        log_file=env.get("LOG_FILE", "").strip() or DEFAULT_LOG_FILE,
    )
