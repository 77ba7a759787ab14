"""
main.py
Entry point for the VC Notification Discord Bot.
"""

from __future__ import annotations
import asyncio
import logging
import logging.handlers
import sys
from pathlib import Path

import discord
from discord.ext import commands

from bot.commands import NotifierTree
from bot.settings import ConfigError, Settings, load_settings
from database.db import close_db, init_db

log = logging.getLogger("vcnotf.main")


# ──────────────────────────────────────────────
# Logging setup
# ──────────────────────────────────────────────

def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    log_formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    # Rotating file handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5_000_000,   # 5 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)


# ──────────────────────────────────────────────
# Bot subclass
# ──────────────────────────────────────────────

class VCNotfBot(commands.Bot):
    def __init__(self, settings: Settings):
        intents = discord.Intents.default()
        intents.members      = True
        intents.voice_states = True
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            application_id=settings.application_id,
            tree_cls=NotifierTree,
        )
        self.settings = settings

    async def setup_hook(self) -> None:
        """Called once after login, before starting the bot's event loop."""
        await init_db(self.settings.database_url)
        log.info("Default notification channel: #%s", self.settings.default_channel_name)

        # Load cogs (discord.py calls setup() in each module)
        for ext in ("bot.commands", "bot.events"):
            await self._load_ext(ext)
        log.info("Setup complete. Bot ready.")

    async def _load_ext(self, module: str) -> None:
        """Load a cog from its module, with error logging."""
        try:
            await self.load_extension(module)
            log.info("Loaded extension: %s", module)
        except commands.ExtensionError as e:
            log.exception("Failed to load extension %s: %s", module, e)

    async def close(self) -> None:
        log.info("Shutting down bot...")
        await close_db()
        await super().close()


# ──────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────

def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        setup_logging()
        log.error("%s. Cannot start.", e)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_file)
    bot = VCNotfBot(settings)

    try:
        asyncio.run(bot.start(settings.token))
    except KeyboardInterrupt:
        log.info("Bot interrupted by user.")
    except discord.LoginFailure as e:
        log.error("Discord login failed: %s", e)
        sys.exit(1)
    except Exception as e:
        log.exception("Unexpected error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
