"""
RollcallBot: discord.py bot client.

Manages the bot lifecycle:
- Loads the LinkingCog, which owns prefix command dispatch
- Logs connection state on ready and on shutdown

discord.ext's own prefix-command parser is bypassed: it collapses repeated
whitespace, while LinkingCog splits on single spaces and keeps empty arguments.
"""

from __future__ import annotations

import discord
from discord.ext import commands

from rollcall.config.logging import get_logger
from rollcall.config.settings import Settings

logger = get_logger(__name__)


class RollcallBot(commands.Bot):
    """
    Discord bot that links members to characters.

    Holds the immutable settings and exposes them to cogs. No other state is
    kept between messages.

    Args:
        settings: Full application settings (token, prefix, default role, logging)
    """

    def __init__(self, settings: Settings) -> None:
        intents = discord.Intents.default()
        intents.message_content = True  # Required to read command text
        super().__init__(
            command_prefix=settings.bot.command_prefix,
            intents=intents,
        )
        self.settings = settings

    async def setup_hook(self) -> None:
        """Called after login, before connecting to the Gateway."""
        from rollcall.bot.cogs.linking import LinkingCog

        await self.add_cog(LinkingCog(self))
        logger.info("Cogs loaded")

    async def on_ready(self) -> None:
        """Called when the bot successfully connects to Discord."""
        logger.info(f"Logged in as {self.user} (id: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")
        logger.info("Bot connected to Discord! Press Ctrl-C to shutdown")

    async def on_message(self, message: discord.Message) -> None:
        """Commands are dispatched by LinkingCog; skip discord.ext parsing."""
        return

    async def close(self) -> None:
        """Disconnect from Discord. In-flight handlers are not awaited."""
        logger.info(f"Shutting down {self.settings.bot.name}...")
        await super().close()
