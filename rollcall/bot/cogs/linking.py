"""
LinkingCog: prefix commands for linking a member to a character.

Commands (prefix from BOT__COMMAND_PREFIX, default "!"):
  - !iam <server> <firstname> <lastname>   rename the member and assign the default role
  - !whois <...>                            recognised, not implemented yet

Every message goes through on_message → parse_command → routing table. Unknown
commands are dropped silently.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import discord
from discord.ext import commands

from rollcall.config.logging import get_logger
from rollcall.dispatch import parse_command, should_dispatch
from rollcall.linking import build_display_name, find_role_id

logger = get_logger(__name__)

Handler = Callable[[discord.Message, list[str]], Awaitable[None]]


class LinkingCog(commands.Cog):
    """Routes prefix commands to the linking handlers."""

    def __init__(self, bot) -> None:
        self.bot = bot
        self.handlers: dict[str, Handler] = {
            "iam": self.iam,
            "whois": self.whois,
        }

    @property
    def prefix(self) -> str:
        return self.bot.settings.bot.command_prefix

    @property
    def default_role(self) -> str:
        return self.bot.settings.bot.default_role

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        """
        Route a prefixed message to its handler.

        Ignores:
        - Messages authored by this bot
        - Messages that are not commands (too short, or missing the prefix)
        - Commands with no entry in the routing table
        """
        if not should_dispatch(message.author.id, self.bot.user.id, message.content, self.prefix):
            return

        invocation = parse_command(message.content, self.prefix)
        handler = self.handlers.get(invocation.name)
        if handler is None:
            logger.debug(f"Ignoring unknown command {invocation.name!r}")
            return

        await handler(message, invocation.args)

    # ------------------------------------------------------------------
    # !iam
    # ------------------------------------------------------------------

    async def iam(self, message: discord.Message, args: list[str]) -> None:
        """
        !iam <server> <firstname> <lastname>

        Renames the member to "Firstname Lastname" and adds the default role.
        The server argument is required but not otherwise used.

        The two updates are not atomic: the nickname change (phase 1) is
        never rolled back when the role assignment (phase 2) fails. A failed
        nickname change does not stop phase 2.
        """
        if len(args) < 3:
            await message.channel.send(
                f"Missing argument. Please use {self.prefix}iam server firstname lastname"
            )
            return

        _server, first_name, last_name = args[0], args[1], args[2]
        display_name = build_display_name(first_name, last_name)
        member = message.author

        if message.guild is None:
            logger.warning(f"{member.name} used iam outside a guild; nothing to link")
            return

        await self._set_nickname(member, display_name)

        try:
            guild = await self.bot.fetch_guild(message.guild.id)
        except discord.HTTPException as e:
            logger.error(f"Failed to fetch guild {message.guild.id}: {e}")
            return

        role_id = find_role_id(guild.roles, self.default_role)
        if not await self._add_default_role(member, role_id):
            await message.channel.send(f"Failed to add role {self.default_role} to {member.name}")
            return

        await message.channel.send(f"{member.mention} authenticated as **{display_name}**")

    async def _set_nickname(self, member: discord.Member, display_name: str) -> bool:
        """Phase 1. Failure is logged only."""
        try:
            await member.edit(nick=display_name)
        except discord.HTTPException as e:
            logger.warning(f"Failed to change nickname for {member.name}: {e}")
            return False
        logger.info(f"Nickname for {member.name} set to {display_name!r}")
        return True

    async def _add_default_role(self, member: discord.Member, role_id: int) -> bool:
        """Phase 2. Attempted even when the role was not found."""
        try:
            await member.add_roles(discord.Object(id=role_id), reason="Linked character via iam")
        except discord.HTTPException as e:
            logger.error(f"Failed to add role {self.default_role} to {member.name}: {e}")
            return False
        logger.info(f"Added role {self.default_role} to {member.name}")
        return True

    # ------------------------------------------------------------------
    # !whois
    # ------------------------------------------------------------------

    async def whois(self, message: discord.Message, args: list[str]) -> None:
        """!whois: not implemented yet. Recognised so it never falls through as unknown."""
        logger.debug(f"whois is not implemented (args={args!r})")
