"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands as discord_commands

from scryfall_bot import commands as sb_commands
from scryfall_bot.event_hooks import message_hook, ready_hook
from scryfall_bot.formatter import CardFormatter
from scryfall_bot.scryfall import CardLookup

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.default()
intents.message_content = True


class ScryfallBot(discord_commands.Bot):
    """
    Discord client that answers card mentions.

    The lookup and formatter are built once at startup and shared with every
    hook and command through the bot instance.
    """

    def __init__(self, lookup: CardLookup, formatter: CardFormatter) -> None:
        super().__init__(command_prefix=discord_commands.when_mentioned, intents=intents)
        self.lookup = lookup
        self.formatter = formatter

    async def setup_hook(self) -> None:
        """Register slash commands and synchronise with Discord."""

        await sb_commands.setup(self)

        try:
            synced = await self.tree.sync()
            logger.info("Synced %d application command(s)", len(synced))
        except Exception:
            logger.exception("Failed to sync application commands")

    async def on_ready(self) -> None:
        await ready_hook.handle(self)

    async def on_message(self, message: discord.Message) -> None:
        await message_hook.handle(self, message)
