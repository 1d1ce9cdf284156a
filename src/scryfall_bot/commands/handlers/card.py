from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from .. import register_cog
from scryfall_bot import response
from scryfall_bot.formatter import CardMention

logger = logging.getLogger(__name__)

MODE_CHOICES = [
    app_commands.Choice(name="Card info", value="general"),
    app_commands.Choice(name="Image", value="image"),
    app_commands.Choice(name="Prices", value="prices"),
    app_commands.Choice(name="Rulings", value="rulings"),
    app_commands.Choice(name="Legality", value="legality"),
]


@register_cog
class Card(commands.Cog):
    """Look up a card without bracket syntax."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="card", description="Look up a Magic card on Scryfall.")
    @app_commands.describe(name="Card name (fuzzy matching)", mode="What to show about the card")
    @app_commands.choices(mode=MODE_CHOICES)
    async def card(
        self,
        interaction: discord.Interaction,
        name: str,
        mode: app_commands.Choice[str] | None = None,
    ) -> None:
        """Resolve ``name`` and answer with the requested view of the card."""

        mention = CardMention(mode=mode.value if mode else "general", name=name)
        await interaction.response.defer(thinking=True)

        try:
            reply = await response.build_reply(self.bot.lookup, self.bot.formatter, mention)
        except Exception:
            logger.exception("Slash lookup failed for %r", name)
            await interaction.followup.send(response.ERROR_MESSAGE, ephemeral=True)
            return

        if reply is None:
            await interaction.followup.send(response.not_found_text(name), ephemeral=True)
            return
        await interaction.followup.send(embed=reply.embed)
