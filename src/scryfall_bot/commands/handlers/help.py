from __future__ import annotations

from typing import List

import discord
from discord import app_commands
from discord.ext import commands

from .. import register_cog
from scryfall_bot.config import core
from scryfall_bot.formatter.classifier import PREFIX_MODES

MODE_HINTS = {
    "general": "card info",
    "image": "the image",
    "prices": "prices",
    "rulings": "rulings",
    "legality": "format legality",
}


def usage_lines() -> List[str]:
    """One line per mention prefix the message hook understands."""
    lines = ["Mention cards in brackets:"]
    for prefix, mode in PREFIX_MODES.items():
        lines.append(f"`[[{prefix}Card Name]]` {MODE_HINTS.get(mode, mode)}")
    if core.COMMAND_PREFIX.strip():
        lines.append(f"`{core.COMMAND_PREFIX.strip()} <name>` also works.")
    return lines


@register_cog
class Help(commands.Cog):
    """Explain mention syntax and list available slash commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="help", description="How to look up cards.")
    async def help(self, interaction: discord.Interaction) -> None:
        command_names = sorted(cmd.name for cmd in self.bot.tree.get_commands())
        listing = ", ".join(f"/{name}" for name in command_names) if command_names else "None registered"
        lines = usage_lines()
        lines.append(f"Available commands: {listing}")
        await interaction.response.send_message("\n".join(lines), ephemeral=True)
