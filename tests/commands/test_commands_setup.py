import asyncio

import discord
import pytest
from discord.ext import commands as discord_commands

from scryfall_bot import commands as sb_commands


async def _collect():
    bot = discord_commands.Bot(command_prefix="!", intents=discord.Intents.none())
    try:
        first = await sb_commands.setup(bot)
        second = await sb_commands.setup(bot)
        return first, second, set(bot.cogs.keys()), {cmd.name for cmd in bot.tree.get_commands()}
    finally:
        await bot.close()


def test_setup_registers_known_cogs_once():
    first, second, cogs, slash_commands = asyncio.run(_collect())

    assert {"Card", "Help"}.issubset(first)
    assert second == []
    assert {"Card", "Help"}.issubset(cogs)
    assert {"card", "help"}.issubset(slash_commands)


def test_duplicate_cog_names_are_rejected():
    class Card(discord_commands.Cog):
        pass

    with pytest.raises(ValueError):
        sb_commands.register_cog(Card)


def test_non_cog_classes_are_rejected():
    with pytest.raises(TypeError):
        sb_commands.register_cog(object)


def test_help_lists_every_mention_prefix(monkeypatch):
    from scryfall_bot.commands.handlers import help as help_handler
    from scryfall_bot.formatter.classifier import PREFIX_MODES

    monkeypatch.setattr(help_handler.core, "COMMAND_PREFIX", "!card ")
    lines = help_handler.usage_lines()

    for prefix in PREFIX_MODES:
        assert any(f"`[[{prefix}Card Name]]`" in line for line in lines)
    assert lines[-1] == "`!card <name>` also works."


def test_help_omits_legacy_prefix_when_disabled(monkeypatch):
    from scryfall_bot.commands.handlers import help as help_handler

    monkeypatch.setattr(help_handler.core, "COMMAND_PREFIX", "")
    assert not any("also works" in line for line in help_handler.usage_lines())
