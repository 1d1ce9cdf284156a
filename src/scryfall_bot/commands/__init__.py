"""
Slash command cogs.

Modules under ``commands/handlers`` are imported on package import; each one
registers its cog with :func:`register_cog`::

    @register_cog
    class Card(commands.Cog): ...

:func:`setup` then attaches every registered cog to the bot. Cog class names
double as registry keys, so two handlers may not define the same name.
"""

from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from pkgutil import iter_modules
from typing import Dict, List, Optional, Type

from discord.ext import commands as commands_ext

logger = logging.getLogger(__name__)

_COGS: Dict[str, Type[commands_ext.Cog]] = {}


def register_cog(cls: Optional[Type[commands_ext.Cog]] = None):
    """Decorator adding a Cog class to the registry."""

    def _register(cog_cls: Type[commands_ext.Cog]):
        if not issubclass(cog_cls, commands_ext.Cog):
            raise TypeError("register_cog expects a discord.ext.commands.Cog subclass")
        existing = _COGS.get(cog_cls.__name__)
        if existing is not None and existing is not cog_cls:
            raise ValueError(f"Cog name {cog_cls.__name__!r} is already registered by {existing.__module__}")

        _COGS[cog_cls.__name__] = cog_cls
        return cog_cls

    if cls is None:
        return _register
    return _register(cls)


async def setup(bot: commands_ext.Bot) -> List[str]:
    """
    Attach every registered cog that ``bot`` does not have yet.

    Call from ``commands.Bot.setup_hook`` so the command tree is complete
    before it is synced. Returns the names of the cogs attached by this call.
    """

    attached: List[str] = []
    for name, cog_cls in _COGS.items():
        if bot.get_cog(name):
            continue
        await bot.add_cog(cog_cls(bot))
        attached.append(name)

    if attached:
        logger.info("Attached command cog(s): %s", ", ".join(attached))
    elif not _COGS:
        logger.warning("No command cogs discovered; command tree is empty")
    return attached


def _discover() -> None:
    handlers = Path(__file__).resolve().parent / "handlers"
    for _, modname, _ in iter_modules([str(handlers)]):
        if not modname.startswith("_"):
            import_module(f"{__name__}.handlers.{modname}")


_discover()


__all__ = [
    "register_cog",
    "setup",
]
