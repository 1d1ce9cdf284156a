import logging
from pathlib import Path

import discord

from scryfall_bot.config import core

logger = logging.getLogger(__name__)


async def _bootstrap_avatar(client: discord.Client) -> None:
    """Upload ``AVATAR_PATH`` as the bot's picture if the account has none yet."""
    if not core.AVATAR_PATH or client.user.avatar is not None:
        return

    path = Path(core.AVATAR_PATH)
    if not path.is_file():
        logger.info("Avatar file %s not found; skipping.", path)
        return

    try:
        await client.user.edit(avatar=path.read_bytes())
        logger.info("Uploaded bot avatar from %s", path)
    except (OSError, discord.HTTPException) as exc:
        logger.warning("Failed to set bot avatar from %s: %s", path, exc)


async def handle(client: discord.Client):
    """Warm shared state once the gateway session is ready."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")
    if core.CHANNEL_IDS:
        logger.info("Listening in configured channel IDs: %s", core.CHANNEL_IDS)
    else:
        logger.info("No CHANNEL_IDS configured; listening in every visible channel")

    await _bootstrap_avatar(client)

    # Symbol table is needed by almost every reply; load it before the first mention
    try:
        await client.formatter.init()
    except Exception as exc:
        logger.warning("Could not preload card symbology: %s", exc)
