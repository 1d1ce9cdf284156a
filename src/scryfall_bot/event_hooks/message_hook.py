import logging
from typing import List

import discord

from scryfall_bot import response
from scryfall_bot.config import core
from scryfall_bot.formatter import CardMention, FormattedReply, classify

logger = logging.getLogger(__name__)


def extract_mentions(content: str) -> List[CardMention]:
    """Bracket mentions, or a single general mention for the ``!card <name>`` prefix."""
    mentions = classify(content)
    if mentions:
        return mentions

    prefix = core.COMMAND_PREFIX
    if prefix and content.startswith(prefix):
        name = content[len(prefix):].strip()
        if name:
            return [CardMention(mode="general", name=name)]
    return []


async def _send_reply(message: discord.Message, reply: FormattedReply) -> None:
    try:
        await message.reply(embed=reply.embed, mention_author=False)
    except discord.Forbidden:
        # No embed permission in this channel; plain text still works
        logger.warning("Cannot send embeds in channel %s; using plain text", message.channel.id)
        await message.reply(reply.content, mention_author=False)


async def handle(client: discord.Client, message: discord.Message):
    """Answer every card mention in an incoming message."""

    # 1) Never answer bots, including ourselves
    if message.author.bot or (client.user is not None and message.author.id == client.user.id):
        return

    # 2) Ignore channels that are not configured for processing
    if core.CHANNEL_IDS and message.channel.id not in core.CHANNEL_IDS:
        return

    mentions = extract_mentions(message.content or "")
    if not mentions:
        return

    logger.info(
        "Message %s in channel %s mentions %d card(s)",
        message.id,
        getattr(message.channel, "id", "unknown"),
        len(mentions),
    )

    # 3) Resolve in order so replies line up with the mentions
    for mention in mentions:
        try:
            reply = await response.build_reply(client.lookup, client.formatter, mention)
            if reply is None:
                await message.reply(response.not_found_text(mention.name), mention_author=False)
                continue
            await _send_reply(message, reply)
        except Exception:
            logger.exception("Error looking up card %r", mention.name)
            await message.channel.send(response.ERROR_MESSAGE)
