"""Turn a card mention into a reply."""

from __future__ import annotations

import logging

from scryfall_bot.formatter import CardFormatter, CardMention, FormattedReply
from scryfall_bot.scryfall import CardLookup

logger = logging.getLogger(__name__)

NOT_FOUND_TEMPLATE = 'Sorry, I couldn\'t find a card named "{name}".'
ERROR_MESSAGE = "An error occurred while looking up the card."


async def resolve_card(lookup: CardLookup, name: str) -> dict | None:
    """Fuzzy name match first, then the top search hit."""
    name = name.strip()
    if not name:
        return None

    card = await lookup.lookup_by_name(name, fuzzy=True)
    if card is None:
        logger.info("No fuzzy match for %r; falling back to search", name)
        card = await lookup.search_and_pick_top(name)
    return card


async def build_reply(
    lookup: CardLookup,
    formatter: CardFormatter,
    mention: CardMention,
) -> FormattedReply | None:
    """
    Resolve ``mention`` and render it in the requested style.

    :returns: ``None`` when Scryfall knows no such card. Remote failures
        propagate to the caller.
    """
    card = await resolve_card(lookup, mention.name)
    if card is None:
        return None
    return await formatter.format(card, mention.mode)


def not_found_text(name: str) -> str:
    return NOT_FOUND_TEMPLATE.format(name=name.strip())


__all__ = ["build_reply", "resolve_card", "not_found_text", "NOT_FOUND_TEMPLATE", "ERROR_MESSAGE"]
