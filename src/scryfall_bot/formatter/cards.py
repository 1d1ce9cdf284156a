"""
Render Scryfall card records as plain text and Discord embeds.

Mana and ability symbols such as ``{T}`` or ``{B/R}`` are looked up in the
Scryfall symbology list (fetched once through the lookup cache) and turned
into markdown links to the symbol's SVG in embed text.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict

import discord

from scryfall_bot.scryfall import CardLookup

from .classifier import Mode
from .model import DESCRIPTION_LIMIT, TITLE_LIMIT, FormattedReply, clip

logger = logging.getLogger(__name__)

SYMBOL_RE = re.compile(r"\{[^}]+\}")

EMBED_COLOUR = discord.Colour.dark_purple()

LEGALITY_FORMATS = [
    "standard", "future", "historic", "gladiator", "pioneer", "explorer",
    "modern", "legacy", "pauper", "vintage", "penny", "commander", "brawl",
    "historicbrawl", "alchemy", "paupercommander", "duel", "oldschool",
    "premodern",
]


def _face_value(card: Dict[str, Any], field: str) -> Any:
    """Read ``field`` from the card, falling back to its first face (MDFCs, transform cards)."""
    value = card.get(field)
    if value:
        return value
    faces = card.get("card_faces") or []
    return faces[0].get(field) if faces else None


def _image_uri(card: Dict[str, Any], *sizes: str) -> str:
    uris = _face_value(card, "image_uris") or {}
    for size in sizes:
        if uris.get(size):
            return uris[size]
    return ""


class CardFormatter:
    """Produce :class:`FormattedReply` objects for each reply style."""

    def __init__(self, lookup: CardLookup) -> None:
        self.lookup = lookup
        self.symbols: Dict[str, str] = {}
        self.initialized = False

    async def init(self) -> None:
        """Load the symbol table. Stays uninitialized (and retries later) if Scryfall has none."""
        if self.initialized:
            return
        symbology = await self.lookup.get_symbology()
        if symbology and symbology.get("data"):
            for symbol in symbology["data"]:
                self.symbols[symbol["symbol"]] = symbol.get("svg_uri", "")
            self.initialized = True
            logger.info("Loaded %d card symbols", len(self.symbols))

    async def replace_symbols(self, text: str | None) -> str:
        if not self.initialized:
            await self.init()
        if not text:
            return ""

        def _link(match: re.Match) -> str:
            svg_uri = self.symbols.get(match.group(0))
            return f"[{match.group(0)}]({svg_uri})" if svg_uri else match.group(0)

        return SYMBOL_RE.sub(_link, text)

    def _embed(self, card: Dict[str, Any], title: str, description: str = "") -> discord.Embed:
        return discord.Embed(
            title=clip(title, TITLE_LIMIT),
            url=card.get("scryfall_uri") or None,
            description=clip(description, DESCRIPTION_LIMIT) or None,
            colour=EMBED_COLOUR,
        )

    # ------------------------------------------------------------------ #
    # Reply styles
    # ------------------------------------------------------------------ #

    async def format_general(self, card: Dict[str, Any]) -> FormattedReply:
        name = card.get("name", "")
        mana_cost_raw = _face_value(card, "mana_cost") or ""
        oracle_raw = _face_value(card, "oracle_text") or ""
        type_line = card.get("type_line") or ""
        uri = card.get("scryfall_uri", "")

        plain_text = f"{name} {mana_cost_raw}\n{type_line}\n{oracle_raw}\n{uri}"

        mana_cost = await self.replace_symbols(mana_cost_raw)
        oracle_text = await self.replace_symbols(oracle_raw)
        lines = [line for line in (mana_cost, f"*{type_line}*" if type_line else "") if line]
        description = "\n".join(lines)
        if oracle_text:
            description += f"\n\n{oracle_text}"

        embed = self._embed(card, name, description)
        image = _image_uri(card, "small")
        if image:
            embed.set_thumbnail(url=image)
        return FormattedReply(plain_text=plain_text, embed=embed)

    async def format_image(self, card: Dict[str, Any]) -> FormattedReply:
        name = card.get("name", "")
        image = _image_uri(card, "normal", "large")
        plain_text = f"{name} - {image or 'No image available'}"

        embed = self._embed(card, name, "" if image else "No image available")
        if image:
            embed.set_image(url=image)
        return FormattedReply(plain_text=plain_text, embed=embed)

    async def format_prices(self, card: Dict[str, Any]) -> FormattedReply:
        name = card.get("name", "")
        prices = card.get("prices") or {}
        usd = f"${prices['usd']}" if prices.get("usd") else "N/A"
        usd_foil = f"${prices['usd_foil']} (Foil)" if prices.get("usd_foil") else "N/A"
        eur = f"€{prices['eur']}" if prices.get("eur") else "N/A"
        tix = f"{prices['tix']} TIX" if prices.get("tix") else "N/A"

        rows = [("USD", usd), ("USD Foil", usd_foil), ("EUR", eur), ("TIX", tix)]
        plain_text = f"Prices for {name}:\n" + "".join(f"{label}: {value}\n" for label, value in rows)
        plain_text += card.get("scryfall_uri", "")

        description = "\n".join(f"- **{label}:** {value}" for label, value in rows)
        return FormattedReply(plain_text=plain_text, embed=self._embed(card, f"Prices for {name}", description))

    async def format_legality(self, card: Dict[str, Any]) -> FormattedReply:
        name = card.get("name", "")
        legalities = card.get("legalities") or {}

        embed = self._embed(card, f"Legality for {name}")
        plain_text = f"Legality for {name}:\n"
        for fmt in LEGALITY_FORMATS:
            status = (legalities.get(fmt) or "not_legal").replace("_", " ")
            plain_text += f"{fmt}: {status}\n"
            embed.add_field(name=fmt, value=status, inline=True)

        plain_text += card.get("scryfall_uri", "")
        return FormattedReply(plain_text=plain_text, embed=embed)

    async def format_rulings(self, card: Dict[str, Any]) -> FormattedReply:
        name = card.get("name", "")
        rulings_uri = card.get("rulings_uri")
        rulings = await self.lookup.get_rulings(rulings_uri) if rulings_uri else None
        entries = (rulings or {}).get("data") or []

        plain_text = f"Rulings for {name}:\n"
        if entries:
            lines = [f"- [{r.get('published_at', '')}] {r.get('comment', '')}" for r in entries]
            plain_text += "\n".join(lines) + "\n"
            description = "\n".join(lines)
        else:
            plain_text += "No rulings found.\n"
            description = "No rulings found."

        plain_text += card.get("scryfall_uri", "")
        return FormattedReply(plain_text=plain_text, embed=self._embed(card, f"Rulings for {name}", description))

    async def format(self, card: Dict[str, Any], mode: Mode = "general") -> FormattedReply:
        handler = {
            "general": self.format_general,
            "image": self.format_image,
            "prices": self.format_prices,
            "rulings": self.format_rulings,
            "legality": self.format_legality,
        }.get(mode, self.format_general)
        return await handler(card)


__all__ = ["CardFormatter", "LEGALITY_FORMATS"]
