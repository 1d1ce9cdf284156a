from __future__ import annotations

from dataclasses import dataclass

import discord

# Discord embed limits
TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
CONTENT_LIMIT = 2000


def clip(text: str, limit: int) -> str:
    """Shorten ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


@dataclass(slots=True)
class FormattedReply:
    """A rendered card: plain text body plus the rich embed version."""

    plain_text: str
    embed: discord.Embed

    @property
    def content(self) -> str:
        """Plain text trimmed to fit a single Discord message."""
        return clip(self.plain_text, CONTENT_LIMIT)
