"""
Mention classifier
==================
Pull ``[[Card Name]]`` mentions out of a chat message. An optional single
character right after the opening brackets picks the reply style::

    [[Black Lotus]]   general card info
    [[!Sol Ring]]     card image
    [[$Mox Opal]]     prices
    [[?Gush]]         rulings
    [[#Brainstorm]]   format legality
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Literal

Mode = Literal["general", "image", "prices", "rulings", "legality"]

MENTION_RE = re.compile(r"\[\[([!$?#])?([^\]]+)\]\]")

PREFIX_MODES: dict[str, Mode] = {
    "": "general",
    "!": "image",
    "$": "prices",
    "?": "rulings",
    "#": "legality",
}


@dataclass(slots=True, frozen=True)
class CardMention:
    mode: Mode
    name: str


def classify(text: str) -> List[CardMention]:
    """Return every mention in ``text``, in order of appearance."""
    if not text:
        return []
    return [
        CardMention(mode=PREFIX_MODES[m.group(1) or ""], name=m.group(2))
        for m in MENTION_RE.finditer(text)
    ]
