from __future__ import annotations

from .classifier import CardMention, Mode, classify
from .cards import CardFormatter, LEGALITY_FORMATS
from .model import FormattedReply, clip

__all__ = [
    "CardFormatter",
    "CardMention",
    "FormattedReply",
    "LEGALITY_FORMATS",
    "Mode",
    "classify",
    "clip",
]
