"""Scryfall access layer: HTTP client, response cache and request throttle."""

from .cache import CacheEntry, TTLCache
from .client import ScryfallAPI
from .lookup import CardLookup, name_key, search_key, search_params
from .throttle import FetchGate

__all__ = [
    "CacheEntry",
    "CardLookup",
    "FetchGate",
    "ScryfallAPI",
    "TTLCache",
    "name_key",
    "search_key",
    "search_params",
]
