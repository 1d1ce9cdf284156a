"""Cache-or-fetch orchestration in front of :class:`ScryfallAPI`."""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable

from .cache import TTLCache
from .client import JSON, ScryfallAPI
from .throttle import FetchGate

logger = logging.getLogger(__name__)

SEARCH_DEFAULTS: dict[str, Any] = {
    "unique": "cards",
    "order": "name",
    "dir": "auto",
    "include_extras": False,
    "include_multilingual": False,
    "include_variations": False,
}


def name_key(name: str, fuzzy: bool) -> str:
    return f"name:{name.lower().strip()}:{'true' if fuzzy else 'false'}"


def search_params(query: str, **options: Any) -> dict[str, Any]:
    """Build the deterministic first-page parameter set for a search."""
    params: dict[str, Any] = {"q": query}
    for option, default in SEARCH_DEFAULTS.items():
        value = options.get(option)
        params[option] = value if value else default
    params.update({"page": 1, "format": "json", "pretty": False})
    return params


def search_key(params: dict[str, Any]) -> str:
    return "search:" + json.dumps(params, sort_keys=True, separators=(",", ":"))


class CardLookup:
    """
    Resolve cards through the cache, hitting Scryfall only on a miss.

    Remote calls pass through the shared :class:`FetchGate`. Not-found results
    are returned as ``None`` and never cached, so the next lookup asks again.
    Any other error propagates to the caller and nothing is cached.
    """

    def __init__(self, api: ScryfallAPI, cache: TTLCache, gate: FetchGate) -> None:
        self.api = api
        self.cache = cache
        self.gate = gate

    async def _cached(self, key: str, fetch: Callable[[], Awaitable[Any | None]]) -> Any | None:
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.debug("Cache miss for %s", key)
        await self.gate.acquire()
        result = await fetch()
        if result is not None:
            self.cache.set(key, result)
        return result

    async def lookup_by_name(self, name: str, fuzzy: bool = True) -> JSON | None:
        """Return the card record for ``name`` or ``None`` if Scryfall has none."""
        return await self._cached(name_key(name, fuzzy), lambda: self.api.named(name, fuzzy))

    async def search_and_pick_top(self, query: str, **options: Any) -> JSON | None:
        """
        Run a first-page search and return only its most relevant card.

        ``options`` may override ``unique``, ``order``, ``dir`` and the
        ``include_*`` flags. The rest of the result page is discarded.
        """
        params = search_params(query, **options)

        async def _fetch() -> JSON | None:
            results = await self.api.search(params)
            data = (results or {}).get("data") or []
            return data[0] if data else None

        return await self._cached(search_key(params), _fetch)

    async def get_rulings(self, rulings_uri: str) -> JSON | None:
        return await self._cached(f"rulings:{rulings_uri}", lambda: self.api.fetch_uri(rulings_uri))

    async def get_symbology(self) -> JSON | None:
        return await self._cached("symbology", self.api.symbology)
