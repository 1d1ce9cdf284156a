"""Thin async wrapper around the Scryfall REST API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import aiohttp

logger = logging.getLogger(__name__)

JSON = dict[str, Any]


def _encode_params(params: Mapping[str, Any]) -> dict[str, str | int | float]:
    """aiohttp rejects bools in query strings; send them the way Scryfall spells them."""
    encoded: dict[str, str | int | float] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = value
    return encoded


class ScryfallAPI:
    """
    Raw access to the Scryfall endpoints used by the bot.

    Every method returns the decoded JSON payload, or ``None`` when Scryfall
    answers 404. Other HTTP failures raise :class:`aiohttp.ClientResponseError`
    and transport errors propagate unchanged.

    :param base_url: API root, e.g. ``https://api.scryfall.com``.
    :param user_agent: Identifying client string sent with every request.
    :param session: Optional shared session. When omitted one is created on
        first use and closed by :meth:`close`.
    :param timeout: Total per-request timeout in seconds for an owned session.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "application/json"}

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._timeout) if self._timeout else None
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _get_json(self, url: str, params: Mapping[str, Any] | None = None) -> JSON | None:
        session = self._get_session()
        query = _encode_params(params) if params else None
        async with session.get(url, params=query, headers=self.headers) as resp:
            if resp.status == 404:
                logger.info("Scryfall returned 404 for %s", url)
                return None
            resp.raise_for_status()
            return await resp.json()

    # ------------------------------------------------------------------ #
    # Endpoints
    # ------------------------------------------------------------------ #

    async def named(self, name: str, fuzzy: bool = True) -> JSON | None:
        """``GET /cards/named`` with either ``fuzzy`` or ``exact`` matching."""
        params = {"fuzzy": name} if fuzzy else {"exact": name}
        logger.info("Fetching card: %s", name)
        return await self._get_json(f"{self.base_url}/cards/named", params)

    async def search(self, params: Mapping[str, Any]) -> JSON | None:
        """``GET /cards/search``; a query with no matches comes back as 404."""
        logger.info("Searching cards: %s", params.get("q"))
        return await self._get_json(f"{self.base_url}/cards/search", params)

    async def symbology(self) -> JSON | None:
        logger.info("Fetching card symbology")
        return await self._get_json(f"{self.base_url}/symbology")

    async def fetch_uri(self, uri: str) -> JSON | None:
        """Follow an absolute API URI taken from a card object (e.g. ``rulings_uri``)."""
        logger.info("Fetching %s", uri)
        return await self._get_json(uri)
