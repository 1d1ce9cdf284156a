"""Process entry point: wire up the lookup stack, the Discord bot and the HTTP API."""

from __future__ import annotations

import asyncio
import logging

import discord

from scryfall_bot.clients.disc import ScryfallBot
from scryfall_bot.config import core, scryfall, web
from scryfall_bot.formatter import CardFormatter
from scryfall_bot.scryfall import CardLookup, FetchGate, ScryfallAPI, TTLCache
from scryfall_bot.web import build_server, create_app, serve

logger = logging.getLogger(__name__)


def build_lookup(api: ScryfallAPI) -> CardLookup:
    """Construct the cache and throttle from configuration around ``api``."""
    cache = TTLCache(ttl=scryfall.CACHE_TTL, max_items=scryfall.CACHE_MAX_ITEMS)
    gate = FetchGate(min_delay=scryfall.MIN_REQUEST_DELAY)
    return CardLookup(api, cache, gate)


async def main() -> None:
    if not core.DISCORD_API_TOKEN:
        logger.error("No DISCORD_API_TOKEN configured. Cannot run client.")
        return

    api = ScryfallAPI(scryfall.API_URL, scryfall.USER_AGENT, timeout=scryfall.REQUEST_TIMEOUT)
    lookup = build_lookup(api)
    formatter = CardFormatter(lookup)
    bot = ScryfallBot(lookup, formatter)
    server = build_server(create_app(lookup), web.HOST, web.PORT) if web.ENABLED else None

    await lookup.cache.start_sweeper(scryfall.CACHE_GC_INTERVAL)
    tasks = [asyncio.create_task(bot.start(core.DISCORD_API_TOKEN), name="discord")]
    if server is not None:
        tasks.append(asyncio.create_task(serve(server), name="http"))

    try:
        # Either side stopping (logout, SIGINT in uvicorn, crash) ends the process
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            task.result()
    finally:
        if server is not None:
            server.should_exit = True
        if not bot.is_closed():
            await bot.close()
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        await lookup.cache.stop_sweeper()
        await api.close()
        logger.info("Shut down cleanly")


def run() -> None:
    """Start the bot using configuration from config.toml and the environment."""
    try:
        asyncio.run(main())
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
    except KeyboardInterrupt:
        logger.info("Interrupted")
