import os

from scryfall_bot import __version__

from .loader import as_float, as_int, section

DEFAULT_API_URL = "https://api.scryfall.com"
DEFAULT_USER_AGENT = f"UnofficialScryfallDiscordBot/{__version__}"

DEFAULT_CACHE_TTL = 86400
DEFAULT_CACHE_GC_INTERVAL = 300
DEFAULT_MIN_REQUEST_DELAY = 0.1
DEFAULT_REQUEST_TIMEOUT = 10.0


def _positive(value: float, default: float) -> float:
    return value if value > 0 else default


class Scryfall:
    """Remote API, cache and throttle settings. Bad numbers fall back to defaults."""

    def __init__(self, config: dict | None = None) -> None:
        cfg = section(config, "scryfall")

        self.API_URL: str = str(cfg.get("api_url", os.getenv("SCRYFALL_API_URL", DEFAULT_API_URL))).rstrip("/")
        self.USER_AGENT: str = str(cfg.get("user_agent", os.getenv("SCRYFALL_USER_AGENT", DEFAULT_USER_AGENT)))

        self.CACHE_TTL: int = int(_positive(
            as_int(cfg.get("cache_ttl", os.getenv("CACHE_TTL")), DEFAULT_CACHE_TTL), DEFAULT_CACHE_TTL
        ))
        self.CACHE_GC_INTERVAL: int = int(_positive(
            as_int(cfg.get("cache_gc_interval", os.getenv("CACHE_GC_INTERVAL")), DEFAULT_CACHE_GC_INTERVAL),
            DEFAULT_CACHE_GC_INTERVAL,
        ))
        # 0 (or anything negative) disables the capacity ceiling
        self.CACHE_MAX_ITEMS: int = max(0, as_int(cfg.get("cache_max_items", os.getenv("CACHE_MAX_ITEMS")), 0))

        self.MIN_REQUEST_DELAY: float = max(0.0, as_float(
            cfg.get("min_request_delay", os.getenv("MIN_REQUEST_DELAY")), DEFAULT_MIN_REQUEST_DELAY
        ))
        self.REQUEST_TIMEOUT: float = _positive(
            as_float(cfg.get("request_timeout", os.getenv("REQUEST_TIMEOUT")), DEFAULT_REQUEST_TIMEOUT),
            DEFAULT_REQUEST_TIMEOUT,
        )
