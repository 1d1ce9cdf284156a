import pytest

from scryfall_bot.config.core import Core
from scryfall_bot.config.loader import as_bool, load_raw_config
from scryfall_bot.config.scryfall import DEFAULT_USER_AGENT, Scryfall
from scryfall_bot.config.web import Web


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "CACHE_TTL", "CACHE_GC_INTERVAL", "CACHE_MAX_ITEMS", "MIN_REQUEST_DELAY",
        "REQUEST_TIMEOUT", "SCRYFALL_API_URL", "SCRYFALL_USER_AGENT", "CHANNEL_IDS",
        "API_ENABLED", "PORT",
    ):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    cfg = Scryfall({})

    assert cfg.API_URL == "https://api.scryfall.com"
    assert cfg.USER_AGENT == DEFAULT_USER_AGENT
    assert cfg.CACHE_TTL == 86400
    assert cfg.CACHE_GC_INTERVAL == 300
    assert cfg.CACHE_MAX_ITEMS == 0
    assert cfg.MIN_REQUEST_DELAY == pytest.approx(0.1)


def test_invalid_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("CACHE_TTL", "one day")
    monkeypatch.setenv("CACHE_GC_INTERVAL", "-5")
    monkeypatch.setenv("CACHE_MAX_ITEMS", "-10")
    monkeypatch.setenv("MIN_REQUEST_DELAY", "")

    cfg = Scryfall({})

    assert cfg.CACHE_TTL == 86400
    assert cfg.CACHE_GC_INTERVAL == 300
    assert cfg.CACHE_MAX_ITEMS == 0
    assert cfg.MIN_REQUEST_DELAY == pytest.approx(0.1)


def test_env_and_toml_values(monkeypatch):
    monkeypatch.setenv("CACHE_TTL", "3600")
    monkeypatch.setenv("CACHE_MAX_ITEMS", "500")

    cfg = Scryfall({"scryfallbot": {"scryfall": {"cache_max_items": 50, "api_url": "http://localhost:9000/"}}})

    assert cfg.CACHE_TTL == 3600
    assert cfg.CACHE_MAX_ITEMS == 50
    assert cfg.API_URL == "http://localhost:9000"


def test_channel_ids_skip_garbage(monkeypatch):
    monkeypatch.setenv("CHANNEL_IDS", "1, 2,abc,,3")
    assert Core({}).CHANNEL_IDS == [1, 2, 3]


def test_web_settings(monkeypatch):
    monkeypatch.setenv("API_ENABLED", "false")
    monkeypatch.setenv("PORT", "not-a-port")

    cfg = Web({})
    assert cfg.ENABLED is False
    assert cfg.PORT == 3000


@pytest.mark.parametrize("raw, expected", [("yes", True), ("0", False), ("maybe", True), (None, True), (False, False)])
def test_as_bool(raw, expected):
    assert as_bool(raw, True) is expected


def test_load_raw_config(tmp_path):
    assert load_raw_config(tmp_path / "missing.toml") == {}

    path = tmp_path / "config.toml"
    path.write_text('[scryfallbot.scryfall]\ncache_ttl = 60\n', encoding="utf-8")
    assert Scryfall(load_raw_config(path)).CACHE_TTL == 60
