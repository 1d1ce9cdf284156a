from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the unified application config (config.toml by default).

    Returns an empty dict when the file is missing so callers can fall back to
    environment variables.
    """
    target = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(config: dict | None, name: str) -> Dict[str, Any]:
    """Return the ``[scryfallbot.<name>]`` table, or an empty dict."""
    return (config or {}).get("scryfallbot", {}).get(name, {}) or {}


def as_int(raw: Any, default: int) -> int:
    """Parse ``raw`` as an int, falling back to ``default`` on bad input."""
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return default


def as_float(raw: Any, default: float) -> float:
    try:
        return float(str(raw).strip())
    except (TypeError, ValueError):
        return default


def as_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    value = str(raw).strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


__all__ = ["load_raw_config", "section", "as_int", "as_float", "as_bool", "DEFAULT_CONFIG_PATH"]
