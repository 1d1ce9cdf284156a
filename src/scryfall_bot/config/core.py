import logging
import os
from typing import List

from .loader import section

logger = logging.getLogger(__name__)


def _split_ids(raw: str) -> List[int]:
    ids: List[int] = []
    for cid in raw.split(","):
        cid = cid.strip()
        if not cid:
            continue
        try:
            ids.append(int(cid))
        except ValueError:
            logger.warning("Ignoring malformed channel id %r", cid)
    return ids


class Core:
    def __init__(self, config: dict | None = None) -> None:
        discord_cfg = section(config, "discord")

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        channel_ids_cfg = discord_cfg.get("channel_ids")
        if channel_ids_cfg:
            self.CHANNEL_IDS: List[int] = _split_ids(",".join(str(cid) for cid in channel_ids_cfg))
        else:
            self.CHANNEL_IDS = _split_ids(os.getenv("CHANNEL_IDS", ""))

        self.COMMAND_PREFIX: str = str(discord_cfg.get("command_prefix", os.getenv("COMMAND_PREFIX", "!card ")))
        self.AVATAR_PATH: str = str(discord_cfg.get("avatar_path", os.getenv("AVATAR_PATH", ""))).strip()
