import os

from .loader import as_bool, as_int, section


class Web:
    def __init__(self, config: dict | None = None) -> None:
        cfg = section(config, "web")
        self.ENABLED: bool = as_bool(cfg.get("enabled", os.getenv("API_ENABLED")), True)
        self.HOST: str = str(cfg.get("host", os.getenv("API_HOST", "0.0.0.0")))
        self.PORT: int = as_int(cfg.get("port", os.getenv("PORT")), 3000)
