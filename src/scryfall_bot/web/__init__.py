from .app import create_app
from .errors import CardNotFoundError, ScryfallBotError, register_error_handlers
from .server import build_server, serve

__all__ = [
    "CardNotFoundError",
    "ScryfallBotError",
    "build_server",
    "create_app",
    "register_error_handlers",
    "serve",
]
