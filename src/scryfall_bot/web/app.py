"""FastAPI read endpoint for card lookups."""

import logging

from fastapi import APIRouter, FastAPI, Request

from scryfall_bot import __version__
from scryfall_bot.scryfall import CardLookup

from .errors import CardNotFoundError, register_error_handlers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/card/{name}")
async def get_card(name: str, request: Request) -> dict:
    """Return the Scryfall record for ``name`` exactly as Scryfall sent it."""
    lookup: CardLookup = request.app.state.lookup
    card = await lookup.lookup_by_name(name, fuzzy=True)
    if card is None:
        raise CardNotFoundError(name)
    return card


def create_app(lookup: CardLookup) -> FastAPI:
    app = FastAPI(title="Scryfall Bot API", version=__version__)
    app.state.lookup = lookup

    # Centralized error handlers
    register_error_handlers(app)
    app.include_router(router)
    return app
