from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


def build_server(app: FastAPI, host: str, port: int) -> uvicorn.Server:
    """Create a uvicorn server that runs inside an already running event loop."""
    config = uvicorn.Config(app, host=host, port=port, log_config=None, lifespan="off")
    return uvicorn.Server(config)


async def serve(server: uvicorn.Server) -> None:
    logger.info("HTTP API listening on %s:%d", server.config.host, server.config.port)
    await server.serve()
