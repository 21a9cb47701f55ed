# main.py

"""
Application assembly for the Server Time API.

This module configures logging, builds the FastAPI application and
registers the server time router. The module-level ``app`` can be served
by any ASGI server, e.g. ``uvicorn servertime.main:app``.
"""

import logging

# Config imports
from servertime.config import settings

# FASTAPI imports
from fastapi import FastAPI

# APP imports
from servertime.logging_config import setup_logging
from servertime.routers.servertime import router as servertime_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: An application with the server time route mounted at `/`.
    """
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Server Time",
        description=(
            "Reports the current server time in RFC 822 format"
            " with a numeric zone, plus a greeting."
        ),
        version="1.0"
    )

    # Router Registration
    app.include_router(servertime_router)

    logger.info("Server Time app created (env=%s)", settings.APP_ENV)
    return app


app = create_app()
