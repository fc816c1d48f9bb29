"""
Newsroom FastAPI application.

Entry point for the API server. The app is the presentation layer: it holds
the process-wide Site and turns HTTP requests into intents.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend import store
from backend.config import settings
from backend.routes import comments as comment_routes
from backend.routes import navigation as navigation_routes
from backend.routes import pages as pages_routes
from backend.routes import posts as post_routes
from backend.routes import session as session_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Builds the site on startup and drops it on shutdown. Nothing is persisted.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store.init_site()
    logger.info("%s started (environment=%s)", settings.SITE_NAME, settings.ENVIRONMENT)

    yield

    store.close_site()
    logger.info("%s stopped", settings.SITE_NAME)


app = FastAPI(
    title=settings.SITE_NAME,
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

# Register routes
app.include_router(session_routes.router)
app.include_router(navigation_routes.router)
app.include_router(post_routes.router)
app.include_router(comment_routes.router)
app.include_router(pages_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
