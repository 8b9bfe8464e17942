"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from src.adapters.http.transport import HttpTransport
from src.api.sessions import FormSessionRegistry
from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.ports import AuthSession

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration form API v1 - Drive form sessions and sign in",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared HTTP client and auth session on startup
    - Closes open form sessions and the HTTP client on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Auth authority: %s", settings.api_base_url)

    client = httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout_seconds,
    )
    session = AuthSession()

    # Store collaborators in app state for dependency injection
    app.state.auth_session = session
    app.state.transport = HttpTransport(client, session)
    app.state.forms = FormSessionRegistry(idle_timeout_seconds=settings.form_idle_timeout_seconds)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    app.state.forms.close_all()
    await client.aclose()
    logger.info("HTTP client closed")


app = FastAPI(
    title="cadastro",
    description="Registration form engine - validation, debounced login checks and submission",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint.

    Reports how many form sessions are open. Does not call the auth authority.
    """
    return {"status": "healthy", "open_forms": len(request.app.state.forms)}
