"""Copy Updater API — FastAPI application entry point and composition root.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CopyUpdaterError / SDK errors → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - TodoStore, TokenIssuer, TextRewriter built once per app and held on app.state

Design Decisions:
    - create_app() factory: tests build isolated apps (fresh store, fake client)
    - Lifespan over @app.on_event: logging setup on startup, client closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import auth, health, text, todos
from app.config import Settings, get_settings
from app.core.todo_store import TodoStore
from app.infrastructure.anthropic_client import TextGenerationClient
from app.infrastructure.observability import setup_logging
from app.services.text_rewriter import TextRewriter
from app.services.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if not settings.api_key:
        logger.warning("API_KEY is not set, every token request will be rejected")
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set, bearer tokens can be neither issued nor verified")
    logger.info("Copy Updater API started")
    yield
    client = getattr(app.state.text_rewriter, "client", None)
    if isinstance(client, TextGenerationClient):
        await client.close()
    logger.info("Copy Updater API shutting down")


def create_app(
    settings: Settings | None = None,
    generation_client=None,
) -> FastAPI:
    """Build the app and wire its services."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Copy Updater API",
        description="Rewrites copy with a language model and keeps a todo list.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.todo_store = TodoStore()
    app.state.token_issuer = TokenIssuer(
        api_key=settings.api_key,
        signing_secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in_seconds=settings.jwt_expires_in_seconds,
        subject=settings.token_subject,
    )
    app.state.text_rewriter = TextRewriter(
        generation_client or TextGenerationClient(
            api_key=settings.anthropic_api_key,
            timeout_seconds=settings.anthropic_timeout_seconds,
        ),
        model=settings.rewrite_model,
        max_tokens=settings.rewrite_max_tokens,
    )

    # CORS from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Routes, explicit registration
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(text.router)
    app.include_router(todos.router)

    register_error_handlers(app)
    return app


app = create_app()
