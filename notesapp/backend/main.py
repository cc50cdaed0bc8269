"""
FastAPI Application Entry Point.

This is the main entry point for the notes backend.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notesapp.backend.api import health
from notesapp.backend.api import router as api_router
from notesapp.backend.core.auth_gate import AuthGateMiddleware
from notesapp.backend.core.config import get_app_config
from notesapp.backend.core.exception_handlers import register_exception_handlers
from notesapp.backend.core.logging import get_logger, setup_logging
from notesapp.backend.core.middleware import RequestContextMiddleware
from notesapp.backend.stores.base import NoteStore
from notesapp.backend.stores.factory import build_note_store

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging(level=app_config.logging.level)

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
            "store": app.state.note_store.backend,
        },
    )
    yield
    await app.state.note_store.close()
    logger.info("Application shutting down")


def create_app(note_store: NoteStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        note_store: Store to serve notes from. When omitted the backend
            named in database.yaml is built.
    """
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    if note_store is None:
        note_store = build_note_store(app_config)
    app.state.note_store = note_store
    app.state.detailed_errors = app_config.features.api_detailed_errors

    if app_config.features.auth_gate_enabled:
        app.add_middleware(
            AuthGateMiddleware,
            session=app_config.security.session,
            api_prefix=app_settings.api_prefix,
        )

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    @app.get("/", tags=["home"])
    async def home() -> dict[str, str]:
        """Public landing endpoint."""
        return {
            "name": app_settings.name,
            "version": app_settings.version,
            "description": app_settings.description,
        }

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=app_settings.api_prefix)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    Creates the app on first call and caches it, so importing this module
    never loads configuration.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn notesapp.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
