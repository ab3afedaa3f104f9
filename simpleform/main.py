"""
SimpleForm Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn simpleform.main:app`), the `simpleform` console
       script, and the test suite (which passes its own store).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐              │
    │  │  Req ID  │→│  Logging    │→│ CORS │              │
    │  └──────────┘ └─────────────┘ └──────┘              │
    │                                                     │
    │  Routes:                                            │
    │  ┌─────┐ ┌──────────────────────┐ ┌─────────────┐   │
    │  │ GET/│ │ /responses[/{id}]    │ │ GET /health │   │
    │  └─────┘ └──────────────────────┘ └─────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Storage→500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Open the Database (one engine for the whole process) and create the
       `responses` table if missing, unless a store was injected
    3. Attach the ResponseStore to app.state

    Shutdown:
    1. Dispose the engine opened at startup
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from simpleform import __version__
from simpleform.config import Settings, settings as default_settings
from simpleform.database import Database
from simpleform.exceptions import (
    NotFoundError,
    SimpleFormError,
    StorageError,
    ValidationError,
)
from simpleform.middleware.logging import RequestLoggingMiddleware
from simpleform.middleware.request_id import RequestIDMiddleware, request_id_var
from simpleform.routes import health, index, responses
from simpleform.services.response_store import ResponseStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: 2026-10-19T12:00:00 [INFO] simpleform.access: GET /responses 200 3.1ms
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs each request.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the storage connection on startup and release it on shutdown.

    A store passed to create_app() is used as-is and left open; its owner
    disposes it.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("SimpleForm backend %s starting up", __version__)

    database: Optional[Database] = None
    if getattr(app.state, "store", None) is None:
        database = Database.from_settings(app_settings)
        await database.create_all()
        app.state.store = ResponseStore(database)
        logger.info("Connected to database at %s", database.engine.url.render_as_string(hide_password=True))

    logger.info(
        "Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )

    yield

    logger.info("SimpleForm backend shutting down")
    if database is not None:
        await database.dispose()
        app.state.store = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(message: str, details: Optional[dict] = None) -> dict:
    body = {"error": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Response validation failed: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and JSON error bodies.

    Handler hierarchy:
        ValidationError         → 400 (includes malformed JSON / wrong types)
        NotFoundError           → 404
        StorageError            → 500 (description attached)
        SimpleFormError (base)  → 500
        Exception (fallback)    → 500, generic message, trace logged
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=400, content=_error_body(exc.message, exc.context))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = _describe_request_errors(exc)
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content=_error_body(message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body(exc.message))

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            "[%s] Storage error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return JSONResponse(status_code=500, content=_error_body(exc.message))

    @app.exception_handler(SimpleFormError)
    async def handle_app_error(request: Request, exc: SimpleFormError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content=_error_body(exc.message))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("An unexpected error occurred. Please try again later."),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ResponseStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings.
        store:    An already-open ResponseStore. When omitted the lifespan
                  opens one from `settings.database_url`.
    """
    app_settings = settings or default_settings

    app = FastAPI(
        title="SimpleForm API",
        description="CRUD API for form submissions (name, email, feedback, rating).",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(index.router)
    app.include_router(responses.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on the configured port."""
    uvicorn.run(
        "simpleform.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )
