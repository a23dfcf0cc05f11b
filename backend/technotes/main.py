"""
TechNotes Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn technotes.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐ ┌──────────┐  │
    │  │  Req ID      │→│  Logging        │→│  CORS    │  │
    │  └──────────────┘ └─────────────────┘ └──────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /users       │ │ /notes       │ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→400 │ Conflict→409 │   │
    │  │ Storage→500    │ anything else→500           │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from technotes import __version__
from technotes.config import settings
from technotes.database import dispose_engine
from technotes.exceptions import (
    ConflictError,
    NotFoundError,
    StorageError,
    TechNotesError,
    ValidationError,
)
from technotes.middleware.logging import RequestLoggingMiddleware
from technotes.middleware.request_id import RequestIDMiddleware, request_id_var
from technotes.routes import health, notes, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce the listening address.
    Shutdown: dispose the database engine (close all pooled connections).

    Schema creation is Alembic's job (alembic upgrade head), not the app's.
    """
    setup_logging()
    logger.info("TechNotes Backend %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("TechNotes Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: Optional[dict] = None) -> dict:
    body = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def _invalid_fields(exc: RequestValidationError) -> List[str]:
    """Field names from FastAPI's error locations, e.g. ("body", "title") → "title"."""
    fields = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        if name not in fields:
            fields.append(name)
    return fields


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a single JSON error format.

    Handler table:
        RequestValidationError  → 400 (body failed its schema)
        ValidationError         → 400
        NotFoundError           → 400
        ConflictError           → 409
        StorageError            → 500 (generic message, details logged)
        TechNotesError (base)   → 500
        Exception (fallback)    → 500

    Internal details (SQL, constraint names, stack traces) are only logged.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        fields = _invalid_fields(exc)
        logger.warning("[%s] Invalid body for %s %s: %s",
                       request_id_var.get(""), request.method, request.url.path, fields)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", "All fields are required", {"fields": fields}),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=400,
            content=_error_body("not_found", exc.message, exc.context),
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.info("[%s] Conflict: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=409,
            content=_error_body("conflict", exc.message, exc.context),
        )

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error("[%s] Storage error: %s | Context: %s",
                     request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "server_error", "An internal error occurred. Please try again later."
            ),
        )

    @app.exception_handler(TechNotesError)
    async def handle_app_error(request: Request, exc: TechNotesError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="TechNotes API",
        description="Users and the notes they own: CRUD with uniqueness and ownership rules.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # added CORS → Logging → RequestID, executed RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `technotes.main:app` to be importable
app = create_app()
