"""
Customer API — FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn customer_api.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐                  │
    │  │  Req ID  │→│ Logging  │→│   CORS   │                  │
    │  └──────────┘ └──────────┘ └──────────┘                  │
    │                                                          │
    │  Routes (policy per route):                              │
    │  ┌────────────────────────────┐ ┌──────────────┐         │
    │  │ /customers CRUD            │ │ GET /health  │         │
    │  └────────────────────────────┘ └──────────────┘         │
    │                                                          │
    │  Exception Handlers:                                     │
    │  ┌────────────────────────────────────────────────────┐  │
    │  │ Validation→400 │ Auth→401 │ Policy→403 │ 404 │ DB→500│  │
    │  └────────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Configure logging
    2. Validate configuration (logged, not fatal)
    3. Create missing tables
    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from customer_api import __version__
from customer_api.config import settings
from customer_api.database import create_schema, dispose_engine
from customer_api.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CustomerApiError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from customer_api.middleware.logging import RequestLoggingMiddleware
from customer_api.middleware.request_id import RequestIDMiddleware, request_id_var
from customer_api.routes import customers, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (container runtimes capture it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # These libraries log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, config validation, schema creation.
    Shutdown: engine disposal.

    The schema is created before the first request is accepted; a database
    that cannot be reached here aborts startup.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Customer API starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Protected routes will answer 401 until this is fixed.")

    await create_schema()
    logger.info("Database schema ready")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Customer API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a uniform JSON body.

    Handler hierarchy:
        ValidationError      → 400 Bad Request
        AuthenticationError  → 401 Unauthorized (+ WWW-Authenticate: Bearer)
        AuthorizationError   → 403 Forbidden
        NotFoundError        → 404 Not Found
        DatabaseError        → 500 Internal Server Error (generic message)
        CustomerApiError     → 500 Internal Server Error (catch-all for custom)
        Exception            → 500 Internal Server Error (unexpected errors)

    Internal details (SQL, stack traces, token contents) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=401,
            content={
                "error": "not_authenticated",
                "message": exc.message,
                "request_id": rid,
            },
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationError)
    async def handle_authorization_error(request: Request, exc: AuthorizationError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=403,
            content={
                "error": "forbidden",
                "message": exc.message,
                "details": {"policy": exc.policy},
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the caller; context goes to the log only."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(CustomerApiError)
    async def handle_application_error(request: Request, exc: CustomerApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Starlette runs this handler in its outermost error middleware, outside
        RequestIDMiddleware: the ContextVar is not visible here and the
        X-Request-ID header is never added. request.state lives in the ASGI
        scope, which is shared, so the ID is read from there instead.
        """
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
            headers={"X-Request-ID": rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    OpenAPI docs are served at /docs, /redoc and /openapi.json, including the
    Bearer (JWT) security scheme used by the protected customer routes.
    """
    app = FastAPI(
        title="Customer API",
        description=(
            "CRUD API for customer records. Protected routes require a JWT in "
            "the Authorization header: `Bearer <token>`."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(customers.router)
    app.include_router(health.router)

    return app


# uvicorn expects `customer_api.main:app` to be importable
app = create_app()
