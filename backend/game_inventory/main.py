"""
Game Inventory — FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn game_inventory.main:app) and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip           │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐ │
    │  │ / and /game* │ │  /console*   │ │  /health    │ │
    │  └──────────────┘ └──────────────┘ └─────────────┘ │
    │                                                     │
    │  Exception Handlers (render error.html):            │
    │  NotFound→404 │ HTTP errors→status │ DB/other→500   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the engine and store (unless a store
              was injected), optionally create tables for local SQLite runs.
    Shutdown: close the store, which disposes the engine's pool.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from game_inventory import __version__
from game_inventory.config import settings
from game_inventory.database import create_engine, create_schema
from game_inventory.exceptions import DatabaseError, InventoryError, NotFoundError
from game_inventory.middleware.logging import RequestLoggingMiddleware
from game_inventory.middleware.request_id import RequestIDMiddleware, request_id_var
from game_inventory.routes import consoles, games, health
from game_inventory.store.base import InventoryStore
from game_inventory.store.sqlalchemy_store import SqlAlchemyInventoryStore
from game_inventory.templating import render

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    One stdout handler with ISO timestamps; called once at startup before
    anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Container runtimes capture stdout
        ],
        # basicConfig is a no-op once the root logger has a handler (reloads,
        # pytest capture); force replaces existing handlers
        force=True,
    )

    # Reduce noise from third-party libraries
    # uvicorn.access duplicates RequestLoggingMiddleware's line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Own the store for the life of the process.

    A store injected through create_app() belongs to the caller and is
    neither created nor closed here.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Game Inventory %s starting up...", __version__)

    # create_app(store=...) sets app.state.store before startup; only a store
    # built here is closed here, so a caller's store outlives the app
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        # Engine creation does not connect; the first query does
        engine = create_engine()
        if settings.auto_create_schema:
            await create_schema(engine)
            logger.info("Database schema created")
        app.state.store = SqlAlchemyInventoryStore(engine)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Game Inventory shutting down...")
    if owns_store:
        # Disposes the pool so PostgreSQL frees the connections now rather
        # than when they time out
        await app.state.store.close()
        app.state.store = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_page(request: Request, status_code: int, message: str):
    return render(request, "error.html", {
        "title": "Error",
        "status_code": status_code,
        "message": message,
        "request_id": request_id_var.get(""),
    }, status_code=status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to rendered error pages.

    Handler hierarchy:
        NotFoundError          → 404
        StarletteHTTPException → its own status (unknown paths, bad methods)
        DatabaseError          → 500, generic message, context logged
        InventoryError (base)  → 500
        Exception (fallback)   → 500, traceback logged

    Form validation and blocked deletes never reach these handlers; the
    routes catch them and redisplay a page.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("[%s] Not found: %s", request_id_var.get(""), exc.context)
        return _error_page(request, 404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_page(request, exc.status_code, str(exc.detail))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_page(
            request, 500, "An internal error occurred. Please try again later."
        )

    @app.exception_handler(InventoryError)
    async def handle_inventory_error(request: Request, exc: InventoryError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s | Context: %s",
                     rid, exc.message, exc.context)
        return _error_page(request, 500, "An unexpected error occurred.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error_page(request, 500, "An unexpected error occurred.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[InventoryStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Optional pre-built store (tests pass an in-memory one). When
               omitted, the lifespan builds a SQLAlchemy store from settings.
    """
    app = FastAPI(
        title=settings.app_title,
        description="Inventory of consoles and the games stocked for them.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → routes
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # games first: it owns "/", and each router registers its static paths
    # before its {id} paths
    app.include_router(games.router)
    app.include_router(consoles.router)
    app.include_router(health.router)

    return app


# uvicorn expects `game_inventory.main:app` to be importable
app = create_app()
