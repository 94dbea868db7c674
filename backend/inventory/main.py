# backend/inventory/main.py
import os
import json
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from .core.api import ok, fail, UTF8JSONResponse
from .core.db import Database, get_db, load_env
from .domain.errors import InventoryError

# --- Router imports ---
from .routers.categories import router as categories_router
from .routers.parts import router as parts_router
from .routers.transactions import router as transactions_router
from .routers.stats import router as stats_router

logger = logging.getLogger("inventory")
access_logger = logging.getLogger("inventory.access")

load_env()


def _parse_origins(env_val: str | None):
    if not env_val or env_val.strip() == "*":
        return ["*"]
    try:
        parsed = json.loads(env_val)
        if isinstance(parsed, list):
            return [str(x) for x in parsed]
    except ValueError:
        pass
    return [s.strip() for s in env_val.split(",") if s.strip()]


def _truthy(val: str | None) -> bool:
    return (val or "").strip().lower() in {"1", "true", "yes", "on"}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the API. `database` is the process-scoped handle; when omitted it is
    created from DATABASE_URL at startup and disposed at shutdown.
    """
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database.from_env()
        app.state.database = db
        if _truthy(os.getenv("DB_AUTO_CREATE", "1")):
            db.create_all()
            logger.info("Database tables created/verified (%s)", db.dialect)
        try:
            yield
        finally:
            if database is None:
                db.dispose()

    app = FastAPI(
        title="Parts Inventory API",
        version="1.0.0",
        default_response_class=UTF8JSONResponse,
        lifespan=lifespan,
    )

    # Access log for /api calls + JSON charset fix
    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        resp = await call_next(request)
        ct = resp.headers.get("content-type", "")
        if ct.lower().startswith("application/json") and "charset=" not in ct.lower():
            resp.headers["content-type"] = "application/json; charset=utf-8"
        if request.url.path.startswith("/api"):
            access_logger.info(
                "Status: %s, HTTP method: %s, Path: %s, User agent: %s",
                resp.status_code, request.method, request.url.path, request.headers.get("user-agent"),
            )
        return resp

    # -----------------------------
    # Error envelopes
    # -----------------------------
    @app.exception_handler(InventoryError)
    async def inventory_error_to_envelope(request: Request, exc: InventoryError):
        return fail(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
        return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)

    # bad ids, invalid JSON and schema violations are all client errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
        return fail(_validation_message(exc), status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_exception_to_envelope(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return fail("Internal server error", status_code=500)

    # -----------------------------
    # CORS (.env)
    # -----------------------------
    allowed_origins = _parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---- Health ----
    @app.get("/health", tags=["health"])
    def health():
        return ok({"service": "Parts Inventory API"})

    @app.get("/db-ping", tags=["health"])
    def db_ping(db: Session = Depends(get_db)):
        val = db.execute(text("SELECT 1")).scalar()
        return ok({"db": "ok", "select1": val})

    app.include_router(categories_router)
    app.include_router(parts_router)
    app.include_router(transactions_router)
    app.include_router(stats_router)
    logger.debug("Routes registered: %s", [getattr(r, "path", str(r)) for r in app.routes])

    return app


app = create_app()
