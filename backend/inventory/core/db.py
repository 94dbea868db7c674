# backend/inventory/core/db.py
import os
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from dotenv import dotenv_values, load_dotenv, find_dotenv

logger = logging.getLogger(__name__)

# Project root (backend/) and its .env
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_DOTENV = os.path.join(BASE_DIR, ".env")

Base = declarative_base()


def _norm_key(k: str) -> str:
    return k.replace("\ufeff", "").strip() if isinstance(k, str) else k


def load_env() -> None:
    """Load .env into os.environ without overriding variables set by the shell or CI."""
    dotenv_path = DEFAULT_DOTENV if os.path.exists(DEFAULT_DOTENV) else find_dotenv(filename=".env", usecwd=True)
    if not dotenv_path:
        return
    cfg = dotenv_values(dotenv_path, encoding="utf-8-sig")
    for k, v in cfg.items():
        nk = _norm_key(k)
        if v is not None and (nk not in os.environ or not os.environ[nk].strip()):
            os.environ[nk] = v
    load_dotenv(dotenv_path, override=False)


def database_url() -> str:
    load_env()
    dsn = os.environ.get("DATABASE_URL") or os.environ.get("MSSQL_DSN")
    if not dsn or not dsn.strip():
        raise RuntimeError("DATABASE_URL / MSSQL_DSN is not set (e.g. sqlite+pysqlite:///./inventory.db)")
    return dsn


def engine_options(url) -> dict:
    backend = url.get_backend_name()  # e.g. 'sqlite', 'mssql', 'postgresql'
    opts = dict(pool_pre_ping=True)
    if backend.startswith("sqlite"):
        # no pool sizing for SQLite
        opts["connect_args"] = {"check_same_thread": False}
        return opts
    opts.update(
        pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "20")),
        pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30")),          # seconds
        pool_recycle=int(os.getenv("DB_POOL_RECYCLE_SEC", "1800")),    # 30 minutes
        isolation_level=os.getenv("DB_ISOLATION_LEVEL", "READ COMMITTED"),
    )
    if backend.startswith("mssql"):
        opts["fast_executemany"] = True
    return opts


def _enable_sqlite_fks(dbapi_conn, _record):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


class Database:
    """Process-scoped handle: one engine (connection pool) plus its session factory."""

    def __init__(self, url: str, **engine_kwargs):
        self.url = make_url(url)
        opts = engine_options(self.url)
        opts.update(engine_kwargs)
        self.engine = create_engine(url, **opts)
        if self.dialect == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_fks)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)

    @classmethod
    def from_env(cls) -> "Database":
        return cls(database_url())

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def create_all(self) -> None:
        from .. import models  # noqa: F401  (fills Base.metadata)
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed (%s)", self.url.render_as_string(hide_password=True))


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """Commit everything done inside the block, or roll all of it back."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
