# infra/db/base.py
from __future__ import annotations
import logging
import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.operational_support import redact_text
from infra.path import database_url

logger = logging.getLogger(__name__)

Base = declarative_base()


def _unicode_lower(value):
    return value.casefold() if isinstance(value, str) else value


def configure_sqlite(engine: Engine) -> Engine:
    """
    Enforce foreign keys and replace SQLite's ASCII-only lower() on every
    new connection. ilike() compiles to lower(...) LIKE lower(...) on SQLite,
    so term search folds accented letters too. Other dialects are untouched.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_conn, connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower)
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


# CATALOG_DATABASE_URL wins; otherwise a SQLite file in the user data dir
db_url = database_url()
logger.info("Using database at: %s", redact_text(db_url))

engine = configure_sqlite(
    create_engine(
        db_url,
        echo=(os.getenv("CATALOG_SQL_ECHO") or "").strip().lower() in {"1", "true", "yes"},
        future=True,
    )
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
