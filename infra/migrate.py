from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from infra.operational_support import redact_text
from infra.path import database_url

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    # infra/migrate.py -> infra -> project root
    return Path(__file__).resolve().parents[1]


def alembic_config(db_url: str) -> Config:
    script_location = _app_dir() / "migration"
    if not script_location.exists():
        raise RuntimeError(f"Alembic script_location missing: {script_location}")

    alembic_ini = script_location / "alembic.ini"
    cfg = Config(str(alembic_ini)) if alembic_ini.exists() else Config()
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    return cfg


def run_migrations(db_url: str | None = None) -> None:
    resolved = db_url or database_url()
    logger.info("Upgrading schema at %s to head", redact_text(resolved))
    command.upgrade(alembic_config(resolved), "head")
