# tests/conftest.py
import os
from datetime import datetime, timedelta, timezone

import pytest

# never touch the per-user database from the test run
os.environ.setdefault("CATALOG_DATABASE_URL", "sqlite:///:memory:")

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from core.domain import clock  # noqa: E402
from infra.db.base import Base, configure_sqlite  # noqa: E402
import infra.db.models  # noqa: E402,F401
from infra.services import build_service_graph  # noqa: E402


@pytest.fixture
def engine():
    # separate in-memory DB for tests
    engine = configure_sqlite(create_engine("sqlite:///:memory:", future=True))
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_graph(session).as_dict()


class TickingClock:
    """Deterministic UTC clock advancing one second per reading."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        self.current = self.current + self.step
        return self.current


@pytest.fixture
def ticking_clock(monkeypatch):
    fake = TickingClock()
    monkeypatch.setattr(clock, "utc_now", fake)
    return fake
