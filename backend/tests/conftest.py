import os
import time
from datetime import datetime, timezone

import pytest

# Use in-memory sqlite for tests; set before the engine is created
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ["TIMEZONE"] = "UTC"
os.environ["WEEK_START"] = "sunday"

# Week of Sun 2026-10-11 .. Sat 2026-10-17
MONDAY = datetime(2026, 10, 12, 9, 0, tzinfo=timezone.utc)
WEDNESDAY = datetime(2026, 10, 14, 18, 30, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(WEDNESDAY)


@pytest.fixture
def tables():
    from orbit.db import Base, engine
    from orbit.models.goal import Goal  # noqa: F401
    from orbit.models.achieved_goal import AchievedGoal  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(tables):
    from orbit.db import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def new_york_local_tz(monkeypatch):
    """Make the system local zone US Eastern (DST ends Sun 2026-11-01)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "EST5EDT,M3.2.0,M11.1.0")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
