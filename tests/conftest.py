"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Dict, Generator, Optional

import pytest
from sqlalchemy.orm import Session

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from database.base import create_memory_engine, init_db
from database.session import build_session_factory
from services.proctor_models import SAMPLE_PROCTORS


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def in_memory_engine():
    """Create an in-memory SQLite engine with all tables."""
    engine = create_memory_engine()
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(in_memory_engine):
    """Session factory bound to the in-memory engine."""
    return build_session_factory(in_memory_engine, create_tables=False)


@pytest.fixture
def db_session(session_factory) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# ---------------------------------------------------------------------------
# Environment Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def dev_mode(monkeypatch):
    """Run the test with development mode enabled."""
    import utils.env

    monkeypatch.setenv("PROCTOR_ENV", "dev")
    utils.env.is_dev_mode.cache_clear()
    yield
    utils.env.is_dev_mode.cache_clear()


@pytest.fixture
def release_mode(monkeypatch):
    """Run the test with development mode disabled."""
    import utils.env

    monkeypatch.delenv("PROCTOR_ENV", raising=False)
    monkeypatch.delenv("PROCTOR_DEV_MODE", raising=False)
    utils.env.is_dev_mode.cache_clear()
    yield
    utils.env.is_dev_mode.cache_clear()


# ---------------------------------------------------------------------------
# Settings / Data Fixtures
# ---------------------------------------------------------------------------

class FakeSettingsStore:
    """Dict-backed stand-in for SettingsManager."""

    def __init__(self, values: Optional[Dict[str, float]] = None):
        self.values: Dict[str, float] = dict(values or {})
        self.writes: list[tuple[str, float]] = []

    def get_float(self, key: str, default: float) -> float:
        return self.values.get(key, default)

    def set_float(self, key: str, value: float) -> None:
        self.values[key] = value
        self.writes.append((key, value))

    def get_string(self, key: str, default: str = "") -> str:
        return str(self.values.get(key, default))

    def set_string(self, key: str, value: str) -> None:
        self.values[key] = value


@pytest.fixture
def fake_settings() -> FakeSettingsStore:
    return FakeSettingsStore()


@pytest.fixture
def sample_proctors():
    return list(SAMPLE_PROCTORS)
