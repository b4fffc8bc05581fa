"""Application database utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool, StaticPool

from utils.env import get_data_dir

DB_FILE_NAME = "proctor_lab.db"

Base = declarative_base()

# -----------------------------------------------------------------------------
# Engine registry for proper cleanup
# -----------------------------------------------------------------------------

# Track engines per database path for proper disposal
_engines: Dict[str, Engine] = {}


def get_default_db_path() -> Path:
    """Return the database path inside the configured data directory."""
    return get_data_dir() / DB_FILE_NAME


def create_app_engine(db_path: Optional[Path] = None) -> Engine:
    """Get or create an engine for the given database path.

    Uses NullPool so connections close as soon as a session is done with them.
    """
    db_path = db_path or get_default_db_path()
    db_path_str = str(db_path.resolve())

    if db_path_str in _engines:
        return _engines[db_path_str]

    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=NullPool,
    )
    _engines[db_path_str] = engine
    return engine


def create_memory_engine() -> Engine:
    """In-memory engine for tests; one shared connection so every session sees the same tables."""
    return create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def init_db(engine: Engine) -> None:
    """Create all tables that don't exist yet."""
    # Register model classes on Base.metadata
    import database.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def dispose_engine(db_path: Path) -> None:
    """Dispose of the engine registered for a database path."""
    db_path_str = str(db_path.resolve())
    if db_path_str in _engines:
        engine = _engines.pop(db_path_str)
        engine.dispose()


def dispose_all_engines() -> None:
    """Dispose every registered engine (called on application shutdown)."""
    while _engines:
        _, engine = _engines.popitem()
        engine.dispose()
