"""Centralized session factory helpers for the application database.

Use these helpers to avoid ad-hoc session construction and keep
initialization consistent across services and GUI controllers.

Usage:
    from database.session import build_session_factory, session_scope

    factory = build_session_factory(engine)
    with session_scope(factory) as session:
        repo = SoilProctorRepository(session)
        proctors = repo.list_ordered()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from .base import init_db

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]

__all__ = [
    "SessionFactory",
    "build_session_factory",
    "session_scope",
]


def build_session_factory(engine: Engine, create_tables: bool = True) -> SessionFactory:
    """Return a session factory bound to ``engine``.

    Tables are created once when the factory is built.
    """
    if create_tables:
        init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@contextmanager
def session_scope(factory: SessionFactory) -> Iterator[Session]:
    """Context manager for commit/rollback semantics around a session factory."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.warning(f"Session rolled back: {e}")
        raise
    finally:
        session.close()
