"""Engine/session helpers for the SQL backend.

Engines and sessionmakers are cached per database URL. Callers that do not
pass a URL get the one from ``DATABASE_URL``.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from personapi.core.config import get_settings

Base = declarative_base()

_engines: Dict[str, Engine] = {}
_sessionmakers: Dict[str, sessionmaker] = {}
_lock = threading.Lock()


def resolve_database_url(database_url: Optional[str] = None) -> str:
    url = (database_url or get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return url


def get_engine(database_url: Optional[str] = None) -> Engine:
    url = resolve_database_url(database_url)
    with _lock:
        engine = _engines.get(url)
        if engine is None:
            engine = create_engine(url, future=True, pool_pre_ping=True)
            _engines[url] = engine
        return engine


def _get_sessionmaker(url: str) -> sessionmaker:
    with _lock:
        maker = _sessionmakers.get(url)
    if maker is None:
        # Entities are handed back to services after the session closes.
        maker = sessionmaker(
            bind=get_engine(url),
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )
        with _lock:
            maker = _sessionmakers.setdefault(url, maker)
    return maker


def reset_engines() -> None:
    """Dispose and forget every cached engine (e.g. after DATABASE_URL changes)."""
    with _lock:
        engines = list(_engines.values())
        _engines.clear()
        _sessionmakers.clear()
    for engine in engines:
        engine.dispose()


@contextmanager
def get_session(database_url: Optional[str] = None) -> Iterator[Session]:
    session: Session = _get_sessionmaker(resolve_database_url(database_url))()
    try:
        yield session
    finally:
        session.close()
