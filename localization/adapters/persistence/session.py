# localization/adapters/persistence/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from localization.core.domain.models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build an engine for `database_url`.

    SQLite needs `check_same_thread=False` when used from a web app, and an
    in-memory SQLite database must live on a single shared connection or
    every new connection would see an empty database.
    """
    connect_args: dict[str, object] = {}
    kwargs: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool

    return create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        **kwargs,
    )


def create_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


def init_db(bind: Engine) -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(bind=bind)


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------

def session_dependency(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Yield a session from `factory` and close it afterwards. Wrapped by the
    HTTP layer's FastAPI dependency.
    """
    db = factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def db_session(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Context manager for work outside a request, e.g. scripts or the audit sink.

        with db_session(factory) as db:
            ...
    """
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def flush_or_rollback(db: Session) -> None:
    """
    Flush `db`; if the flush fails, roll the session back before re-raising
    so it stays usable for the next call.
    """
    try:
        db.flush()
    except Exception:
        db.rollback()
        raise


__all__ = [
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "session_dependency",
    "db_session",
    "flush_or_rollback",
]
