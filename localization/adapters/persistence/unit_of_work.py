# localization/adapters/persistence/unit_of_work.py

from __future__ import annotations

from types import TracebackType
from typing import Optional, Type

import structlog
from sqlalchemy.orm import Session, sessionmaker

logger = structlog.get_logger()


class SqlAlchemyUnitOfWork:
    """
    Unit of work over a single SQLAlchemy session.

    Repositories bound to this unit of work share its session, so all of
    their staged changes become durable in one `commit()`.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def commit(self) -> None:
        try:
            self._session.commit()
        except Exception:
            logger.warning("unit_of_work_commit_failed")
            self._session.rollback()
            raise

    def rollback(self) -> None:
        self._session.rollback()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            logger.warning("unit_of_work_rollback", error=str(exc))
            self.rollback()
        self.close()


class SqlAlchemyUnitOfWorkProvider:
    """Hands out a new unit of work, on a fresh session, per call."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_unit_of_work(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self._session_factory())


class SessionUnitOfWorkProvider:
    """
    Wraps a session that somebody else owns (e.g. the per-request session
    yielded by `get_session`) so that a service can commit through it.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_unit_of_work(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self._session)
