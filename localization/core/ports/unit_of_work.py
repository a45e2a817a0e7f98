# localization/core/ports/unit_of_work.py
from __future__ import annotations

from typing import Protocol


class IUnitOfWork(Protocol):
    """
    Port for the transaction boundary.

    Repositories created for a unit of work stage their changes in it;
    nothing is durable until `commit()` returns. Failure handling (retry,
    rollback) belongs to the implementation.
    """

    def commit(self) -> None:
        """Make every staged change durable."""
        ...

    def rollback(self) -> None:
        """Discard every staged change."""
        ...

    def close(self) -> None:
        """Release the underlying connection or session."""
        ...


class IUnitOfWorkProvider(Protocol):
    """Port for creating units of work."""

    def get_unit_of_work(self) -> IUnitOfWork:
        ...
