# localization/adapters/persistence/dictionary_repository.py

from __future__ import annotations

from typing import Any, List, Optional, Set
from uuid import UUID

import structlog
from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from localization.adapters.persistence.session import flush_or_rollback
from localization.core.domain.models import DictionaryItem

logger = structlog.get_logger()


class SqlAlchemyDictionaryRepository:
    """
    Thin data-access layer around the DictionaryItem model.

    Writes are flushed, never committed: the owning unit of work decides
    when they become durable.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(DictionaryItem).order_by(DictionaryItem.id)

    def _all(self, stmt: Select[Any]) -> List[DictionaryItem]:
        return list(self._session.execute(stmt).scalars().all())

    def _persistent(self, item: DictionaryItem) -> Optional[DictionaryItem]:
        """Return the session-bound row for `item`, or None if it was never stored."""
        if item in self._session:
            return item
        if item.id is not None:
            return self._session.get(DictionaryItem, item.id)
        if item.key is not None:
            found = self.find_by_key(item.key)
            return found[0] if found else None
        return None

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get(self, item_id: int) -> Optional[DictionaryItem]:
        return self._session.get(DictionaryItem, item_id)

    def find_by_key(self, key: UUID) -> List[DictionaryItem]:
        return self._all(self._base_select().where(DictionaryItem.key == key))

    def find_by_item_key(self, item_key: str) -> List[DictionaryItem]:
        return self._all(self._base_select().where(DictionaryItem.item_key == item_key))

    def find_by_parent(self, parent_id: UUID) -> List[DictionaryItem]:
        return self._all(self._base_select().where(DictionaryItem.parent_id == parent_id))

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def add_or_update(self, item: DictionaryItem) -> None:
        """
        Insert `item`, or update the stored row it corresponds to.

        An item the session already tracks, or one carrying an id, is an
        update; anything else is inserted.
        """
        if item in self._session or item.id is None:
            self._session.add(item)
        else:
            self._session.merge(item)
        flush_or_rollback(self._session)

    def delete(self, item: DictionaryItem) -> None:
        """
        Delete `item`, its translations, and every descendant, deepest first.
        """
        target = self._persistent(item)
        if target is None:
            logger.debug("dictionary_item_delete_skipped", item_key=item.item_key)
            return

        removed = self._delete_tree(target, set())
        flush_or_rollback(self._session)
        logger.debug("dictionary_tree_deleted", root_id=target.id, removed=removed)

    def _delete_tree(self, item: DictionaryItem, visited: Set[int]) -> int:
        # parent_id is not constrained, so the tree may contain cycles
        if item.id in visited:
            return 0
        visited.add(item.id)

        removed = 0
        for child in self.find_by_parent(item.key):
            removed += self._delete_tree(child, visited)
        self._session.delete(item)
        return removed + 1
