# localization/core/ports/dictionary_repository.py
from __future__ import annotations

from typing import List, Optional, Protocol
from uuid import UUID

from localization.core.domain.models import DictionaryItem


class IDictionaryRepository(Protocol):
    """
    Port for reading and writing dictionary items.

    One finder per filter the service needs; there is no generic query
    interface.
    """

    def get(self, item_id: int) -> Optional[DictionaryItem]:
        """
        Retrieves an item by primary key.

        Returns:
            The item if found, None otherwise.
        """
        ...

    def find_by_key(self, key: UUID) -> List[DictionaryItem]:
        """Items whose unique `key` equals `key` (zero or one)."""
        ...

    def find_by_item_key(self, item_key: str) -> List[DictionaryItem]:
        """
        Items whose `item_key` equals `item_key`, ordered by id.

        Item keys are not unique, so this can return several items.
        """
        ...

    def find_by_parent(self, parent_id: UUID) -> List[DictionaryItem]:
        """Direct children of the item whose key is `parent_id`."""
        ...

    def add_or_update(self, item: DictionaryItem) -> None:
        """Inserts the item if the store does not know it yet, updates it otherwise."""
        ...

    def delete(self, item: DictionaryItem) -> None:
        """
        Removes the item, all of its descendants and their translations.
        """
        ...
