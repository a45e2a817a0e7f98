# localization/core/services/localization_service.py
from __future__ import annotations

from types import TracebackType
from typing import List, Optional, Type, Union
from uuid import UUID

import structlog

from localization.core.domain.events import DeleteEventArgs, SaveEventArgs
from localization.core.domain.exceptions import UnsupportedEntityError
from localization.core.domain.models import (
    ROOT_PARENT_ID,
    AuditType,
    DictionaryItem,
    Language,
)
from localization.core.ports.audit_sink import IAuditSink
from localization.core.ports.repository_factory import IRepositoryFactory
from localization.core.ports.unit_of_work import IUnitOfWorkProvider
from localization.core.services.notifications import LocalizationEvents
from localization.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

DEFAULT_SYSTEM_USER_ID = 0


class LocalizationService:
    """
    Easy access to operations on dictionary items and languages.

    Reads go straight to the repositories. Every save/delete runs the same
    sequence:

    1. fire the "before" hook (`saving` / `deleting`); a handler may set
       `args.cancel = True`, in which case nothing else happens,
    2. stage the change in the repository and commit the unit of work,
    3. fire the "after" hook (`saved` / `deleted`) with the same args,
    4. write one audit record.

    Repository, commit and handler errors propagate to the caller
    unchanged.
    """

    def __init__(
        self,
        provider: IUnitOfWorkProvider,
        repositories: IRepositoryFactory,
        audit: IAuditSink,
        events: Optional[LocalizationEvents] = None,
        system_user_id: int = DEFAULT_SYSTEM_USER_ID,
    ) -> None:
        """
        Args:
            provider: Supplies the unit of work this service commits.
            repositories: Builds the dictionary and language repositories
                bound to that unit of work.
            audit: Receives one record per committed mutation.
            events: Notification hooks. A fresh, empty set is created when
                omitted, so handlers never leak between services.
            system_user_id: Acting user recorded in the audit trail when a
                caller does not pass `user_id`.
        """
        self._unit_of_work = provider.get_unit_of_work()
        self._dictionary_repository = repositories.create_dictionary_repository(self._unit_of_work)
        self._language_repository = repositories.create_language_repository(self._unit_of_work)
        self._audit = audit
        self.events = events if events is not None else LocalizationEvents()
        self.system_user_id = system_user_id

    def close(self) -> None:
        """Release the unit of work. The service must not be used afterwards."""
        self._unit_of_work.close()

    def __enter__(self) -> "LocalizationService":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            self._unit_of_work.rollback()
        self.close()

    # ------------------------------------------------------------------
    # Dictionary items: reads
    # ------------------------------------------------------------------

    def get_dictionary_item_by_id(self, item_id: Union[int, UUID]) -> Optional[DictionaryItem]:
        """
        Gets a dictionary item by its integer id, or by its unique key when
        given a UUID. Returns None if there is no such item.
        """
        if isinstance(item_id, UUID):
            return self.get_dictionary_item_by_key(item_id)
        return self._dictionary_repository.get(item_id)

    def get_dictionary_item_by_key(self, key: UUID) -> Optional[DictionaryItem]:
        items = self._dictionary_repository.find_by_key(key)
        return items[0] if items else None

    def get_dictionary_item_by_item_key(self, item_key: str) -> Optional[DictionaryItem]:
        """
        Gets a dictionary item by its item key.

        Item keys are not unique; when several items share one, the item
        with the lowest id is returned.
        """
        items = self._dictionary_repository.find_by_item_key(item_key)
        return items[0] if items else None

    def get_dictionary_item_children(self, parent_id: UUID) -> List[DictionaryItem]:
        return self._dictionary_repository.find_by_parent(parent_id)

    def get_root_dictionary_items(self) -> List[DictionaryItem]:
        return self._dictionary_repository.find_by_parent(ROOT_PARENT_ID)

    def dictionary_item_exists(self, item_key: str) -> bool:
        return len(self._dictionary_repository.find_by_item_key(item_key)) > 0

    # ------------------------------------------------------------------
    # Dictionary items: writes
    # ------------------------------------------------------------------

    def save_dictionary_item(self, item: DictionaryItem, user_id: Optional[int] = None) -> None:
        with tracer.start_as_current_span("localization.save_dictionary_item") as span:
            span.set_attribute("localization.item_key", item.item_key)

            args = self.events.saving.fire(item, SaveEventArgs())
            if args.cancel:
                logger.info("save_cancelled", entity="DictionaryItem", item_key=item.item_key)
                return

            self._dictionary_repository.add_or_update(item)
            self._unit_of_work.commit()

            self.events.saved.fire(item, args)

            self._write_audit(AuditType.SAVE, "Save DictionaryItem performed by user", user_id, item.id)
            logger.info("dictionary_item_saved", item_id=item.id, item_key=item.item_key)

    def delete_dictionary_item(self, item: DictionaryItem, user_id: Optional[int] = None) -> None:
        """
        Deletes a dictionary item together with its translations and all of
        its descendants. The recursion happens in the repository.
        """
        with tracer.start_as_current_span("localization.delete_dictionary_item") as span:
            span.set_attribute("localization.item_key", item.item_key)

            entity_id = item.id
            args = self.events.deleting.fire(item, DeleteEventArgs(id=entity_id))
            if args.cancel:
                logger.info("delete_cancelled", entity="DictionaryItem", item_id=entity_id)
                return

            self._dictionary_repository.delete(item)
            self._unit_of_work.commit()

            self.events.deleted.fire(item, args)

            self._write_audit(AuditType.DELETE, "Delete DictionaryItem performed by user", user_id, entity_id)
            logger.info("dictionary_item_deleted", item_id=entity_id, item_key=item.item_key)

    # ------------------------------------------------------------------
    # Languages
    # ------------------------------------------------------------------

    def get_language_by_id(self, language_id: int) -> Optional[Language]:
        return self._language_repository.get(language_id)

    def get_language_by_culture_code(self, culture: str) -> Optional[Language]:
        languages = self._language_repository.find_by_culture_code(culture)
        return languages[0] if languages else None

    def get_all_languages(self) -> List[Language]:
        return self._language_repository.get_all()

    def save_language(self, language: Language, user_id: Optional[int] = None) -> None:
        with tracer.start_as_current_span("localization.save_language") as span:
            span.set_attribute("localization.culture", language.culture_name)

            args = self.events.saving.fire(language, SaveEventArgs())
            if args.cancel:
                logger.info("save_cancelled", entity="Language", culture=language.culture_name)
                return

            self._language_repository.add_or_update(language)
            self._unit_of_work.commit()

            self.events.saved.fire(language, args)

            self._write_audit(AuditType.SAVE, "Save Language performed by user", user_id, language.id)
            logger.info("language_saved", language_id=language.id, culture=language.culture_name)

    def delete_language(self, language: Language, user_id: Optional[int] = None) -> None:
        """
        Deletes a language but not its usages: translations pointing at it
        are left dangling.
        """
        with tracer.start_as_current_span("localization.delete_language") as span:
            span.set_attribute("localization.culture", language.culture_name)

            entity_id = language.id
            args = self.events.deleting.fire(language, DeleteEventArgs(id=entity_id))
            if args.cancel:
                logger.info("delete_cancelled", entity="Language", language_id=entity_id)
                return

            self._language_repository.delete(language)
            self._unit_of_work.commit()

            self.events.deleted.fire(language, args)

            self._write_audit(AuditType.DELETE, "Delete Language performed by user", user_id, entity_id)
            logger.info("language_deleted", language_id=entity_id, culture=language.culture_name)

    # ------------------------------------------------------------------
    # Type dispatch
    # ------------------------------------------------------------------

    def save(self, entity: Union[DictionaryItem, Language], user_id: Optional[int] = None) -> None:
        if isinstance(entity, DictionaryItem):
            self.save_dictionary_item(entity, user_id)
        elif isinstance(entity, Language):
            self.save_language(entity, user_id)
        else:
            raise UnsupportedEntityError(entity)

    def delete(self, entity: Union[DictionaryItem, Language], user_id: Optional[int] = None) -> None:
        if isinstance(entity, DictionaryItem):
            self.delete_dictionary_item(entity, user_id)
        elif isinstance(entity, Language):
            self.delete_language(entity, user_id)
        else:
            raise UnsupportedEntityError(entity)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _write_audit(
        self,
        audit_type: AuditType,
        message: str,
        user_id: Optional[int],
        entity_id: Optional[int],
    ) -> None:
        acting_user = self.system_user_id if user_id is None else user_id
        self._audit.add(audit_type, message, acting_user, entity_id)
