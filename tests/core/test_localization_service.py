# tests/core/test_localization_service.py
import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from localization.core.domain.exceptions import DomainError, UnsupportedEntityError
from localization.core.domain.models import (
    ROOT_PARENT_ID,
    AuditType,
    DictionaryItem,
    DictionaryTranslation,
    Language,
)


def _count(session_factory, model) -> int:
    with session_factory() as db:
        return db.execute(select(func.count()).select_from(model)).scalar_one()


class TestDictionaryItemLookups:

    def test_save_then_lookup_by_id_key_and_item_key(self, service, sample_item):
        """
        Scenario: An item is saved.
        Expected: All three lookups return that same item.
        """
        service.save_dictionary_item(sample_item)

        assert sample_item.id is not None

        by_id = service.get_dictionary_item_by_id(sample_item.id)
        by_key = service.get_dictionary_item_by_key(sample_item.key)
        by_item_key = service.get_dictionary_item_by_item_key("greeting")

        for found in (by_id, by_key, by_item_key):
            assert found is not None
            assert found.id == sample_item.id
            assert found.key == sample_item.key
            assert found.item_key == "greeting"
            assert found.parent_id == ROOT_PARENT_ID

    def test_lookup_by_uuid_dispatches_to_key(self, service, sample_item):
        service.save_dictionary_item(sample_item)

        found = service.get_dictionary_item_by_id(sample_item.key)

        assert found is not None
        assert found.id == sample_item.id

    def test_lookups_on_empty_store_return_none(self, service):
        assert service.get_dictionary_item_by_id(42) is None
        assert service.get_dictionary_item_by_id(uuid.uuid4()) is None
        assert service.get_dictionary_item_by_item_key("missing") is None
        assert service.get_dictionary_item_children(uuid.uuid4()) == []
        assert service.get_root_dictionary_items() == []

    def test_exists_tracks_save_and_delete(self, service, sample_item):
        assert service.dictionary_item_exists("greeting") is False

        service.save_dictionary_item(sample_item)
        assert service.dictionary_item_exists("greeting") is True

        service.delete_dictionary_item(sample_item)
        assert service.dictionary_item_exists("greeting") is False

    def test_save_delete_then_lookup_returns_none(self, service, sample_item):
        service.save_dictionary_item(sample_item)
        item_id = sample_item.id

        service.delete_dictionary_item(sample_item)

        assert service.get_dictionary_item_by_id(item_id) is None

    def test_duplicate_item_keys_return_lowest_id(self, service):
        """
        Item keys are not unique. The lookup must not fail and returns the
        first item saved.
        """
        first = DictionaryItem(item_key="dup")
        second = DictionaryItem(item_key="dup")
        service.save_dictionary_item(first)
        service.save_dictionary_item(second)

        found = service.get_dictionary_item_by_item_key("dup")

        assert found.id == min(first.id, second.id)
        assert service.dictionary_item_exists("dup") is True


class TestDictionaryTree:

    def test_children_returns_exactly_direct_children(self, service):
        parent = DictionaryItem(item_key="parent")
        service.save_dictionary_item(parent)

        child_a = DictionaryItem(item_key="a", parent_id=parent.key)
        child_b = DictionaryItem(item_key="b", parent_id=parent.key)
        grandchild = DictionaryItem(item_key="c", parent_id=child_a.key)
        unrelated = DictionaryItem(item_key="other")
        for item in (child_a, child_b, grandchild, unrelated):
            service.save_dictionary_item(item)

        children = service.get_dictionary_item_children(parent.key)

        assert {c.item_key for c in children} == {"a", "b"}
        assert all(c.parent_id == parent.key for c in children)

    def test_root_items_returns_items_with_root_marker(self, service):
        one = DictionaryItem(item_key="one")
        two = DictionaryItem(item_key="two")
        service.save_dictionary_item(one)
        service.save_dictionary_item(two)
        service.save_dictionary_item(DictionaryItem(item_key="nested", parent_id=one.key))

        roots = service.get_root_dictionary_items()

        assert {r.item_key for r in roots} == {"one", "two"}

    def test_delete_cascades_to_descendants_and_translations(self, service, session_factory):
        language = Language(culture_name="da-DK")
        service.save_language(language)

        root = DictionaryItem(item_key="root")
        service.save_dictionary_item(root)
        child = DictionaryItem(item_key="child", parent_id=root.key)
        service.save_dictionary_item(child)
        grandchild = DictionaryItem(item_key="grandchild", parent_id=child.key)
        grandchild.set_translation(language, "Barnebarn")
        service.save_dictionary_item(grandchild)
        sibling = DictionaryItem(item_key="sibling")
        service.save_dictionary_item(sibling)

        service.delete_dictionary_item(root)

        assert service.get_dictionary_item_by_item_key("child") is None
        assert service.get_dictionary_item_by_item_key("grandchild") is None
        assert service.get_dictionary_item_by_item_key("sibling") is not None
        assert _count(session_factory, DictionaryItem) == 1
        assert _count(session_factory, DictionaryTranslation) == 0


class TestSaveUpdates:

    def test_saving_twice_updates_in_place(self, service, sample_item, session_factory, audit_repository):
        service.save_dictionary_item(sample_item)
        item_id = sample_item.id

        sample_item.item_key = "salutation"
        service.save_dictionary_item(sample_item)

        assert sample_item.id == item_id
        assert _count(session_factory, DictionaryItem) == 1
        assert service.get_dictionary_item_by_item_key("salutation").id == item_id
        assert service.get_dictionary_item_by_item_key("greeting") is None
        assert len(audit_repository.list_recent(entity_id=item_id)) == 2

    def test_translations_are_persisted(self, service, session_factory):
        english = Language(culture_name="en-US")
        danish = Language(culture_name="da-DK")
        service.save_language(english)
        service.save_language(danish)

        item = DictionaryItem(item_key="greeting")
        item.set_translation(english, "Hello")
        item.set_translation(danish, "Hej")
        item.set_translation(english, "Hi")
        service.save_dictionary_item(item)

        with session_factory() as db:
            stored = db.get(DictionaryItem, item.id)
            assert stored.translation_for(english) == "Hi"
            assert stored.translation_for(danish) == "Hej"
            assert len(stored.translations) == 2

    def test_translation_requires_saved_language(self, sample_item):
        with pytest.raises(ValueError):
            sample_item.set_translation(Language(culture_name="fr-FR"), "Bonjour")


class TestLanguages:

    def test_save_and_lookup(self, service, sample_language):
        service.save_language(sample_language)

        assert service.get_language_by_id(sample_language.id).culture_name == "en-US"
        assert service.get_language_by_culture_code("en-US").id == sample_language.id
        assert service.get_language_by_culture_code("xx-XX") is None
        assert service.get_language_by_id(999) is None

    def test_get_all_languages(self, service):
        for culture in ("en-US", "da-DK", "fr-FR"):
            service.save_language(Language(culture_name=culture))

        cultures = [lang.culture_name for lang in service.get_all_languages()]

        assert sorted(cultures) == ["da-DK", "en-US", "fr-FR"]

    def test_delete_referenced_language_leaves_translations_dangling(self, service, session_factory):
        """
        Scenario: A language is deleted while a translation still uses it.
        Expected: The delete succeeds and the translation row is untouched.
        """
        language = Language(culture_name="de-DE")
        service.save_language(language)
        language_id = language.id

        item = DictionaryItem(item_key="greeting")
        item.set_translation(language, "Hallo")
        service.save_dictionary_item(item)

        service.delete_language(language)

        assert service.get_language_by_id(language_id) is None
        with session_factory() as db:
            rows = db.execute(select(DictionaryTranslation)).scalars().all()
            assert [(r.language_id, r.value) for r in rows] == [(language_id, "Hallo")]

    def test_failed_save_leaves_the_service_usable(self, service, audit_repository):
        """
        Scenario: A second language with an existing culture code is saved.
        Expected: The constraint error propagates; later calls on the same
        service still work and no audit entry is written for the failure.
        """
        service.save_language(Language(culture_name="en-US"))

        with pytest.raises(IntegrityError):
            service.save_language(Language(culture_name="en-US"))

        assert [lang.culture_name for lang in service.get_all_languages()] == ["en-US"]
        service.save_language(Language(culture_name="da-DK"))
        assert len(service.get_all_languages()) == 2
        assert len(audit_repository.list_recent()) == 2


class TestNotifications:

    def test_cancelled_save_persists_nothing_and_writes_no_audit(self, service, sample_item, audit_repository):
        seen = []

        def veto(sender, args):
            args.cancel = True

        service.events.saving.subscribe(veto)
        service.events.saved.subscribe(lambda sender, args: seen.append(sender))

        service.save_dictionary_item(sample_item)

        assert sample_item.id is None
        assert service.get_dictionary_item_by_item_key("greeting") is None
        assert audit_repository.list_recent() == []
        assert seen == []

    def test_cancelled_delete_keeps_item(self, service, sample_item, audit_repository):
        service.save_dictionary_item(sample_item)

        @service.events.deleting.subscribe
        def veto(sender, args):
            args.cancel = True

        service.delete_dictionary_item(sample_item)

        assert service.get_dictionary_item_by_id(sample_item.id) is not None
        entries = audit_repository.list_recent()
        assert [e.audit_type for e in entries] == [AuditType.SAVE]

    def test_post_handlers_see_the_entity_and_delete_id(self, service, sample_language):
        received = []
        service.events.saved.subscribe(lambda sender, args: received.append(("saved", sender.id)))
        service.events.deleting.subscribe(lambda sender, args: received.append(("deleting", args.id)))
        service.events.deleted.subscribe(lambda sender, args: received.append(("deleted", args.id)))

        service.save_language(sample_language)
        service.delete_language(sample_language)

        language_id = sample_language.id
        assert received == [
            ("saved", language_id),
            ("deleting", language_id),
            ("deleted", language_id),
        ]

    def test_handlers_are_scoped_to_their_service(self, make_service):
        first = make_service()
        second = make_service()
        calls = []
        first.events.saving.subscribe(lambda sender, args: calls.append(sender.item_key))

        second.save_dictionary_item(DictionaryItem(item_key="from-second"))
        first.save_dictionary_item(DictionaryItem(item_key="from-first"))

        assert calls == ["from-first"]

    def test_services_share_handlers_when_given_the_same_events(self, make_service):
        from localization.core.services.notifications import LocalizationEvents

        shared = LocalizationEvents()
        first = make_service(events=shared)
        second = make_service(events=shared)
        calls = []
        shared.saved.subscribe(lambda sender, args: calls.append(sender.culture_name))

        first.save_language(Language(culture_name="en-GB"))
        second.save_language(Language(culture_name="nb-NO"))

        assert calls == ["en-GB", "nb-NO"]


class TestAuditTrail:

    def test_audit_defaults_to_system_user(self, service, sample_item, audit_repository):
        service.save_dictionary_item(sample_item)

        [entry] = audit_repository.list_recent()
        assert entry.audit_type == AuditType.SAVE
        assert entry.message == "Save DictionaryItem performed by user"
        assert entry.user_id == 0
        assert entry.entity_id == sample_item.id

    def test_audit_records_explicit_user(self, service, sample_language, audit_repository):
        service.save_language(sample_language, user_id=7)
        language_id = sample_language.id
        service.delete_language(sample_language, user_id=9)

        entries = audit_repository.list_recent()
        assert [(e.audit_type, e.message, e.user_id, e.entity_id) for e in entries] == [
            (AuditType.DELETE, "Delete Language performed by user", 9, language_id),
            (AuditType.SAVE, "Save Language performed by user", 7, language_id),
        ]

    def test_configured_system_user_is_used(self, make_service, audit_repository):
        service = make_service(system_user_id=-42)
        service.save_language(Language(culture_name="sv-SE"))

        [entry] = audit_repository.list_recent()
        assert entry.user_id == -42

    def test_delete_audit_keeps_id_of_deleted_item(self, service, sample_item, audit_repository):
        service.save_dictionary_item(sample_item)
        item_id = sample_item.id

        service.delete_dictionary_item(sample_item, user_id=3)

        [entry] = audit_repository.list_recent(audit_type=AuditType.DELETE)
        assert entry.message == "Delete DictionaryItem performed by user"
        assert entry.entity_id == item_id
        assert entry.user_id == 3


class TestTypeDispatch:

    def test_generic_save_and_delete(self, service, sample_item, sample_language):
        service.save(sample_item)
        service.save(sample_language)

        assert service.get_dictionary_item_by_id(sample_item.id) is not None
        assert service.get_language_by_id(sample_language.id) is not None

        service.delete(sample_item)
        service.delete(sample_language)

        assert service.get_dictionary_item_by_item_key("greeting") is None
        assert service.get_all_languages() == []

    def test_unsupported_entity_raises(self, service):
        with pytest.raises(UnsupportedEntityError) as excinfo:
            service.save("not an entity")

        assert isinstance(excinfo.value, TypeError)
        assert isinstance(excinfo.value, DomainError)
        assert "str" in str(excinfo.value)

        with pytest.raises(TypeError):
            service.delete(object())
