import threading

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from campus_cms.extensions import db
from campus_cms.application.cms import create_page as create_page_module
from campus_cms.application.cms import update_document as update_document_module
from campus_cms.application.cms.create_page import create_page
from campus_cms.application.cms.get_page import get_page, list_pages
from campus_cms.application.cms.restore_version import restore_version
from campus_cms.application.cms.update_document import update_document
from campus_cms.application.cms.versions import get_version, list_versions
from campus_cms.domain.exceptions import (
    Conflict,
    InvalidState,
    NotFound,
    StorageUnavailable,
)
from campus_cms.models.audit_log import AuditLog
from campus_cms.models.page_version import PageVersion
from campus_cms.utils.transaction import transactional

from helpers import hero_document


def _numbers(ctx, page_id):
    return [v.version_number for v in list_versions(ctx=ctx, page_id=page_id)]


def test_version_numbers_are_gapless(editor):
    page = create_page(ctx=editor, name="Home", slug="home")

    for i in range(4):
        update_document(ctx=editor, page_id=page.id, document=hero_document(f"Take {i}"))

    assert _numbers(editor, page.id) == [5, 4, 3, 2, 1]
    assert get_page(ctx=editor, page_id=page.id).version_counter == 5


def test_numbering_is_per_page(editor):
    home = create_page(ctx=editor, name="Home", slug="home")
    about = create_page(ctx=editor, name="About", slug="about")

    update_document(ctx=editor, page_id=home.id, document=hero_document())
    update_document(ctx=editor, page_id=home.id, document=hero_document())

    assert _numbers(editor, home.id) == [3, 2, 1]
    assert _numbers(editor, about.id) == [1]


def test_list_versions_skips_documents(editor):
    page = create_page(ctx=editor, name="Home", slug="home")
    update_document(ctx=editor, page_id=page.id, document=hero_document())

    versions = list_versions(ctx=editor, page_id=page.id)

    assert all("document" in inspect(v).unloaded for v in versions)
    assert [v.change_summary for v in versions] == ["Updated page", "Initial version"]


def test_list_versions_cross_tenant_is_not_found(editor, other_editor):
    page = create_page(ctx=editor, name="Home", slug="home")

    with pytest.raises(NotFound):
        list_versions(ctx=other_editor, page_id=page.id)


@pytest.mark.parametrize("number", [0, 2, 99])
def test_get_version_missing_number(editor, number):
    page = create_page(ctx=editor, name="Home", slug="home")

    with pytest.raises(NotFound):
        get_version(ctx=editor, page_id=page.id, version_number=number)


def test_get_version_cross_tenant_is_not_found(editor, other_editor):
    page = create_page(ctx=editor, name="Home", slug="home")

    with pytest.raises(NotFound):
        get_version(ctx=other_editor, page_id=page.id, version_number=1)


def test_restore_appends_and_keeps_history(editor):
    page = create_page(ctx=editor, name="Home", slug="home")
    update_document(ctx=editor, page_id=page.id, document=hero_document("Second"))
    update_document(ctx=editor, page_id=page.id, document=hero_document("Third"))

    before = {
        n: get_version(ctx=editor, page_id=page.id, version_number=n).document
        for n in (1, 2, 3)
    }

    restored = restore_version(ctx=editor, page_id=page.id, version_number=2)

    assert restored.document == hero_document("Second")
    assert _numbers(editor, page.id) == [4, 3, 2, 1]

    fourth = get_version(ctx=editor, page_id=page.id, version_number=4)
    assert fourth.change_summary == "Restored version 2"
    assert fourth.document == hero_document("Second")

    for n, document in before.items():
        assert get_version(ctx=editor, page_id=page.id, version_number=n).document == document


def test_restore_missing_version_changes_nothing(editor):
    page = create_page(ctx=editor, name="Home", slug="home")

    with pytest.raises(NotFound):
        restore_version(ctx=editor, page_id=page.id, version_number=7)

    assert _numbers(editor, page.id) == [1]


def test_restore_cross_tenant_is_not_found(editor, other_editor):
    page = create_page(ctx=editor, name="Home", slug="home")

    with pytest.raises(NotFound):
        restore_version(ctx=other_editor, page_id=page.id, version_number=1)


def test_edit_and_restore_walkthrough(editor):
    empty = {"components": [], "meta": {"title": "Home", "description": "", "keywords": []}}
    with_hero = hero_document("Welcome")
    with_hero_and_grid = hero_document("Welcome")
    with_hero_and_grid["components"].append(
        {"id": "grid-1", "type": "CourseGrid", "props": {"columns": 3}, "children": []}
    )

    page = create_page(ctx=editor, name="Home", slug="home")
    update_document(ctx=editor, page_id=page.id, document=with_hero, change_summary="add hero")
    update_document(ctx=editor, page_id=page.id, document=with_hero_and_grid, change_summary="add grid")
    restore_version(ctx=editor, page_id=page.id, version_number=1)

    current = get_page(ctx=editor, page_id=page.id)
    assert current.document == empty

    versions = list_versions(ctx=editor, page_id=page.id)
    assert [(v.version_number, v.change_summary) for v in versions] == [
        (4, "Restored version 1"),
        (3, "add grid"),
        (2, "add hero"),
        (1, "Initial version"),
    ]
    assert get_version(ctx=editor, page_id=page.id, version_number=4).document == empty
    assert get_version(ctx=editor, page_id=page.id, version_number=3).document == with_hero_and_grid


def test_versions_cannot_be_edited(editor):
    page = create_page(ctx=editor, name="Home", slug="home")
    version = get_version(ctx=editor, page_id=page.id, version_number=1)

    version.change_summary = "rewritten"
    with pytest.raises(InvalidState):
        db.session.flush()
    db.session.rollback()

    version = get_version(ctx=editor, page_id=page.id, version_number=1)
    db.session.delete(version)
    with pytest.raises(InvalidState):
        db.session.flush()
    db.session.rollback()

    assert get_version(ctx=editor, page_id=page.id, version_number=1).change_summary == "Initial version"


def test_duplicate_version_number_is_rejected(editor):
    page = create_page(ctx=editor, name="Home", slug="home")
    page_id = page.id

    clash = PageVersion()
    clash.page_id = page_id
    clash.version_number = 1
    clash.document = hero_document()
    clash.created_by = editor.user_id

    with pytest.raises(Conflict):
        with transactional(conflict="Version number already taken"):
            db.session.add(clash)

    assert _numbers(editor, page_id) == [1]


def test_stored_version_is_isolated_from_caller(editor):
    document = hero_document()
    page = create_page(ctx=editor, name="Home", slug="home")
    update_document(ctx=editor, page_id=page.id, document=document)

    document["components"][0]["props"]["title"] = "Mutated afterwards"
    db.session.expire_all()

    assert get_version(ctx=editor, page_id=page.id, version_number=2).document == hero_document()


def test_concurrent_updates_get_distinct_numbers(app, editor):
    page = create_page(ctx=editor, name="Home", slug="home")
    page_id = page.id

    # Release the main thread's connection before the writers start
    db.session.remove()

    writers, rounds = 4, 3
    failures = []

    def write(worker):
        with app.app_context():
            for i in range(rounds):
                document = hero_document(f"worker {worker} round {i}")
                for _ in range(20):
                    try:
                        update_document(ctx=editor, page_id=page_id, document=document)
                        break
                    except StorageUnavailable:
                        continue
                else:
                    failures.append((worker, i))
            db.session.remove()

    threads = [threading.Thread(target=write, args=(n,)) for n in range(writers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert failures == []

    total = 1 + writers * rounds
    assert _numbers(editor, page_id) == list(range(total, 0, -1))

    current = get_page(ctx=editor, page_id=page_id)
    top = get_version(ctx=editor, page_id=page_id, version_number=total)
    assert current.version_counter == total
    assert current.document == top.document


def _failing_append(**kwargs):
    # Fails after the page row was already flushed
    db.session.flush()
    raise OperationalError("INSERT INTO page_versions", {}, Exception("disk I/O error"))


def test_storage_failure_during_update_rolls_back(editor, monkeypatch):
    page = create_page(ctx=editor, name="Home", slug="home")
    page_id = page.id
    original = dict(page.document)

    monkeypatch.setattr(update_document_module, "append_version", _failing_append)

    with pytest.raises(StorageUnavailable):
        update_document(ctx=editor, page_id=page_id, document=hero_document())

    current = get_page(ctx=editor, page_id=page_id)
    assert current.document == original
    assert current.version_counter == 1
    assert _numbers(editor, page_id) == [1]
    assert AuditLog.query.filter_by(action="page.update").count() == 0


def test_storage_failure_during_restore_rolls_back(editor, monkeypatch):
    page = create_page(ctx=editor, name="Home", slug="home")
    page_id = page.id
    update_document(ctx=editor, page_id=page_id, document=hero_document())

    monkeypatch.setattr(update_document_module, "append_version", _failing_append)

    with pytest.raises(StorageUnavailable):
        restore_version(ctx=editor, page_id=page_id, version_number=1)

    assert get_page(ctx=editor, page_id=page_id).document == hero_document()
    assert _numbers(editor, page_id) == [2, 1]
    assert AuditLog.query.filter_by(action="page.restore").count() == 0


def test_storage_failure_during_create_leaves_nothing(editor, monkeypatch):
    monkeypatch.setattr(create_page_module, "append_version", _failing_append)

    with pytest.raises(StorageUnavailable):
        create_page(ctx=editor, name="Home", slug="home")

    assert list_pages(ctx=editor).total == 0
    assert db.session.query(PageVersion).count() == 0

    monkeypatch.undo()
    page = create_page(ctx=editor, name="Home", slug="home")
    assert _numbers(editor, page.id) == [1]


def test_writes_leave_no_open_transaction(editor):
    page = create_page(ctx=editor, name="Home", slug="home")
    assert not db.session.in_transaction()

    page_id = page.id
    update_document(ctx=editor, page_id=page_id, document=hero_document())
    assert not db.session.in_transaction()

    restore_version(ctx=editor, page_id=page_id, version_number=1)
    assert not db.session.in_transaction()
