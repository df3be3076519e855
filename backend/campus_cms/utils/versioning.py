from typing import Any, Dict
from sqlalchemy import update
from campus_cms.extensions import db
from campus_cms.domain.exceptions import NotFound
from campus_cms.models.page import Page
from campus_cms.models.page_version import PageVersion


def allocate_version_number(page_id: str) -> int:
    """
    Hand out the next version number for a page.

    Single UPDATE ... RETURNING against the page's counter column, so the
    read of the current maximum and the increment cannot be split by a
    concurrent writer. Must run inside the transaction that inserts the
    version; a rollback returns the number.
    """
    allocated = db.session.execute(
        update(Page.__table__)
        .where(Page.__table__.c.id == page_id)
        .values(version_counter=Page.__table__.c.version_counter + 1)
        .returning(Page.__table__.c.version_counter)
    ).scalar_one_or_none()

    if allocated is None:
        # Row deleted by a transaction that committed first
        raise NotFound("Page not found")

    return allocated


def append_version(
    *,
    page: Page,
    document: Dict[str, Any],
    summary: str,
    author_id: str,
) -> PageVersion:
    version = PageVersion()
    version.page_id = page.id
    version.version_number = allocate_version_number(page.id)
    version.document = document
    version.change_summary = summary
    version.created_by = author_id

    db.session.add(version)
    db.session.flush()

    # Keep the in-session object in step with the counter we just bumped
    # without overwriting it on the next flush.
    db.session.expire(page, ["version_counter"])

    return version
