# campus_cms/application/cms/versions.py
from typing import List
from sqlalchemy.orm import defer
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import find_page
from campus_cms.models.page_version import PageVersion
from campus_cms.domain.exceptions import NotFound
from campus_cms.utils.transaction import storage_errors

VERSION_NOT_FOUND = "Version not found"


def list_versions(*, ctx: TenantContext, page_id: str) -> List[PageVersion]:
    """
    Version history of a page, newest first.

    Only metadata is loaded; the document column stays deferred so listing
    a long history does not pull every snapshot.
    """
    with storage_errors():
        page = find_page(ctx, page_id)

        return (
            PageVersion.query
            .options(defer(PageVersion.document))
            .filter_by(page_id=page.id)
            .order_by(PageVersion.version_number.desc())
            .all()
        )


def find_version(page_id: str, version_number: int) -> PageVersion:
    version = (
        PageVersion.query
        .filter_by(page_id=page_id, version_number=version_number)
        .first()
    )

    if not version:
        raise NotFound(VERSION_NOT_FOUND)

    return version


def get_version(*, ctx: TenantContext, page_id: str, version_number: int) -> PageVersion:
    with storage_errors():
        page = find_page(ctx, page_id)
        return find_version(page.id, version_number)
