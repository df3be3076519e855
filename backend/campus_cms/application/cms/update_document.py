import copy
from typing import Any, Dict, Optional
from flask import current_app
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import lock_page
from campus_cms.models.page import Page
from campus_cms.models.page_version import PageVersion
from campus_cms.domain.document import coerce_document
from campus_cms.utils.audit import log_action
from campus_cms.utils.optimistic_lock import enforce_optimistic_lock
from campus_cms.utils.transaction import transactional
from campus_cms.utils.versioning import append_version

DEFAULT_SUMMARY = "Updated page"


def replace_document(
    *,
    ctx: TenantContext,
    page: Page,
    document: Dict[str, Any],
    summary: str,
) -> PageVersion:
    """
    Swap the page's current document and append the matching version.

    Must run inside a transaction holding the page lock.
    """
    page.document = document
    page.updated_by = ctx.user_id

    return append_version(
        page=page,
        document=copy.deepcopy(document),
        summary=summary,
        author_id=ctx.user_id,
    )


def update_document(
    *,
    ctx: TenantContext,
    page_id: str,
    document: Dict[str, Any],
    change_summary: Optional[str] = None,
    if_unmodified_since: Optional[str] = None,
) -> Page:
    """
    Replace a page's document and record a new version.

    Concurrent updates of the same page serialize on the page row; the
    last one to commit becomes the current document and each gets its own
    version number.
    """
    document = coerce_document(document)
    summary = (change_summary or "").strip() or DEFAULT_SUMMARY

    with transactional(conflict="Version number already taken"):
        page = lock_page(ctx, page_id)

        enforce_optimistic_lock(page, if_unmodified_since)

        version = replace_document(
            ctx=ctx,
            page=page,
            document=document,
            summary=summary,
        )

        log_action(
            ctx=ctx,
            action="page.update",
            entity_type="page",
            entity_id=page.id,
            payload={"version": version.version_number},
        )
        version_number = version.version_number

    current_app.logger.info(
        "Page %s updated to version %s", page_id, version_number
    )
    return page
