# campus_cms/application/cms/visibility.py
from flask import current_app
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import lock_page
from campus_cms.models.page import Page
from campus_cms.domain.lifecycle.page import (
    DRAFT,
    PUBLISHED,
    assert_page_transition,
    visibility_of,
)
from campus_cms.utils.audit import log_action
from campus_cms.utils.transaction import transactional


def _change_visibility(*, ctx: TenantContext, page_id: str, to_status: str) -> Page:
    """
    Move a page between draft and published.

    Visibility is not content: no version is appended. Re-applying the
    current state succeeds without writing anything.
    """
    with transactional():
        page = lock_page(ctx, page_id)

        changed = assert_page_transition(
            from_status=visibility_of(page.is_published),
            to_status=to_status,
        )

        if changed:
            page.is_published = to_status == PUBLISHED
            page.updated_by = ctx.user_id

            log_action(
                ctx=ctx,
                action="page.publish" if to_status == PUBLISHED else "page.unpublish",
                entity_type="page",
                entity_id=page.id,
                payload={"slug": page.slug},
            )

    if changed:
        current_app.logger.info("Page %s is now %s", page_id, to_status)

    return page


def publish_page(*, ctx: TenantContext, page_id: str) -> Page:
    return _change_visibility(ctx=ctx, page_id=page_id, to_status=PUBLISHED)


def unpublish_page(*, ctx: TenantContext, page_id: str) -> Page:
    return _change_visibility(ctx=ctx, page_id=page_id, to_status=DRAFT)
