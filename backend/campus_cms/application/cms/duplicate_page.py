import copy
from flask import current_app
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.create_page import insert_page
from campus_cms.application.cms.scoping import DUPLICATE_SLUG, find_page
from campus_cms.models.page import Page
from campus_cms.domain.invariants.page import assert_page_name, assert_slug, normalize_slug
from campus_cms.utils.audit import log_action
from campus_cms.utils.transaction import transactional


def duplicate_page(
    *,
    ctx: TenantContext,
    source_page_id: str,
    new_name: str,
    new_slug: str,
) -> Page:
    """
    Copy a page's current document into a new draft page.

    The copy starts its own ledger at version 1; the source's history is
    not carried over.
    """
    assert_page_name(new_name)
    new_name = new_name.strip()

    new_slug = normalize_slug(new_slug)
    assert_slug(new_slug)

    with transactional(conflict=DUPLICATE_SLUG):
        source = find_page(ctx, source_page_id)

        page = insert_page(
            ctx=ctx,
            name=new_name,
            slug=new_slug,
            document=copy.deepcopy(source.document),
            summary=f"Duplicated from {source.name}",
        )

        log_action(
            ctx=ctx,
            action="page.duplicate",
            entity_type="page",
            entity_id=page.id,
            payload={
                "source_page_id": source.id,
                "slug": page.slug,
            },
        )
        copy_id = page.id

    current_app.logger.info("Page %s duplicated as %s", source_page_id, copy_id)
    return page
