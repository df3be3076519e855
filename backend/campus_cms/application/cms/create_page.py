import copy
from typing import Any, Dict, Optional
from flask import current_app
from campus_cms.extensions import db
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import DUPLICATE_SLUG, assert_slug_available
from campus_cms.models.page import Page
from campus_cms.domain.document import coerce_document, default_document
from campus_cms.domain.invariants.page import (
    assert_page,
    assert_page_name,
    assert_slug,
    normalize_slug,
)
from campus_cms.utils.audit import log_action
from campus_cms.utils.transaction import transactional
from campus_cms.utils.versioning import append_version

INITIAL_SUMMARY = "Initial version"


def insert_page(
    *,
    ctx: TenantContext,
    name: str,
    slug: str,
    document: Dict[str, Any],
    summary: str,
) -> Page:
    """
    Stage a new draft page and its version 1 in the open transaction.

    Callers own the transaction and have already validated name, slug and
    document.
    """
    assert_slug_available(ctx, slug)

    page = Page()
    page.institution_id = ctx.institution_id
    page.name = name
    page.slug = slug
    page.document = document
    page.is_published = False
    page.updated_by = ctx.user_id
    page.version_counter = 0

    db.session.add(page)
    db.session.flush()  # ensures page.id is available

    append_version(
        page=page,
        document=copy.deepcopy(document),
        summary=summary,
        author_id=ctx.user_id,
    )

    # 🔒 Domain invariants (single source of truth)
    assert_page(page)

    return page


def create_page(
    *,
    ctx: TenantContext,
    name: str,
    slug: str,
    document: Optional[Dict[str, Any]] = None,
) -> Page:
    """
    Create a new CMS page in DRAFT state with its initial version.

    Edge cases handled:
    - Missing or malformed name / slug
    - Duplicate slug within the institution (pre-check + unique constraint)
    - Malformed document envelope
    """
    assert_page_name(name)
    name = name.strip()

    slug = normalize_slug(slug)
    assert_slug(slug)

    if document is None:
        document = default_document(name)
    else:
        document = coerce_document(document)

    with transactional(conflict=DUPLICATE_SLUG):
        page = insert_page(
            ctx=ctx,
            name=name,
            slug=slug,
            document=document,
            summary=INITIAL_SUMMARY,
        )

        log_action(
            ctx=ctx,
            action="page.create",
            entity_type="page",
            entity_id=page.id,
            payload={
                "name": page.name,
                "slug": page.slug,
                "version": 1,
            },
        )
        page_id = page.id

    current_app.logger.info(
        "Page %s created in institution %s", page_id, ctx.institution_id
    )
    return page
