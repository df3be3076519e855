# campus_cms/application/cms/scoping.py
from sqlalchemy import select
from campus_cms.extensions import db
from campus_cms.application.context import TenantContext
from campus_cms.domain.exceptions import Conflict, NotFound
from campus_cms.models.page import Page

PAGE_NOT_FOUND = "Page not found"
DUPLICATE_SLUG = "A page with this slug already exists"


def page_query(ctx: TenantContext):
    """Base query for pages visible to the actor's institution."""
    return Page.query.filter_by(institution_id=ctx.institution_id)


def find_page(ctx: TenantContext, page_id: str) -> Page:
    page = page_query(ctx).filter_by(id=page_id).first()

    # Same error whether the page is missing or belongs to another tenant
    if not page:
        raise NotFound(PAGE_NOT_FOUND)

    return page


def lock_page(ctx: TenantContext, page_id: str) -> Page:
    """
    Fetch a page with a row-level lock for the rest of the transaction.

    Serializes every mutation of one page; a caller that loses a race
    against a delete gets NotFound once the lock is granted.
    """
    page = (
        db.session.execute(
            select(Page)
            .where(Page.id == page_id, Page.institution_id == ctx.institution_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        .scalar_one_or_none()
    )

    if not page:
        raise NotFound(PAGE_NOT_FOUND)

    return page


def assert_slug_available(ctx: TenantContext, slug: str) -> None:
    exists = (
        db.session.query(Page.id)
        .filter_by(institution_id=ctx.institution_id, slug=slug)
        .first()
    )

    if exists:
        raise Conflict(DUPLICATE_SLUG)
