from typing import Optional
from flask import current_app
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import find_page, page_query
from campus_cms.models.page import Page
from campus_cms.utils.transaction import storage_errors


def get_page(*, ctx: TenantContext, page_id: str) -> Page:
    with storage_errors():
        return find_page(ctx, page_id)


def list_pages(
    *,
    ctx: TenantContext,
    published: Optional[bool] = None,
    page: int = 1,
    per_page: int = 20,
):
    """
    List the institution's pages, most recently updated first.

    Returns a Flask-SQLAlchemy Pagination object.
    """
    per_page = max(1, min(per_page, current_app.config["PAGE_LIST_MAX_PER_PAGE"]))
    page = max(1, page)

    query = page_query(ctx)
    if published is not None:
        query = query.filter_by(is_published=published)

    with storage_errors():
        return (
            query
            .order_by(Page.updated_at.desc(), Page.id.desc())
            .paginate(page=page, per_page=per_page, error_out=False)
        )
