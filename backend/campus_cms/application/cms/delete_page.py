from flask import current_app
from campus_cms.extensions import db
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import lock_page
from campus_cms.models.page_version import PageVersion
from campus_cms.utils.audit import log_action
from campus_cms.utils.transaction import transactional


def delete_page(
    *,
    ctx: TenantContext,
    page_id: str,
) -> None:
    """
    Hard-delete a page and its whole version ledger.

    Notes:
    - Versions → Page (bottom-up), one transaction
    - A concurrent writer blocked on the page lock sees NotFound afterwards
    """

    with transactional():
        page = lock_page(ctx, page_id)
        slug = page.slug

        # Bulk delete bypasses the per-row immutability guard on versions
        deleted_versions = (
            PageVersion.query
            .filter_by(page_id=page.id)
            .delete(synchronize_session=False)
        )

        db.session.delete(page)

        log_action(
            ctx=ctx,
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            payload={
                "slug": slug,
                "versions_deleted": deleted_versions,
            },
        )

    current_app.logger.info(
        "Page %s deleted with %s versions", page_id, deleted_versions
    )
