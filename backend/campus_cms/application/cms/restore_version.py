# campus_cms/application/cms/restore_version.py
import copy
from flask import current_app
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.scoping import lock_page
from campus_cms.application.cms.update_document import replace_document
from campus_cms.application.cms.versions import find_version
from campus_cms.models.page import Page
from campus_cms.utils.audit import log_action
from campus_cms.utils.transaction import transactional


def restore_version(
    *,
    ctx: TenantContext,
    page_id: str,
    version_number: int,
) -> Page:
    """
    Roll a page back to an earlier version.

    Rolling back appends: the restored content becomes a new top-of-ledger
    version and every existing entry stays as it was.
    """

    with transactional(conflict="Version number already taken"):
        page = lock_page(ctx, page_id)
        target = find_version(page.id, version_number)

        new_version = replace_document(
            ctx=ctx,
            page=page,
            document=copy.deepcopy(target.document),
            summary=f"Restored version {version_number}",
        )

        log_action(
            ctx=ctx,
            action="page.restore",
            entity_type="page",
            entity_id=page.id,
            payload={
                "from_version": version_number,
                "to_version": new_version.version_number,
            },
        )
        restored_as = new_version.version_number

    current_app.logger.info(
        "Page %s restored version %s as %s",
        page_id,
        version_number,
        restored_as,
    )
    return page
