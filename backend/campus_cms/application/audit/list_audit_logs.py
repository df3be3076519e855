from typing import Any, List, Optional, Tuple
from flask import current_app
from campus_cms.application.context import TenantContext
from campus_cms.models.audit_log import AuditLog
from campus_cms.utils.pagination import CursorMeta, apply_cursor, paginate_cursor
from campus_cms.utils.transaction import storage_errors


def list_audit_logs(
    *,
    ctx: TenantContext,
    limit: int = 20,
    cursor: Optional[str] = None,
    action: Optional[str] = None,
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
) -> Tuple[List[Any], CursorMeta]:
    """
    Cursor-paginated audit trail of the actor's institution, newest first.
    """
    limit = min(limit, current_app.config["AUDIT_LIST_MAX_LIMIT"])

    query = AuditLog.query.filter(
        AuditLog.institution_id == ctx.institution_id
    )

    # Optional filters
    if action:
        query = query.filter(AuditLog.action == action)

    if entity_type:
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id:
        query = query.filter(AuditLog.entity_id == entity_id)

    query = apply_cursor(query, model=AuditLog, cursor=cursor)

    with storage_errors():
        return paginate_cursor(query, model=AuditLog, limit=limit)
