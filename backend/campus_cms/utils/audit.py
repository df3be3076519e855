from campus_cms.extensions import db
from campus_cms.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    ctx,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """
    Stage an audit entry in the current transaction.

    The entry commits or rolls back together with the change it records.
    """
    log = AuditLog()

    log.actor_id = ctx.user_id
    log.institution_id = ctx.institution_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
