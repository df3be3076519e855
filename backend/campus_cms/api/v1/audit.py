from flask import request, jsonify, g
from campus_cms.application.audit.list_audit_logs import list_audit_logs as list_audit_logs_uc
from campus_cms.application.context import Role
from campus_cms.normalizers.audit import normalize_audit_log
from campus_cms.normalizers.pagination import normalize_pagination
from campus_cms.utils.decorators import tenant_required, roles_required
from . import v1_bp


@v1_bp.route("/audit", methods=["GET"])
@tenant_required
@roles_required(Role.SUPER_ADMIN)
def list_audit_logs():
    logs, meta = list_audit_logs_uc(
        ctx=g.tenant_context,
        limit=request.args.get("limit", 20, type=int),
        cursor=request.args.get("cursor"),
        action=request.args.get("action"),
        entity_type=request.args.get("entity_type"),
        entity_id=request.args.get("entity_id"),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
