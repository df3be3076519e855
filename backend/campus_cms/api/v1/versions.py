# campus_cms/api/v1/versions.py
from flask import g, jsonify
from campus_cms.application.context import EDITOR_ROLES
from campus_cms.application.cms.restore_version import restore_version as restore_version_uc
from campus_cms.application.cms.versions import get_version as get_version_uc
from campus_cms.application.cms.versions import list_versions as list_versions_uc
from campus_cms.normalizers.page import normalize_page
from campus_cms.normalizers.version import normalize_version
from campus_cms.utils.decorators import tenant_required, roles_required
from . import v1_bp


@v1_bp.route("/pages/<page_id>/versions", methods=["GET"])
@tenant_required
def list_versions(page_id):
    versions = list_versions_uc(ctx=g.tenant_context, page_id=page_id)
    return jsonify([normalize_version(v) for v in versions])


@v1_bp.route("/pages/<page_id>/versions/<int:version_number>", methods=["GET"])
@tenant_required
def get_version(page_id, version_number):
    version = get_version_uc(
        ctx=g.tenant_context,
        page_id=page_id,
        version_number=version_number,
    )
    return jsonify(normalize_version(version, include_document=True))


@v1_bp.route("/pages/<page_id>/versions/<int:version_number>/restore", methods=["POST"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def restore_version(page_id, version_number):
    page = restore_version_uc(
        ctx=g.tenant_context,
        page_id=page_id,
        version_number=version_number,
    )

    return jsonify({
        "message": f"Restored version {version_number}",
        "page": normalize_page(page),
    }), 200
