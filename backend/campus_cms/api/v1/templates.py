# campus_cms/api/v1/templates.py
from flask import g, request, jsonify
from campus_cms.application.context import EDITOR_ROLES, Role
from campus_cms.application.templates.catalogue import create_template as create_template_uc
from campus_cms.application.templates.catalogue import get_template as get_template_uc
from campus_cms.application.templates.catalogue import list_templates as list_templates_uc
from campus_cms.application.templates.seeder import apply_template as apply_template_uc
from campus_cms.normalizers.template import normalize_template
from campus_cms.utils.decorators import tenant_required, roles_required
from . import v1_bp


@v1_bp.route("/templates", methods=["GET"])
def list_templates():
    templates = list_templates_uc(category=request.args.get("category"))
    return jsonify([normalize_template(t, include_document=False) for t in templates])


@v1_bp.route("/templates/<template_id>", methods=["GET"])
def get_template(template_id):
    template = get_template_uc(template_id=template_id)
    return jsonify(normalize_template(template))


@v1_bp.route("/templates", methods=["POST"])
@tenant_required
@roles_required(Role.SUPER_ADMIN)
def create_template():
    data = request.get_json(silent=True) or {}

    template = create_template_uc(
        ctx=g.tenant_context,
        name=data.get("name"),
        category=data.get("category"),
        document=data.get("document"),
        description=data.get("description", ""),
        thumbnail=data.get("thumbnail", ""),
        is_public=data.get("isPublic", True),
    )

    return jsonify(normalize_template(template)), 201


@v1_bp.route("/templates/<template_id>/apply", methods=["POST"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def apply_template(template_id):
    document = apply_template_uc(template_id=template_id)
    return jsonify({"document": document}), 200
