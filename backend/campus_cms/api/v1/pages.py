# campus_cms/api/v1/pages.py
from flask import g, request, jsonify
from campus_cms.application.context import EDITOR_ROLES
from campus_cms.application.cms.create_page import create_page as create_page_uc
from campus_cms.application.cms.delete_page import delete_page as delete_page_uc
from campus_cms.application.cms.duplicate_page import duplicate_page as duplicate_page_uc
from campus_cms.application.cms.get_page import get_page as get_page_uc, list_pages as list_pages_uc
from campus_cms.application.cms.update_document import update_document
from campus_cms.application.cms.visibility import publish_page as publish_page_uc
from campus_cms.application.cms.visibility import unpublish_page as unpublish_page_uc
from campus_cms.application.templates.seeder import create_page_from_template
from campus_cms.domain.exceptions import InvariantViolation
from campus_cms.normalizers.page import normalize_page
from campus_cms.normalizers.pagination import normalize_pagination
from campus_cms.utils.decorators import tenant_required, roles_required
from . import v1_bp


def _parse_published_filter(raw):
    if raw is None:
        return None
    if raw.lower() in ("true", "1"):
        return True
    if raw.lower() in ("false", "0"):
        return False
    raise InvariantViolation("published must be true or false")


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["GET"])
@tenant_required
def list_pages():
    page_num = request.args.get("page", 1, type=int)
    per_page = request.args.get("per_page", 20, type=int)

    pagination = list_pages_uc(
        ctx=g.tenant_context,
        published=_parse_published_filter(request.args.get("published")),
        page=page_num,
        per_page=per_page,
    )

    return jsonify(
        normalize_pagination(
            pagination.items,
            lambda p: normalize_page(p, include_document=False),
            page=pagination.page,
            per_page=pagination.per_page,
            total=pagination.total,
        )
    )


@v1_bp.route("/pages", methods=["POST"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def create_page():
    data = request.get_json(silent=True) or {}

    if data.get("templateId"):
        page = create_page_from_template(
            ctx=g.tenant_context,
            template_id=data["templateId"],
            name=data.get("name"),
            slug=data.get("slug"),
        )
    else:
        page = create_page_uc(
            ctx=g.tenant_context,
            name=data.get("name"),
            slug=data.get("slug"),
            document=data.get("document"),
        )

    return jsonify(normalize_page(page)), 201


@v1_bp.route("/pages/<page_id>", methods=["GET"])
@tenant_required
def get_page(page_id):
    page = get_page_uc(ctx=g.tenant_context, page_id=page_id)
    return jsonify(normalize_page(page))


@v1_bp.route("/pages/<page_id>", methods=["PUT"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def update_page(page_id):
    data = request.get_json(silent=True) or {}

    if "document" not in data:
        raise InvariantViolation("document is required")

    page = update_document(
        ctx=g.tenant_context,
        page_id=page_id,
        document=data["document"],
        change_summary=data.get("changeSummary"),
        if_unmodified_since=request.headers.get("If-Unmodified-Since"),
    )

    return jsonify(normalize_page(page)), 200


@v1_bp.route("/pages/<page_id>/publish", methods=["POST"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def publish_page(page_id):
    page = publish_page_uc(ctx=g.tenant_context, page_id=page_id)
    return jsonify(normalize_page(page, include_document=False)), 200


@v1_bp.route("/pages/<page_id>/unpublish", methods=["POST"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def unpublish_page(page_id):
    page = unpublish_page_uc(ctx=g.tenant_context, page_id=page_id)
    return jsonify(normalize_page(page, include_document=False)), 200


@v1_bp.route("/pages/<page_id>/duplicate", methods=["POST"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def duplicate_page(page_id):
    data = request.get_json(silent=True) or {}

    page = duplicate_page_uc(
        ctx=g.tenant_context,
        source_page_id=page_id,
        new_name=data.get("name"),
        new_slug=data.get("slug"),
    )

    return jsonify(normalize_page(page)), 201


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
@tenant_required
@roles_required(*EDITOR_ROLES)
def delete_page(page_id):
    delete_page_uc(ctx=g.tenant_context, page_id=page_id)
    return jsonify({"message": "Page deleted successfully"}), 200
