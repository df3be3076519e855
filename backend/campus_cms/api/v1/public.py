# campus_cms/api/v1/public.py
from flask import g, jsonify
from campus_cms.application.public.gate import get_published_by_slug, list_published
from campus_cms.middleware.tenant_middleware import public_tenant_middleware
from . import public_bp

public_tenant_middleware(public_bp)


@public_bp.route("/pages", methods=["GET"])
def list_published_pages():
    pages = list_published(institution_id=g.public_institution.id)
    return jsonify(pages)


@public_bp.route("/pages/<slug>", methods=["GET"])
def get_published_page(slug):
    page = get_published_by_slug(institution_id=g.public_institution.id, slug=slug)
    return jsonify(page)
