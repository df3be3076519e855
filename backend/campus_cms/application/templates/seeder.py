# campus_cms/application/templates/seeder.py
import copy
from typing import Any, Dict
from campus_cms.extensions import db
from campus_cms.application.context import TenantContext
from campus_cms.application.cms.create_page import create_page
from campus_cms.models.page import Page
from campus_cms.models.template import Template
from campus_cms.domain.exceptions import NotFound
from campus_cms.utils.transaction import storage_errors


def find_template(template_id: str) -> Template:
    template = db.session.get(Template, template_id)

    if not template:
        raise NotFound("Template not found")

    return template


def apply_template(*, template_id: str) -> Dict[str, Any]:
    """Return a copy of the template's document, untouched."""
    with storage_errors():
        template = find_template(template_id)
        return copy.deepcopy(template.document)


def create_page_from_template(
    *,
    ctx: TenantContext,
    template_id: str,
    name: str,
    slug: str,
) -> Page:
    document = apply_template(template_id=template_id)
    return create_page(ctx=ctx, name=name, slug=slug, document=document)
