# campus_cms/application/templates/catalogue.py
from typing import Any, Dict, List, Optional
from flask import current_app
from campus_cms.extensions import db
from campus_cms.application.context import TenantContext
from campus_cms.application.templates.seeder import find_template
from campus_cms.models.template import TEMPLATE_CATEGORIES, Template
from campus_cms.domain.document import coerce_document
from campus_cms.domain.exceptions import InvariantViolation
from campus_cms.utils.audit import log_action
from campus_cms.utils.transaction import storage_errors, transactional


def list_templates(*, category: Optional[str] = None) -> List[Template]:
    """Public templates, newest first, optionally filtered by category."""
    query = Template.query.filter_by(is_public=True)

    if category:
        if category not in TEMPLATE_CATEGORIES:
            raise InvariantViolation(f"Invalid template category: {category}")
        query = query.filter_by(category=category)

    with storage_errors():
        return query.order_by(Template.created_at.desc()).all()


def get_template(*, template_id: str) -> Template:
    with storage_errors():
        return find_template(template_id)


def create_template(
    *,
    ctx: TenantContext,
    name: str,
    category: str,
    document: Dict[str, Any],
    description: str = "",
    thumbnail: str = "",
    is_public: bool = True,
) -> Template:
    if not isinstance(name, str) or not name.strip():
        raise InvariantViolation("Template name is required")

    if category not in TEMPLATE_CATEGORIES:
        raise InvariantViolation(f"Invalid template category: {category}")

    template = Template()
    template.name = name.strip()
    template.category = category
    template.document = coerce_document(document)
    template.description = (description or "").strip()
    template.thumbnail = (thumbnail or "").strip()
    template.is_public = bool(is_public)
    template.created_by = ctx.user_id

    with transactional():
        db.session.add(template)
        db.session.flush()

        log_action(
            ctx=ctx,
            action="template.create",
            entity_type="template",
            entity_id=template.id,
            payload={"name": template.name, "category": template.category},
        )
        template_id = template.id

    current_app.logger.info("Template %s created by %s", template_id, ctx.user_id)
    return template
