# campus_cms/application/public/gate.py
"""
Read path for anonymous visitors.

The institution id arrives as an explicit request parameter here, since
there is no authenticated actor. Only committed pages with the publish
flag set are ever returned, and only their name, slug and document.
"""
from typing import Any, Dict, List
from campus_cms.extensions import db
from campus_cms.models.institution import Institution
from campus_cms.models.page import Page
from campus_cms.domain.exceptions import NotFound
from campus_cms.utils.transaction import storage_errors

PUBLIC_COLUMNS = (Page.name, Page.slug, Page.document)


def _public_row(row) -> Dict[str, Any]:
    return {
        "name": row.name,
        "slug": row.slug,
        "document": row.document,
    }


def find_institution(institution_id: str) -> Institution:
    institution = db.session.get(Institution, institution_id)

    if not institution:
        raise NotFound("Institution not found")

    return institution


def list_published(*, institution_id: str) -> List[Dict[str, Any]]:
    with storage_errors():
        find_institution(institution_id)

        rows = (
            db.session.query(*PUBLIC_COLUMNS)
            .filter(
                Page.institution_id == institution_id,
                Page.is_published.is_(True),
            )
            .order_by(Page.updated_at.desc())
            .all()
        )

    return [_public_row(row) for row in rows]


def get_published_by_slug(*, institution_id: str, slug: str) -> Dict[str, Any]:
    slug = (slug or "").strip().lower()

    with storage_errors():
        row = (
            db.session.query(*PUBLIC_COLUMNS)
            .filter(
                Page.institution_id == institution_id,
                Page.slug == slug,
                Page.is_published.is_(True),
            )
            .first()
        )

    # Unpublished and nonexistent pages are indistinguishable
    if row is None:
        raise NotFound("Page not found")

    return _public_row(row)
