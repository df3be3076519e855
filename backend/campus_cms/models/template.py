from campus_cms.extensions import db
from .base import BaseModel

TEMPLATE_CATEGORIES = (
    "homepage",
    "about",
    "courses",
    "departments",
    "contact",
    "blog",
    "events",
    "custom",
)


class Template(BaseModel):
    """Global page template. Not tenant scoped."""
    __tablename__ = "templates"

    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    category = db.Column(
        db.Enum(*TEMPLATE_CATEGORIES, name="template_category"),
        nullable=False,
        index=True,
    )
    thumbnail = db.Column(db.String(512), nullable=False, default="")
    document = db.Column(db.JSON, nullable=False)
    is_public = db.Column(db.Boolean, nullable=False, default=True, index=True)

    # Weak attribution pointer, no FK
    created_by = db.Column(db.String(36), nullable=True)
