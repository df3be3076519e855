from campus_cms.extensions import db
from .base import BaseModel
from .institution_mixin import InstitutionMixin

class Page(BaseModel, InstitutionMixin):
    __tablename__ = 'pages'

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    document = db.Column(db.JSON, nullable=False)
    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)

    # Informational only, never used for concurrency control
    semantic_version = db.Column(db.String(32), nullable=False, default="1.0.0")

    # Weak attribution pointer, no FK
    updated_by = db.Column(db.String(36), nullable=False)

    # Highest version number handed out for this page. Only ever changed by
    # an atomic in-database increment, see utils.versioning.
    version_counter = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.UniqueConstraint("institution_id", "slug", name="uq_page_slug_per_institution"),
        db.Index("idx_page_institution_published", "institution_id", "is_published"),
    )
