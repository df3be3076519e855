from sqlalchemy import event
from campus_cms.extensions import db
from campus_cms.domain.exceptions import InvalidState
from .base import BaseModel

class PageVersion(BaseModel):
    __tablename__ = "page_versions"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False
    )

    version_number = db.Column(db.Integer, nullable=False)
    document = db.Column(db.JSON, nullable=False)
    change_summary = db.Column(db.String(500), nullable=False, default="")

    # Weak attribution pointer, no FK
    created_by = db.Column(db.String(36), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("page_id", "version_number", name="uq_page_version_number"),
        db.Index("idx_page_version_page", "page_id"),
    )


@event.listens_for(PageVersion, 'before_update')
@event.listens_for(PageVersion, 'before_delete')
def prevent_version_mutation(mapper, connection, target):
    raise InvalidState("Page versions are immutable")
