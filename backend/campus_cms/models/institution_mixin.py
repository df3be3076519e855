from campus_cms.extensions import db

class InstitutionMixin:
    institution_id = db.Column(
        db.String(36),
        db.ForeignKey('institutions.id'),
        nullable=False,
        index=True
    )
