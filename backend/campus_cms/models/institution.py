import copy
from campus_cms.extensions import db
from .base import BaseModel

DEFAULT_SETTINGS = {
    "logo": None,
    "colors": {
        "primary": "#3B82F6",
        "secondary": "#10B981",
        "accent": "#F59E0B",
    },
    "fonts": {
        "heading": "Inter",
        "body": "Inter",
    },
}


class Institution(BaseModel):
    """
    Tenant root. Created and retired outside the CMS core; the core only
    reads it to resolve anonymous public requests.
    """
    __tablename__ = "institutions"

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    subdomain = db.Column(db.String(100), unique=True, nullable=False, index=True)
    domain = db.Column(db.String(255), nullable=True)

    # Branding: logo, colors, fonts
    settings = db.Column(db.JSON, default=lambda: copy.deepcopy(DEFAULT_SETTINGS))
