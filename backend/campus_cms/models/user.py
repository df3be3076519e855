from campus_cms.extensions import db
from .base import BaseModel
from .institution_mixin import InstitutionMixin

class User(BaseModel, InstitutionMixin):
    __tablename__ = 'users'

    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)

    # super-admin | editor | viewer
    role = db.Column(db.String(50), nullable=False, default='editor')
    is_active = db.Column(db.Boolean, default=True)
    last_login = db.Column(db.DateTime(timezone=True), nullable=True)
