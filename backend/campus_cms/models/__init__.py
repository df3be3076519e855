# Import every model so metadata (create_all, Flask-Migrate) sees all tables.
from .institution import Institution
from .user import User
from .page import Page
from .page_version import PageVersion
from .template import Template
from .audit_log import AuditLog

__all__ = [
    "Institution",
    "User",
    "Page",
    "PageVersion",
    "Template",
    "AuditLog",
]
