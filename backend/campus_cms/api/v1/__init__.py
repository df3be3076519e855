from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Anonymous read path, mounted separately so its tenant hook only runs there
public_bp = Blueprint("public", __name__)

# Import route modules so they register with their blueprints
from . import health
from . import pages
from . import versions
from . import templates
from . import audit
from . import public
