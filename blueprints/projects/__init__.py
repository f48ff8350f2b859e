"""
Projects Blueprint - Project management
Handles: Add form, creation with project image upload, deletion
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='')

from . import routes
