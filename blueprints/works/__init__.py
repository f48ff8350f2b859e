"""
Works Blueprint - Work experience management
Handles: Add form, creation with company logo upload, deletion
"""

from flask import Blueprint

works_bp = Blueprint('works', __name__, url_prefix='')

from . import routes
