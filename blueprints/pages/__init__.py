"""
Pages Blueprint - Public pages
Handles: Home page listing work experience and projects
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
