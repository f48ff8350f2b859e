"""
Auth Blueprint - Admin authentication
Handles: Login page, credential check, Logout
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='')

from . import routes
