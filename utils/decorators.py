"""
Decorators Module - Authentication decorators
"""

from functools import wraps
from flask import redirect, url_for, current_app, request
from .security import get_session_email


def login_required(f):
    """Decorator to require an authenticated admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not get_session_email():
            current_app.logger.info(f"Anonymous request to {request.path} redirected home")
            return redirect(url_for('pages.index'))
        return f(*args, **kwargs)
    return decorated_function
