"""
Security Module - Password hashing and admin session helpers
"""

import secrets
from flask import request, session, g, current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash, check_password_hash
from extensions import db
from models import Admin


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


def hash_password(password):
    """Hash a plaintext password with a random salt"""
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


def start_admin_session(admin):
    """
    Issue a new session token for the admin and store it with the admin's
    id and email in a fresh session. Any cookie issued earlier stops
    authenticating.
    """
    token = secrets.token_hex(32)
    admin.session_token = token
    db.session.commit()

    session.clear()
    session.permanent = True
    session['admin_id'] = admin.id
    session['email'] = admin.email
    session['sid'] = token
    g.session_email = admin.email


def end_admin_session():
    """Revoke the current session token and clear the cookie session"""
    admin_id = session.get('admin_id')
    session.clear()
    g.session_email = ''

    admin = db.session.get(Admin, admin_id) if admin_id is not None else None
    if admin is not None:
        admin.session_token = None
        db.session.commit()


def get_session_email():
    """Email of the authenticated admin, or '' when anonymous or revoked"""
    if 'session_email' in g:
        return g.session_email

    email = ''
    admin_id = session.get('admin_id')
    token = session.get('sid')
    if admin_id is not None and token:
        try:
            admin = db.session.get(Admin, admin_id)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Error checking session for admin {admin_id}: {str(e)}")
            admin = None
        if admin is not None and admin.session_token and secrets.compare_digest(admin.session_token, token):
            email = admin.email

    g.session_email = email
    return email


__all__ = [
    'get_client_ip',
    'hash_password',
    'verify_password',
    'start_admin_session',
    'end_admin_session',
    'get_session_email',
]
