"""
Auth Routes - Admin login and logout
"""

from flask import render_template, redirect, url_for, request, current_app, abort
from sqlalchemy.exc import SQLAlchemyError
from utils.helpers import is_valid_email
from utils.security import get_client_ip, verify_password, start_admin_session, end_admin_session, get_session_email
from models import Admin
from extensions import db
from . import auth_bp


@auth_bp.route('/login')
def login():
    """Admin login form"""
    if get_session_email():
        return redirect(url_for('pages.index'))

    data = {
        'title': 'Login',
        'headline': 'Login to your account',
        'imagePath': 'images/img_profile_illustration.svg'
    }
    return render_template('login.html', **data)


@auth_bp.route('/login-admin', methods=['POST'])
def login_admin():
    """Check submitted credentials and start an admin session"""
    email = request.form.get('email', '')
    password = request.form.get('password', '')
    client_ip = get_client_ip()

    if not is_valid_email(email):
        current_app.logger.warning(f"Rejected login with malformed email from {client_ip}")
        return redirect(url_for('auth.login'))

    try:
        admin = Admin.query.filter_by(email=email).first()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching admin {email}: {str(e)}")
        abort(400)

    if not admin or not verify_password(password, admin.password_hash):
        current_app.logger.warning(f"Failed login for {email} from {client_ip}")
        return redirect(url_for('auth.login'))

    try:
        start_admin_session(admin)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error starting session for {email}: {str(e)}")
        abort(400)

    current_app.logger.info(f"Admin {admin.email} logged in from {client_ip}")
    return redirect(url_for('pages.index'))


@auth_bp.route('/logout-admin')
def logout_admin():
    """End the admin session"""
    email = get_session_email()
    if not email:
        return redirect(url_for('pages.index'))

    try:
        end_admin_session()
        current_app.logger.info(f"Admin {email} logged out")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error destroying session for {email}: {str(e)}")

    return redirect(url_for('pages.index'))
