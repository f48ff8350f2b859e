"""
Portfolio Web - Application Factory

This module creates the Flask application with its configuration, database,
blueprints, error handlers and CLI commands. Route handling is delegated to
blueprints.
"""

import logging
from datetime import datetime

import click
from flask import Flask
from sqlalchemy import text

from config import get_config
from extensions import db
from utils.helpers import is_valid_email
from utils.security import hash_password, get_session_email

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.pages import pages_bp
from blueprints.works import works_bp
from blueprints.projects import projects_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))

    configure_logging(app)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok'}, 200

    return app


def configure_logging(app):
    """Set the application logger level from LOG_LEVEL"""
    level = app.config.get('LOG_LEVEL', 'INFO')
    app.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("Database initialized successfully")
        except Exception as e:
            app.logger.error(f"Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(works_bp)
    app.register_blueprint(projects_bp)


def register_error_handlers(app):
    """Register generic plain-text error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        return 'Bad Request', 400

    @app.errorhandler(404)
    def page_not_found(e):
        return 'Not Found', 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return 'Internal Server Error', 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        return {
            'current_year': datetime.now().year,
            'session_email': get_session_email()
        }

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


def register_commands(app):
    """Register flask CLI commands"""

    @app.cli.command('init-db')
    def init_db():
        """Create all database tables."""
        db.create_all()
        click.secho('Database tables created.', fg='green')

    @app.cli.command('create-admin')
    @click.option('--email', prompt=True, help='Admin email address')
    @click.option('--password', prompt=True, hide_input=True,
                  confirmation_prompt=True, help='Admin password')
    def create_admin(email, password):
        """Create the admin account, or reset its password."""
        from models import Admin

        email = email.strip()
        if not is_valid_email(email):
            raise click.BadParameter(f'{email!r} is not a valid email address', param_hint='--email')

        admin = Admin.query.filter_by(email=email).first()
        if admin:
            admin.password_hash = hash_password(password)
            message = f'Password reset for {email}.'
        else:
            admin = Admin(email=email, password_hash=hash_password(password))
            db.session.add(admin)
            message = f'Admin {email} created.'
        db.session.commit()
        click.secho(message, fg='green')
