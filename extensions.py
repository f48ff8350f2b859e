"""
Extensions Module - Centralized initialization of Flask extensions
Keeps the database handle importable by models and blueprints without
pulling in the application factory.
"""

from flask_sqlalchemy import SQLAlchemy

# Initialize extensions without binding to app
db = SQLAlchemy()

__all__ = ['db']
