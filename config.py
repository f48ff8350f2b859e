import os
from datetime import timedelta

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def build_database_url():
    """Assemble the database URL from DATABASE_URL or the DB_* variables"""
    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        db_user = os.environ.get('DB_USER')
        db_pass = os.environ.get('DB_PASSWORD')
        db_host = os.environ.get('DB_HOST')
        db_port = os.environ.get('DB_PORT')
        db_name = os.environ.get('DB_NAME')
        if all([db_user, db_host, db_name]):
            database_url = URL.create(
                'postgresql',
                username=db_user,
                password=db_pass,
                host=db_host,
                port=int(db_port) if db_port else None,
                database=db_name,
            ).render_as_string(hide_password=False)

    if database_url and database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    return database_url or 'sqlite:///' + os.path.join(BASE_DIR, 'portfolio.db')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=1)
    SESSION_REFRESH_EACH_REQUEST = False
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database Settings
    SQLALCHEMY_DATABASE_URI = build_database_url()
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': int(os.environ.get('DB_MAX', 10)),
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload Settings
    UPLOAD_FOLDER = os.path.join(BASE_DIR, 'static', 'uploads')
    WORK_IMAGE_FOLDER = os.path.join(UPLOAD_FOLDER, 'work_images')
    PROJECT_IMAGE_FOLDER = os.path.join(UPLOAD_FOLDER, 'project_images')

    # Public page
    PROJECT_STATUS = os.environ.get('PROJECT_STATUS', '').lower() in ('1', 'true', 'yes')
    PORTFOLIO_PROFILE = {
        'title': 'Muhammad Rayhan - Portfolio Web',
        'headline': "Hello, I'm Rayhan",
        'role': 'Android Developer & Full-Stack Developer',
        'summary': (
            "I'm an Android and Full-Stack Developer with a strong passion for "
            "programming and software engineering. I enjoy turning ideas into "
            "functional, user-friendly digital products, whether by building "
            "intuitive mobile apps or developing robust web solutions that focus "
            "on both performance and user experience."
        ),
        'location': 'Tasikmalaya, West Java, Indonesia',
        'imagePath': 'images/img_github_profile.svg',
    }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite runs on a StaticPool, which rejects pool_size.
    SQLALCHEMY_ENGINE_OPTIONS = {}


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
