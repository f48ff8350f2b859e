import io
from datetime import date
from urllib.parse import urlparse

import pytest

from app import create_app
from extensions import db
from models import Admin, Work, Project
from utils.security import hash_password

ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'correct-horse'


@pytest.fixture()
def app(tmp_path):
    app = create_app('testing')
    app.config.update(
        WORK_IMAGE_FOLDER=str(tmp_path / 'uploads' / 'work_images'),
        PROJECT_IMAGE_FOLDER=str(tmp_path / 'uploads' / 'project_images'),
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(app):
    with app.app_context():
        account = Admin(email=ADMIN_EMAIL, password_hash=hash_password(ADMIN_PASSWORD))
        db.session.add(account)
        db.session.commit()
        return {'id': account.id, 'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD}


@pytest.fixture()
def logged_in(client, admin):
    r = client.post('/login-admin', data={'email': admin['email'], 'password': admin['password']})
    assert redirect_path(r) == '/'
    return client


def redirect_path(response):
    assert response.status_code in (301, 302, 303)
    return urlparse(response.headers['Location']).path


def image_upload(name='logo.png', content=b'\x89PNG fake image'):
    return (io.BytesIO(content), name)


def add_work(app, **fields):
    """Insert a work row directly"""
    values = {
        'name': 'Backend Engineer',
        'company': 'Acme',
        'start_date': date(2021, 1, 1),
        'end_date': date(2022, 6, 30),
        'descriptions': ['BuiltAPIs'],
        'technologies': ['Python'],
        'image_name': 'companyLogo_1.png',
    }
    values.update(fields)
    with app.app_context():
        work = Work(**values)
        db.session.add(work)
        db.session.commit()
        return work.id


def add_project(app, **fields):
    values = {
        'name': 'Portfolio',
        'description': 'Personal site',
        'technologies': ['Flask'],
        'github_link': 'https://github.com/example/portfolio',
        'live_demo_link': 'https://example.com',
        'image_name': 'projectImage_1.png',
    }
    values.update(fields)
    with app.app_context():
        project = Project(**values)
        db.session.add(project)
        db.session.commit()
        return project.id
