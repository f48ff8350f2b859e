import os

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import Work
from conftest import redirect_path, image_upload, add_work

WORK_FORM = {
    'workName': 'Android Developer',
    'company': 'Acme Corp',
    'startDate': '2021-03-01',
    'endDate': '2023-08-31',
    'description': 'Built apps, Mentored juniors, Built apps',
    'techStack': 'Kotlin, Jetpack Compose,',
}


def post_work(client, **overrides):
    data = dict(WORK_FORM)
    data['companyLogo'] = image_upload()
    data.update(overrides)
    return client.post('/add-new-work', data=data, content_type='multipart/form-data')


def test_add_page_redirects_anonymous(client):
    r = client.get('/add-work-experience')
    assert redirect_path(r) == '/'


def test_add_page_renders_for_admin(logged_in):
    r = logged_in.get('/add-work-experience')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Add work detail' in body
    assert 'name="companyLogo"' in body


def test_create_work_stores_row_and_logo(app, logged_in):
    r = post_work(logged_in)
    assert redirect_path(r) == '/'

    with app.app_context():
        work = Work.query.one()
        assert work.name == 'Android Developer'
        assert work.company == 'Acme Corp'
        assert work.start_date.isoformat() == '2021-03-01'
        assert work.end_date.isoformat() == '2023-08-31'
        assert work.descriptions == ['Builtapps', 'Mentoredjuniors', 'Builtapps']
        assert work.technologies == ['Kotlin', 'JetpackCompose', '']
        assert work.image_name.startswith('companyLogo_')
        assert work.image_name.endswith('.png')
        image_name = work.image_name

    assert os.path.exists(os.path.join(app.config['WORK_IMAGE_FOLDER'], image_name))
    body = logged_in.get('/').get_data(as_text=True)
    assert 'Mar 2021 - Aug 2023' in body


def test_create_work_requires_session(app, client):
    r = post_work(client)
    assert redirect_path(r) == '/'

    with app.app_context():
        assert Work.query.count() == 0
    assert not os.path.exists(app.config['WORK_IMAGE_FOLDER'])


def test_create_work_without_logo_is_bad_request(app, logged_in):
    data = dict(WORK_FORM)
    r = logged_in.post('/add-new-work', data=data, content_type='multipart/form-data')
    assert r.status_code == 400
    assert r.get_data(as_text=True) == 'Bad Request'


def test_create_work_with_bad_date_is_bad_request(app, logged_in):
    r = post_work(logged_in, endDate='last year')
    assert r.status_code == 400
    with app.app_context():
        assert Work.query.count() == 0
    assert not os.path.exists(app.config['WORK_IMAGE_FOLDER'])


def test_failed_insert_removes_uploaded_logo(app, logged_in, monkeypatch):
    def failing_commit(self):
        raise SQLAlchemyError('insert failed')

    monkeypatch.setattr('flask_sqlalchemy.session.Session.commit', failing_commit)
    r = post_work(logged_in)
    monkeypatch.undo()

    assert r.status_code == 400
    assert os.listdir(app.config['WORK_IMAGE_FOLDER']) == []
    with app.app_context():
        assert Work.query.count() == 0


def test_delete_work_removes_row_and_logo(app, logged_in):
    post_work(logged_in)
    with app.app_context():
        work = Work.query.one()
        work_id, image_name = work.id, work.image_name
    image_path = os.path.join(app.config['WORK_IMAGE_FOLDER'], image_name)
    assert os.path.exists(image_path)

    r = logged_in.post(f'/delete-work/{work_id}')
    assert redirect_path(r) == '/'

    with app.app_context():
        assert db.session.get(Work, work_id) is None
    assert not os.path.exists(image_path)


def test_delete_work_with_missing_logo_still_deletes_row(app, logged_in):
    work_id = add_work(app, image_name='companyLogo_gone.png')

    r = logged_in.post(f'/delete-work/{work_id}')
    assert redirect_path(r) == '/'
    with app.app_context():
        assert db.session.get(Work, work_id) is None


def test_delete_unknown_work_is_bad_request(logged_in):
    r = logged_in.post('/delete-work/999')
    assert r.status_code == 400
    assert logged_in.get('/').status_code == 200


def test_delete_work_with_non_numeric_id_is_bad_request(logged_in):
    r = logged_in.post('/delete-work/abc')
    assert r.status_code == 400


def test_delete_work_requires_session(app, client):
    work_id = add_work(app)
    r = client.post(f'/delete-work/{work_id}')
    assert redirect_path(r) == '/'
    with app.app_context():
        assert db.session.get(Work, work_id) is not None
