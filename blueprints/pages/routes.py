"""
Pages Routes - Public home page
"""

from flask import render_template, current_app, abort
from sqlalchemy.exc import SQLAlchemyError
from utils.helpers import format_month_year, get_availability
from utils.security import get_session_email
from models import Work, Project
from . import pages_bp


def load_works():
    """All work entries, latest end date first, with display dates"""
    works = []
    for work in Work.query.order_by(Work.end_date.desc()).all():
        item = work.to_dict()
        item['start_date'] = format_month_year(work.start_date)
        item['end_date'] = format_month_year(work.end_date)
        works.append(item)
    return works


def load_projects():
    """All projects ordered by name"""
    return [project.to_dict() for project in Project.query.order_by(Project.name.asc()).all()]


@pages_bp.route('/')
def index():
    """Home page - profile, work experience and projects"""
    try:
        works = load_works()
        projects = load_projects()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading home page data: {str(e)}")
        abort(500)

    message, status_icon_flag = get_availability()

    data = dict(current_app.config['PORTFOLIO_PROFILE'])
    data.update({
        'email': get_session_email(),
        'message': message,
        'statusIconFlag': status_icon_flag,
        'works': works,
        'projects': projects
    })
    return render_template('index.html', **data)
