"""
Works Routes - Work experience management
"""

from flask import render_template, redirect, url_for, request, current_app, abort
from sqlalchemy.exc import SQLAlchemyError
from utils.decorators import login_required
from utils.helpers import split_comma_list, parse_form_date
from utils.security import get_session_email
from utils.uploads import stored_upload, remove_upload
from models import Work
from extensions import db
from . import works_bp


@works_bp.route('/add-work-experience')
@login_required
def add_work_experience():
    """Work experience form"""
    data = {
        'title': 'Work Experience Detail',
        'headline': 'Add work detail',
        'imagePath': 'images/img_work_illustration.svg',
        'email': get_session_email()
    }
    return render_template('work_detail.html', **data)


@works_bp.route('/add-new-work', methods=['POST'])
@login_required
def add_new_work():
    """Store the company logo and insert a new work entry"""
    logo = request.files.get('companyLogo')
    if not logo or not logo.filename:
        current_app.logger.error("Work submission without companyLogo upload")
        abort(400)

    try:
        start_date = parse_form_date(request.form.get('startDate'))
        end_date = parse_form_date(request.form.get('endDate'))
    except ValueError as e:
        current_app.logger.error(f"Invalid work dates: {str(e)}")
        abort(400)

    folder = current_app.config['WORK_IMAGE_FOLDER']
    try:
        with stored_upload(logo, folder) as image_name:
            work = Work(
                name=request.form.get('workName', ''),
                company=request.form.get('company', ''),
                start_date=start_date,
                end_date=end_date,
                descriptions=split_comma_list(request.form.get('description')),
                technologies=split_comma_list(request.form.get('techStack')),
                image_name=image_name
            )
            db.session.add(work)
            db.session.commit()
    except (SQLAlchemyError, OSError) as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding work experience: {str(e)}")
        abort(400)

    current_app.logger.info(f"Added work experience {work.id} ({work.company})")
    return redirect(url_for('pages.index'))


@works_bp.route('/delete-work/<work_id>', methods=['POST'])
@login_required
def delete_work(work_id):
    """Delete a work entry and its company logo"""
    try:
        work_id = int(work_id)
    except ValueError:
        current_app.logger.error(f"Invalid work id: {work_id}")
        abort(400)

    try:
        work = db.session.get(Work, work_id)
        if work is None:
            current_app.logger.error(f"Work experience {work_id} not found")
            abort(400)
        image_name = work.image_name
        db.session.delete(work)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting work experience {work_id}: {str(e)}")
        abort(400)

    remove_upload(current_app.config['WORK_IMAGE_FOLDER'], image_name)
    current_app.logger.info(f"Deleted work experience {work_id}")
    return redirect(url_for('pages.index'))
