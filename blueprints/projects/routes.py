"""
Projects Routes - Project management
"""

from flask import render_template, redirect, url_for, request, current_app, abort
from sqlalchemy.exc import SQLAlchemyError
from utils.decorators import login_required
from utils.helpers import split_comma_list
from utils.security import get_session_email
from utils.uploads import stored_upload, remove_upload
from models import Project
from extensions import db
from . import projects_bp


@projects_bp.route('/add-project')
@login_required
def add_project():
    """Project form"""
    data = {
        'title': 'Project Detail',
        'headline': 'Add new project',
        'imagePath': 'images/img_project_illustration.svg',
        'email': get_session_email()
    }
    return render_template('project_detail.html', **data)


@projects_bp.route('/add-new-project', methods=['POST'])
@login_required
def add_new_project():
    """Store the project image and insert a new project"""
    image = request.files.get('projectImage')
    if not image or not image.filename:
        current_app.logger.error("Project submission without projectImage upload")
        abort(400)

    folder = current_app.config['PROJECT_IMAGE_FOLDER']
    try:
        with stored_upload(image, folder) as image_name:
            project = Project(
                name=request.form.get('projectName', ''),
                description=request.form.get('description', ''),
                technologies=split_comma_list(request.form.get('techStack')),
                github_link=request.form.get('githubLink', ''),
                live_demo_link=request.form.get('demoLink', ''),
                image_name=image_name
            )
            db.session.add(project)
            db.session.commit()
    except (SQLAlchemyError, OSError) as e:
        db.session.rollback()
        current_app.logger.error(f"Error adding project: {str(e)}")
        abort(400)

    current_app.logger.info(f"Added project {project.id} ({project.name})")
    return redirect(url_for('pages.index'))


@projects_bp.route('/delete-project/<project_id>', methods=['POST'])
@login_required
def delete_project(project_id):
    """Delete a project and its image"""
    try:
        project_id = int(project_id)
    except ValueError:
        current_app.logger.error(f"Invalid project id: {project_id}")
        abort(400)

    try:
        project = db.session.get(Project, project_id)
        if project is None:
            current_app.logger.error(f"Project {project_id} not found")
            abort(400)
        image_name = project.image_name
        db.session.delete(project)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting project {project_id}: {str(e)}")
        abort(400)

    remove_upload(current_app.config['PROJECT_IMAGE_FOLDER'], image_name)
    current_app.logger.info(f"Deleted project {project_id}")
    return redirect(url_for('pages.index'))
