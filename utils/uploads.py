"""
Uploads Module - Stores and removes the images attached to works and projects
"""

import os
import time
from contextlib import contextmanager
from flask import current_app
from werkzeug.utils import secure_filename


def build_upload_filename(field_name, original_filename, timestamp_ms=None):
    """<field>_<epoch millis><ext>, e.g. companyLogo_1700000000000.png"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    # Sanitise only the extension; non-ASCII base names reduce to nothing.
    extension = secure_filename(os.path.splitext(original_filename or '')[1])
    if extension:
        extension = f".{extension}"
    return f"{field_name}_{timestamp_ms}{extension}"


def save_upload(file, folder):
    """
    Write an uploaded file into folder and return the generated filename.

    The folder is created (with parents) when missing. No content-type or
    size checks are applied.
    """
    os.makedirs(folder, exist_ok=True)
    filename = build_upload_filename(file.name, file.filename)
    file.save(os.path.join(folder, filename))
    current_app.logger.info(f"Stored upload {filename} in {folder}")
    return filename


def remove_upload(folder, filename):
    """Delete a stored upload; failures are logged and reported as False"""
    if not filename:
        return False
    path = os.path.join(folder, os.path.basename(filename))
    try:
        os.remove(path)
        return True
    except OSError as e:
        current_app.logger.error(f"Error removing upload {path}: {str(e)}")
        return False


@contextmanager
def stored_upload(file, folder):
    """Save an upload for the duration of a block, removing it if the block fails"""
    filename = save_upload(file, folder)
    try:
        yield filename
    except Exception:
        remove_upload(folder, filename)
        raise
