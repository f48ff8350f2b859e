"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required
from .security import (
    get_client_ip,
    hash_password,
    verify_password,
    start_admin_session,
    end_admin_session,
    get_session_email
)
from .helpers import (
    split_comma_list,
    parse_form_date,
    format_month_year,
    is_valid_email,
    get_availability
)
from .uploads import (
    build_upload_filename,
    save_upload,
    remove_upload,
    stored_upload
)

__all__ = [
    # Decorators
    'login_required',

    # Security
    'get_client_ip',
    'hash_password',
    'verify_password',
    'start_admin_session',
    'end_admin_session',
    'get_session_email',

    # Helpers
    'split_comma_list',
    'parse_form_date',
    'format_month_year',
    'is_valid_email',
    'get_availability',

    # Uploads
    'build_upload_filename',
    'save_upload',
    'remove_upload',
    'stored_upload'
]
