"""
Helpers Module - Form parsing and display formatting
"""

import re
from datetime import datetime
from flask import current_app

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)


def split_comma_list(value):
    """
    Turn a comma-joined form field into a list.

    Every space is removed before splitting, so "Flask, React" becomes
    ['Flask', 'React']. Order is kept and empty segments are not dropped.
    """
    return (value or '').replace(' ', '').split(',')


def parse_form_date(value):
    """Parse a YYYY-MM-DD date input, raising ValueError on anything else"""
    if not value:
        raise ValueError('Missing date')
    return datetime.strptime(value.strip(), '%Y-%m-%d').date()


def format_month_year(value):
    """Format a date for display, e.g. 'Jan 2024'"""
    if not value:
        return ''
    return value.strftime('%b %Y')


def is_valid_email(value):
    """Single email-format check used by the login form"""
    if not value or len(value) > 254:
        return False
    local_part = value.split('@', 1)[0]
    if len(local_part) > 64 or local_part.startswith('.') or local_part.endswith('.') or '..' in local_part:
        return False
    return bool(EMAIL_PATTERN.match(value))


def get_availability():
    """Return the (message, statusIconFlag) pair shown on the home page"""
    if current_app.config.get('PROJECT_STATUS'):
        return 'Currently working on a project', 'unavailable'
    return 'Available for new projects', 'available'
