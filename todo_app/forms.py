"""Form parsing for the mutating endpoints.

Checkbox semantics live here: an unchecked box submits nothing, a
checked one submits "on".
"""

from flask import request
from werkzeug.exceptions import BadRequest, UnsupportedMediaType

FORM_MIMETYPES = ('application/x-www-form-urlencoded', 'multipart/form-data')
CHECKED = 'on'


def require_form_content():
    """Reject bodies that are not HTML forms; a missing type is an empty form"""
    if request.mimetype and request.mimetype not in FORM_MIMETYPES:
        raise UnsupportedMediaType(f"Expected a form submission, got {request.mimetype}")


def _required(form, field):
    value = form.get(field)
    if not value:
        raise BadRequest(f"Missing required field: {field}")
    return value


def parse_create_form(form):
    return _required(form, 'title')


def parse_update_form(form):
    todo_id = _required(form, 'id')
    return todo_id, form.get('done') == CHECKED
