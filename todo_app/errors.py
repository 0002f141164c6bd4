import logging

from werkzeug.exceptions import HTTPException, InternalServerError

logger = logging.getLogger(__name__)


def handle_http_error(e):
    """Plain-text body; the status code is what clients rely on"""
    # Keep exception headers such as Allow on 405
    headers = dict(e.get_headers())
    headers['Content-Type'] = 'text/plain; charset=utf-8'
    return f"{e.code} {e.name}", e.code, headers


def handle_unexpected_error(e):
    logger.exception(f"Unhandled error: {e}")
    return handle_http_error(InternalServerError())


def register_error_handlers(app):
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
