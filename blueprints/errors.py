import logging

from flask import Flask, Response
from werkzeug.exceptions import HTTPException

from .util import error_response

logger = logging.getLogger(__name__)


def handle_http_exception(error: HTTPException) -> Response:
    status = error.code or 500
    response = error_response(status)
    if status == 405:  # noqa: PLR2004
        response.headers['Allow'] = error.get_response().headers.get('Allow', '')

    return response


def handle_unexpected_exception(error: Exception) -> Response:
    logger.exception('Unhandled error while processing request: %s', error)
    return error_response(500)


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected_exception)
