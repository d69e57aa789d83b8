import json
from collections.abc import Callable
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any

import marshmallow
import marshmallow_dataclass
from flask import Blueprint, Response, request
from flask.views import MethodView
from tightwrap import wraps

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_body(status: int, path: str) -> dict[str, Any]:
    return {
        'timestamp': datetime.now(UTC).isoformat(timespec='milliseconds'),
        'status': status,
        'error': HTTPStatus(status).phrase,
        'path': path,
    }


def error_response(status: int, message: Any = None) -> Response:  # noqa: ANN401
    body = error_body(status, request.path)
    if message is not None:
        body['message'] = message

    return json_response(body, status)


def validation_error_response(error: marshmallow.ValidationError) -> Response:
    return error_response(400, error.messages)


def requires_body(body_class: type) -> Callable[[Callable[..., Response]], Callable[..., Response]]:
    """Parse and validate the JSON request body before calling the view.

    The loaded dataclass instance is passed to the view as ``body``. A body
    that is not a JSON object, or that fails validation, is answered with 400
    without calling the view.
    """
    schema = marshmallow_dataclass.class_schema(body_class)()

    def decorator(f: Callable[..., Response]) -> Callable[..., Response]:
        @wraps(f)
        def decorated_function(*args, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
            req_json = request.get_json(silent=True)
            if not isinstance(req_json, dict):
                return error_response(400, JSON_VALIDATION_ERROR)

            try:
                body = schema.load(req_json)
            except marshmallow.ValidationError as err:
                return validation_error_response(err)

            return f(*args, body=body, **kwargs)

        return decorated_function

    return decorator
