from flask import Blueprint, Response

from .util import json_response

blp = Blueprint('Health', __name__)


@blp.route('/health')
def health() -> Response:
    return json_response({'status': 'ok'}, 200)
