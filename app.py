import logging
import os

from flask import Flask
from gcp_microservice_utils import setup_cloud_logging, setup_cloud_trace

from blueprints import BlueprintEmployee, BlueprintHealth, register_error_handlers
from containers import Container
from repositories.sql import create_schema


class FlaskMicroservice(Flask):
    container: Container


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':
        setup_cloud_logging()  # pragma: no cover
    else:
        logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO').upper())

    app = FlaskMicroservice(__name__)
    app.container = Container()

    if 'DATABASE_URL' in os.environ:  # pragma: no cover
        app.container.config.store.from_value('sql')
        app.container.config.db.url.from_env('DATABASE_URL')
    elif 'EMPLOYEE_SVC_URL' in os.environ:  # pragma: no cover
        app.container.config.store.from_value('rest')
        app.container.config.svc.employee.url.from_env('EMPLOYEE_SVC_URL')

    if app.container.config.store() == 'sql':
        create_schema(app.container.db_engine())

    if os.getenv('ENABLE_CLOUD_TRACE') == '1':  # pragma: no cover
        setup_cloud_trace(app)

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintEmployee)
    register_error_handlers(app)

    return app
