import logging
from dataclasses import dataclass, field

import marshmallow
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, url_for
from flask.views import MethodView

from containers import Container
from models import employee_to_dict
from repositories import EmployeeAlreadyExistsError, EmployeeRepository

from .util import class_route, error_response, json_response, requires_body

logger = logging.getLogger(__name__)

blp = Blueprint('Employees', __name__)


def not_blank(value: str) -> None:
    if not value.strip():
        raise marshmallow.ValidationError('Must not be blank.')


# Employee validation class
@dataclass
class EmployeeBody:
    name: str = field(metadata={'validate': not_blank})
    role: str = field(metadata={'validate': not_blank})

    class Meta:
        # Any client-supplied id is ignored
        unknown = marshmallow.EXCLUDE


def employee_url(employee_id: int) -> str:
    return url_for('Employees.EmployeeItem', employee_id=employee_id, _external=True)


@class_route(blp, '/employees')
class EmployeeCollection(MethodView):
    init_every_request = False

    def get(self, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employees = employee_repo.find_all()

        return json_response([employee_to_dict(employee) for employee in employees], 200)

    @requires_body(EmployeeBody)
    def post(
        self,
        body: EmployeeBody,
        employee_repo: EmployeeRepository = Provide[Container.employee_repo],
    ) -> Response:
        employee = employee_repo.create(name=body.name, role=body.role)
        logger.info('Employee %d created', employee.id)

        resp = json_response(employee_to_dict(employee), 201)
        resp.headers['Location'] = employee_url(employee.id)  # type: ignore[arg-type]
        return resp


@class_route(blp, '/employees/<int:employee_id>')
class EmployeeItem(MethodView):
    init_every_request = False

    def get(
        self,
        employee_id: int,
        employee_repo: EmployeeRepository = Provide[Container.employee_repo],
    ) -> Response:
        employee = employee_repo.find_by_id(employee_id)

        if employee is None:
            return error_response(404, f'Could not find employee {employee_id}')

        return json_response(employee_to_dict(employee), 200)

    @requires_body(EmployeeBody)
    def put(
        self,
        employee_id: int,
        body: EmployeeBody,
        employee_repo: EmployeeRepository = Provide[Container.employee_repo],
    ) -> Response:
        if employee_repo.find_by_id(employee_id) is not None:
            employee = employee_repo.update(employee_id, name=body.name, role=body.role)
            status = 200
        else:
            try:
                employee = employee_repo.create_with_id(employee_id, name=body.name, role=body.role)
                status = 201
            except EmployeeAlreadyExistsError:
                # Lost a race against a concurrent create of the same id, last write wins
                employee = employee_repo.update(employee_id, name=body.name, role=body.role)
                status = 200

        logger.info('Employee %d replaced (%d)', employee_id, status)

        resp = json_response(employee_to_dict(employee), status)
        resp.headers['Content-Location'] = employee_url(employee_id)
        return resp

    def delete(
        self,
        employee_id: int,
        employee_repo: EmployeeRepository = Provide[Container.employee_repo],
    ) -> Response:
        employee_repo.delete_by_id(employee_id)
        logger.info('Employee %d deleted', employee_id)

        return Response(status=204)
