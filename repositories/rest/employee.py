from typing import Any, cast

import requests

from models import Employee, employee_from_dict
from repositories import EmployeeAlreadyExistsError, EmployeeNotFoundError, EmployeeRepository

from .base import RestBaseRepository


class RestEmployeeRepository(EmployeeRepository, RestBaseRepository):
    """Employee store served by a remote instance of the employees API."""

    def __init__(self, base_url: str, timeout: float = 10) -> None:
        RestBaseRepository.__init__(self, base_url, timeout)

    def employee_url(self, employee_id: int) -> str:
        return f'{self.base_url}/employees/{employee_id}'

    def create(self, name: str, role: str) -> Employee:
        resp = self.post(f'{self.base_url}/employees', {'name': name, 'role': role})

        if resp.status_code == requests.codes.created:
            return employee_from_dict(cast(dict[str, Any], resp.json()))

        self.unexpected_error(resp)  # noqa: RET503

    def create_with_id(self, employee_id: int, name: str, role: str) -> Employee:
        # The remote replace has already been applied when it answers 200
        resp = self.put(self.employee_url(employee_id), {'name': name, 'role': role})

        if resp.status_code == requests.codes.created:
            return employee_from_dict(cast(dict[str, Any], resp.json()))

        if resp.status_code == requests.codes.ok:
            raise EmployeeAlreadyExistsError(employee_id)

        self.unexpected_error(resp)  # noqa: RET503

    def find_by_id(self, employee_id: int) -> Employee | None:
        resp = self.get(self.employee_url(employee_id))

        if resp.status_code == requests.codes.ok:
            return employee_from_dict(cast(dict[str, Any], resp.json()))

        if resp.status_code == requests.codes.not_found:
            return None

        self.unexpected_error(resp)  # noqa: RET503

    def find_all(self) -> list[Employee]:
        resp = self.get(f'{self.base_url}/employees')

        if resp.status_code == requests.codes.ok:
            return [employee_from_dict(item) for item in cast(list[dict[str, Any]], resp.json())]

        self.unexpected_error(resp)  # noqa: RET503

    def update(self, employee_id: int, name: str, role: str) -> Employee:
        if self.find_by_id(employee_id) is None:
            raise EmployeeNotFoundError(employee_id)

        resp = self.put(self.employee_url(employee_id), {'name': name, 'role': role})

        if resp.status_code in (requests.codes.ok, requests.codes.created):
            return employee_from_dict(cast(dict[str, Any], resp.json()))

        self.unexpected_error(resp)  # noqa: RET503

    def delete_by_id(self, employee_id: int) -> None:
        resp = self.delete(self.employee_url(employee_id))

        if resp.status_code == requests.codes.no_content:
            return

        self.unexpected_error(resp)
