import logging
import threading
from dataclasses import replace

from models import Employee
from repositories import EmployeeAlreadyExistsError, EmployeeNotFoundError, EmployeeRepository

logger = logging.getLogger(__name__)


class MemoryEmployeeRepository(EmployeeRepository):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._employees: dict[int, Employee] = {}
        self._next_id = 1

    def create(self, name: str, role: str) -> Employee:
        with self._lock:
            employee = Employee(id=self._next_id, name=name, role=role)
            self._employees[self._next_id] = employee
            self._next_id += 1

        logger.debug('Created employee %d', employee.id)
        return replace(employee)

    def create_with_id(self, employee_id: int, name: str, role: str) -> Employee:
        with self._lock:
            if employee_id in self._employees:
                raise EmployeeAlreadyExistsError(employee_id)

            employee = Employee(id=employee_id, name=name, role=role)
            self._employees[employee_id] = employee
            # Ids handed out by create() must stay clear of caller-chosen ones
            self._next_id = max(self._next_id, employee_id + 1)

        logger.debug('Created employee %d with explicit id', employee_id)
        return replace(employee)

    def find_by_id(self, employee_id: int) -> Employee | None:
        with self._lock:
            employee = self._employees.get(employee_id)

        return replace(employee) if employee is not None else None

    def find_all(self) -> list[Employee]:
        with self._lock:
            return [replace(employee) for employee in self._employees.values()]

    def update(self, employee_id: int, name: str, role: str) -> Employee:
        with self._lock:
            if employee_id not in self._employees:
                raise EmployeeNotFoundError(employee_id)

            employee = Employee(id=employee_id, name=name, role=role)
            self._employees[employee_id] = employee

        logger.debug('Updated employee %d', employee_id)
        return replace(employee)

    def delete_by_id(self, employee_id: int) -> None:
        with self._lock:
            self._employees.pop(employee_id, None)

        logger.debug('Deleted employee %d', employee_id)
