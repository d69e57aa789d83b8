from models import Employee


class EmployeeRepository:
    """Persistence contract for employees.

    Every operation is atomic on its own. Ids are assigned by the store and
    are never handed out twice.
    """

    def create(self, name: str, role: str) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def create_with_id(self, employee_id: int, name: str, role: str) -> Employee:
        """Persist an employee under a caller-chosen id.

        Raises EmployeeAlreadyExistsError if the id is already taken.
        """
        raise NotImplementedError  # pragma: no cover

    def find_by_id(self, employee_id: int) -> Employee | None:
        raise NotImplementedError  # pragma: no cover

    def find_all(self) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover

    def update(self, employee_id: int, name: str, role: str) -> Employee:
        """Overwrite name and role of an existing employee.

        Raises EmployeeNotFoundError if there is no employee with that id.
        """
        raise NotImplementedError  # pragma: no cover

    def delete_by_id(self, employee_id: int) -> None:
        raise NotImplementedError  # pragma: no cover
