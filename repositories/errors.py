class RepositoryError(Exception):
    """Raised when the underlying store fails to complete an operation."""


class EmployeeNotFoundError(RepositoryError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f'Could not find employee {employee_id}')
        self.employee_id = employee_id


class EmployeeAlreadyExistsError(RepositoryError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f'Employee {employee_id} already exists')
        self.employee_id = employee_id
