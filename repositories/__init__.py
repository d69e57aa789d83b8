from .employee import EmployeeRepository
from .errors import EmployeeAlreadyExistsError, EmployeeNotFoundError, RepositoryError

__all__ = ['EmployeeRepository', 'RepositoryError', 'EmployeeNotFoundError', 'EmployeeAlreadyExistsError']
