from .base import RestBaseRepository
from .employee import RestEmployeeRepository

__all__ = ['RestBaseRepository', 'RestEmployeeRepository']
