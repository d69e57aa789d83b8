from .employee import SqlEmployeeRepository
from .engine import make_engine
from .schema import create_schema

__all__ = ['SqlEmployeeRepository', 'make_engine', 'create_schema']
