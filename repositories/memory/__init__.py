from .employee import MemoryEmployeeRepository

__all__ = ['MemoryEmployeeRepository']
