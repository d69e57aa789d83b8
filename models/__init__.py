from .employee import Employee, employee_from_dict, employee_to_dict

__all__ = ['Employee', 'employee_from_dict', 'employee_to_dict']
