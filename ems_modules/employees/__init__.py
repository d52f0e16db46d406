"""
Employees Module (``ems_modules.employees``).

Responsibility
--------------
Employee records and the registry that guards their creation.

Failure modes
-------------
* ``InvalidArgumentError`` / ``DuplicateEmployeeError`` from
  ``EmployeeRegistry.create_employee``; nothing is saved on failure.
"""

from ems_modules.employees.models import Employee
from ems_modules.employees.registry import EmployeeRegistry
from ems_modules.employees.store import (
    EmployeeStore,
    InMemoryEmployeeStore,
    SqlEmployeeStore,
)

__all__ = [
    "Employee",
    "EmployeeRegistry",
    "EmployeeStore",
    "InMemoryEmployeeStore",
    "SqlEmployeeStore",
]
