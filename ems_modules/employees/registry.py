"""
Employee Registry (``ems_modules.employees.registry``).

Responsibility
--------------
Gatekeeper for the employee store: only well-formed, unique employees are
saved.

Invariants enforced
-------------------
* Validation runs in a fixed order and the first failure wins:
  null record, blank id, blank name, non-finite or negative base salary,
  bonus rate that is not a finite number in [0, 1], duplicate id.
* Exactly one store mutation on success, zero on any failure.

Failure modes
-------------
* ``InvalidArgumentError`` for any malformed field.
* ``DuplicateEmployeeError`` (an ``InvalidArgumentError``) when the id is
  already stored.
* The duplicate check and the save are two separate store calls.  Two
  concurrent creations of the same id can both pass the check unless the
  store serializes them; with ``InMemoryEmployeeStore`` the last save wins,
  with ``SqlEmployeeStore`` the second flush fails on the primary key.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ems_kernel.exceptions import DuplicateEmployeeError, InvalidArgumentError
from ems_kernel.logging_config import get_logger
from ems_modules.employees.models import Employee
from ems_modules.employees.store import EmployeeStore

logger = get_logger("modules.employees.registry")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _finite_decimal(value: object) -> Decimal | None:
    """``value`` as a Decimal, or None when missing, non-numeric, NaN or infinite."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


class EmployeeRegistry:
    """Validates employees and stores them through an injected store."""

    def __init__(self, store: EmployeeStore):
        self._store = store

    def create_employee(self, employee: Employee | None) -> None:
        """
        Validate ``employee`` and save it.

        Raises:
            InvalidArgumentError: A field is missing or out of range.
            DuplicateEmployeeError: An employee with this id already exists.
        """
        try:
            self._validate(employee)
            if self._store.find_by_id(employee.id) is not None:
                raise DuplicateEmployeeError(employee.id)
        except InvalidArgumentError as exc:
            logger.warning(
                "employee_rejected",
                extra={
                    "employee_id": exc.employee_id,
                    "error_code": exc.code,
                    "reason": exc.reason,
                },
            )
            raise

        self._store.save(employee)
        logger.info(
            "employee_created",
            extra={
                "employee_id": employee.id,
                "base_salary": str(employee.base_salary),
            },
        )

    def find_employee(self, employee_id: str) -> Employee | None:
        """Return the stored employee, or None."""
        return self._store.find_by_id(employee_id)

    @staticmethod
    def _validate(employee: Employee | None) -> None:
        if employee is None:
            raise InvalidArgumentError("Employee cannot be null")

        if _is_blank(employee.id):
            raise InvalidArgumentError("Employee ID cannot be null or empty")

        if _is_blank(employee.name):
            raise InvalidArgumentError(
                "Employee name cannot be null or empty",
                employee_id=employee.id,
            )

        salary = _finite_decimal(employee.base_salary)
        if salary is None:
            raise InvalidArgumentError(
                "Base salary must be a finite number",
                employee_id=employee.id,
            )
        if salary < 0:
            raise InvalidArgumentError(
                "Base salary cannot be negative",
                employee_id=employee.id,
            )

        rate = _finite_decimal(employee.bonus_rate)
        if rate is None or not (0 <= rate <= 1):
            raise InvalidArgumentError(
                "Bonus rate must be between 0 and 1.0",
                employee_id=employee.id,
            )
