"""
Employee Domain Model (``ems_modules.employees.models``).

Responsibility
--------------
Frozen dataclass value object for an employee record.

Invariants enforced
-------------------
* ``Employee`` is ``frozen=True`` (immutable after construction).
* Monetary fields and rates are ``Decimal`` when built through ``of()``.

The record does NOT validate itself: ``EmployeeRegistry`` owns validation,
so a malformed record can be constructed and handed to it for rejection.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Employee:
    """An employee for payroll purposes."""
    id: str
    name: str
    base_salary: Decimal
    bonus_rate: Decimal = Decimal("0")
    performance_score: int = 0  # informational; payroll fetches a fresh score

    @classmethod
    def of(
        cls,
        id: str,
        name: str,
        base_salary: Decimal | int | float | str,
        bonus_rate: Decimal | int | float | str = "0",
        performance_score: int = 0,
    ) -> "Employee":
        """Build an employee, converting numeric inputs to ``Decimal``."""
        return cls(
            id=id,
            name=name,
            base_salary=Decimal(str(base_salary)),
            bonus_rate=Decimal(str(bonus_rate)),
            performance_score=performance_score,
        )
