"""
Employee store capability and its implementations.

Contract:
    ``EmployeeStore.find_by_id()`` returns the stored ``Employee`` or None.
    ``EmployeeStore.save()`` stores an employee under its id.

Implementations:
    ``InMemoryEmployeeStore`` -- lock-guarded dict, safe for concurrent callers.
    ``SqlEmployeeStore``      -- SQLAlchemy session over the ``employees`` table.
                                 Flushes only; the caller owns commit/rollback.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from sqlalchemy.orm import Session

from ems_kernel.logging_config import get_logger
from ems_modules.employees.models import Employee
from ems_modules.employees.orm import EmployeeModel

logger = get_logger("modules.employees.store")


@runtime_checkable
class EmployeeStore(Protocol):
    """Key-value store of employees keyed by employee id."""

    def find_by_id(self, employee_id: str) -> Employee | None:
        """Return the stored employee, or None if the id is unknown."""
        ...

    def save(self, employee: Employee) -> None:
        """Store the employee under ``employee.id``."""
        ...


class InMemoryEmployeeStore:
    """Dict-backed store; each call holds the lock for its own duration only."""

    def __init__(self) -> None:
        self._employees: dict[str, Employee] = {}
        self._lock = threading.Lock()

    def find_by_id(self, employee_id: str) -> Employee | None:
        with self._lock:
            return self._employees.get(employee_id)

    def save(self, employee: Employee) -> None:
        with self._lock:
            self._employees[employee.id] = employee

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        with self._lock:
            return employee_id in self._employees


class SqlEmployeeStore:
    """
    Session-backed store.

    Guarantees:
        - ``save`` adds and flushes within the caller's transaction; it never
          commits.  A duplicate primary key surfaces as ``IntegrityError``
          at flush time.
        - ``find_by_id`` returns a DTO, never the ORM row.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, employee_id: str) -> Employee | None:
        row = self.session.get(EmployeeModel, employee_id)
        return row.to_dto() if row is not None else None

    def save(self, employee: Employee) -> None:
        self.session.add(EmployeeModel.from_dto(employee))
        self.session.flush()
        logger.debug("employee_row_flushed", extra={"employee_id": employee.id})
