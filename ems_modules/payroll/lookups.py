"""
Lookup capabilities consumed by the payroll engine.

Contract:
    Each protocol has a single synchronous method.  The tax-rate and
    performance lookups may answer ``None`` when the backing service has no
    data; the engine treats that as an inconsistency, not an error.  Any
    exception a lookup raises is captured by the engine.

    ``ReportGenerator`` is consumed only by callers outside the engine; it
    answers with a ``Future`` so report building can overlap payroll runs.

Variants:
    ``Fixed*``   -- one answer for every employee.
    ``Mapping*`` -- per-employee answers with a default.
"""

from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import Future
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol, runtime_checkable

from ems_modules.employees.models import Employee


# =============================================================================
# Protocols
# =============================================================================


@runtime_checkable
class AttendanceLookup(Protocol):
    """Days an employee was present in a month."""

    def days_present(self, employee_id: str, month: int, year: int) -> int:
        ...


@runtime_checkable
class TaxRateLookup(Protocol):
    """Tax rate applicable to an employee, or None when unknown."""

    def tax_rate(self, employee: Employee) -> Decimal | float | None:
        ...


@runtime_checkable
class PerformanceLookup(Protocol):
    """Current performance score of an employee, or None when not evaluated."""

    def score(self, employee: Employee) -> int | None:
        ...


@runtime_checkable
class ReportGenerator(Protocol):
    """Builds the payroll report of a month asynchronously."""

    def generate_payroll_report(self, month: int, year: int) -> Future[str]:
        ...


# =============================================================================
# Fixed-answer variants
# =============================================================================


@dataclass(frozen=True)
class FixedAttendance:
    days: int

    def days_present(self, employee_id: str, month: int, year: int) -> int:
        return self.days


@dataclass(frozen=True)
class FixedTaxRate:
    rate: Decimal | float | None

    def tax_rate(self, employee: Employee) -> Decimal | float | None:
        return self.rate


@dataclass(frozen=True)
class FixedPerformance:
    value: int | None

    def score(self, employee: Employee) -> int | None:
        return self.value


# =============================================================================
# Per-employee variants
# =============================================================================


@dataclass(frozen=True)
class MappingAttendance:
    """Days present keyed by ``(employee_id, month, year)``."""
    days: Mapping[tuple[str, int, int], int] = field(default_factory=dict)
    default: int = 0

    def days_present(self, employee_id: str, month: int, year: int) -> int:
        return self.days.get((employee_id, month, year), self.default)


@dataclass(frozen=True)
class MappingTaxRate:
    """Tax rates keyed by employee id."""
    rates: Mapping[str, Decimal | float | None] = field(default_factory=dict)
    default: Decimal | float | None = None

    def tax_rate(self, employee: Employee) -> Decimal | float | None:
        return self.rates.get(employee.id, self.default)


@dataclass(frozen=True)
class MappingPerformance:
    """Performance scores keyed by employee id."""
    scores: Mapping[str, int | None] = field(default_factory=dict)
    default: int | None = None

    def score(self, employee: Employee) -> int | None:
        return self.scores.get(employee.id, self.default)
