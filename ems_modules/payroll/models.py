"""
Payroll Domain Models (``ems_modules.payroll.models``).

Responsibility
--------------
Frozen dataclass value objects for payroll: the pay period, the tagged
outcome of one net-salary evaluation, and the four-figure payroll result.

Invariants enforced
-------------------
* All models are ``frozen=True`` (immutable after construction).
* All monetary fields use ``Decimal`` -- NEVER ``float``.
* ``NetSalaryOutcome`` carries a net salary and breakdown if and only if its
  status is ``OK``.
* ``PayrollResult.zero()`` is the only result produced for a non-OK outcome.

Failure modes
-------------
* ``PayrollPeriod`` with a month outside 1..12 raises ``ValueError``.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0.00")


class CalculationStatus(str, Enum):
    """How a net-salary evaluation ended."""

    OK = "ok"
    INCONSISTENT = "inconsistent"  # tax rate or performance score unavailable
    FAULT = "fault"  # a lookup (or arithmetic on its answer) raised


@dataclass(frozen=True)
class PayrollPeriod:
    """A calendar month of a year."""
    month: int
    year: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def containing(cls, day: date) -> "PayrollPeriod":
        return cls(month=day.month, year=day.year)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class PayrollBreakdown:
    """Gross, bonus and tax amounts computed for one employee and period."""
    gross_salary: Decimal
    bonus: Decimal
    tax: Decimal

    @property
    def net_salary(self) -> Decimal:
        return self.gross_salary + self.bonus - self.tax


@dataclass(frozen=True)
class NetSalaryOutcome:
    """Tagged result of one net-salary evaluation."""
    status: CalculationStatus
    employee_id: str
    period: PayrollPeriod
    breakdown: PayrollBreakdown | None = None
    days_present: int | None = None
    tax_rate: Decimal | None = None
    performance: int | None = None
    missing: tuple[str, ...] = ()
    error_type: str | None = None
    error_message: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status == CalculationStatus.OK

    @property
    def net_salary(self) -> Decimal | None:
        return self.breakdown.net_salary if self.breakdown is not None else None


@dataclass(frozen=True)
class PayrollResult:
    """Gross-to-net figures returned by ``PayrollEngine.process_payroll``."""
    gross_salary: Decimal
    bonus: Decimal
    tax: Decimal
    net_salary: Decimal  # may be negative when tax exceeds gross + bonus

    @classmethod
    def zero(cls) -> "PayrollResult":
        return cls(gross_salary=ZERO, bonus=ZERO, tax=ZERO, net_salary=ZERO)

    @classmethod
    def from_breakdown(cls, breakdown: PayrollBreakdown) -> "PayrollResult":
        return cls(
            gross_salary=breakdown.gross_salary,
            bonus=breakdown.bonus,
            tax=breakdown.tax,
            net_salary=breakdown.net_salary,
        )

    def as_dict(self) -> dict[str, Decimal]:
        return {
            "GrossSalary": self.gross_salary,
            "Bonus": self.bonus,
            "Tax": self.tax,
            "NetSalary": self.net_salary,
        }
