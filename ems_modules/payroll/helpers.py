"""
Payroll Helpers (``ems_modules.payroll.helpers``).

Responsibility
--------------
Pure calculation functions for the payroll engine: attendance factor,
bonus tier selection, and the gross/bonus/tax breakdown.

Architecture position
---------------------
**Modules layer** -- pure helper functions.  No I/O, no clock, no lookups.
Called by ``PayrollEngine`` or from tests.

Invariants enforced
-------------------
* All numeric outputs are ``Decimal`` -- NEVER ``float``.
* The attendance factor never exceeds 1; it is NOT floored, so a negative
  day count yields a negative factor.
* Bonus tiers are checked in order; the first reached threshold wins.
* Breakdown amounts are quantized with ``ROUND_HALF_UP``.

Failure modes
-------------
* Values that cannot be converted to ``Decimal`` raise
  ``decimal.InvalidOperation`` or ``TypeError``; the engine turns these into
  a FAULT outcome.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ems_modules.payroll.config import BonusTier, PayrollConfig
from ems_modules.payroll.models import PayrollBreakdown

ONE = Decimal("1")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert a lookup answer to ``Decimal``.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("boolean is not a numeric payroll value")
    return Decimal(str(value))


def attendance_factor(days_present: int, full_attendance_days: int = 22) -> Decimal:
    """
    Ratio of days present to the full-attendance day count, capped at 1.

    Postconditions:
        - ``days_present == full_attendance_days`` -> ``Decimal("1")``.
        - ``days_present > full_attendance_days`` -> ``Decimal("1")``.
        - ``days_present == 0`` -> ``Decimal("0")``.
    """
    return min(ONE, to_decimal(days_present) / Decimal(full_attendance_days))


def bonus_rate_for(
    performance: int,
    tiers: Sequence[BonusTier],
    default_rate: Decimal,
) -> Decimal:
    """Rate of the first tier whose threshold ``performance`` reaches."""
    for tier in tiers:
        if performance >= tier.threshold:
            return tier.rate
    return default_rate


def compute_breakdown(
    base_salary: Decimal,
    days_present: int,
    tax_rate: Decimal,
    performance: int,
    config: PayrollConfig,
) -> PayrollBreakdown:
    """
    Gross, bonus and tax for one employee and period.

    gross = base * attendance factor
    bonus = base * bonus rate (tier of ``performance``)
    tax   = base * tax rate

    Tax is charged on the base salary, not on gross, so a partial month still
    pays the full month's tax.
    """
    base = to_decimal(base_salary)
    factor = attendance_factor(days_present, config.full_attendance_days)
    rate = bonus_rate_for(performance, config.bonus_tiers, config.default_bonus_rate)

    def _q(amount: Decimal) -> Decimal:
        return amount.quantize(config.amount_quantum, rounding=ROUND_HALF_UP)

    return PayrollBreakdown(
        gross_salary=_q(base * factor),
        bonus=_q(base * rate),
        tax=_q(base * to_decimal(tax_rate)),
    )
