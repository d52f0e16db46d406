"""
Payroll Module (``ems_modules.payroll``).

Responsibility
--------------
Net pay from base salary, attendance, performance score and tax rate:
attendance factor, tiered bonus, tax deduction, and the handling of
unavailable or failing lookups.

Architecture position
---------------------
**Modules layer** -- a config schema, pure helpers, lookup protocols and the
``PayrollEngine`` facade.  Shares only the ``Employee`` model with the
employees module; never writes back to the registry.

Failure modes
-------------
* Unavailable tax rate or performance score -> ``None`` net salary /
  all-zero ``PayrollResult``.
* Lookup raises -> same external result; ``PayrollEngine.evaluate`` reports
  ``CalculationStatus.FAULT`` with the error type and message.
"""

from ems_modules.payroll.config import BonusTier, PayrollConfig
from ems_modules.payroll.engine import PayrollEngine
from ems_modules.payroll.lookups import (
    AttendanceLookup,
    FixedAttendance,
    FixedPerformance,
    FixedTaxRate,
    MappingAttendance,
    MappingPerformance,
    MappingTaxRate,
    PerformanceLookup,
    ReportGenerator,
    TaxRateLookup,
)
from ems_modules.payroll.models import (
    CalculationStatus,
    NetSalaryOutcome,
    PayrollBreakdown,
    PayrollPeriod,
    PayrollResult,
)

__all__ = [
    "AttendanceLookup",
    "BonusTier",
    "CalculationStatus",
    "FixedAttendance",
    "FixedPerformance",
    "FixedTaxRate",
    "MappingAttendance",
    "MappingPerformance",
    "MappingTaxRate",
    "NetSalaryOutcome",
    "PayrollBreakdown",
    "PayrollConfig",
    "PayrollEngine",
    "PayrollPeriod",
    "PayrollResult",
    "PerformanceLookup",
    "ReportGenerator",
    "TaxRateLookup",
]
