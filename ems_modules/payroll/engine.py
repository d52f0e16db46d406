"""
Payroll Engine (``ems_modules.payroll.engine``).

Responsibility
--------------
Computes gross pay, bonus, tax and net pay for an employee and period from
three external signals (attendance, tax rate, performance score) plus the
employee's base salary.

Architecture position
---------------------
**Modules layer** -- ``PayrollEngine`` is the public entry point for payroll
figures.  It composes the injected lookups with the pure functions in
``helpers.py``; it holds no mutable state, so one instance can serve many
concurrent callers as long as the lookups can.

Invariants enforced
-------------------
* Each evaluation calls every lookup exactly once, in the order attendance,
  tax rate, performance.
* An unavailable tax rate or performance score yields an INCONSISTENT
  outcome; no net salary is produced, regardless of attendance.
* Any exception raised during evaluation yields a FAULT outcome.  Nothing
  is raised to the caller.
* ``process_payroll`` derives its breakdown from the same single evaluation
  that produced the net salary, so ``gross + bonus - tax == net`` always.

Failure modes
-------------
* INCONSISTENT and FAULT both surface as ``None`` from
  ``calculate_net_salary`` and as an all-zero ``PayrollResult`` from
  ``process_payroll``.  ``evaluate`` keeps them apart.

Usage::

    engine = PayrollEngine(attendance, tax_rates, performance)
    net = engine.calculate_net_salary(employee, month=11, year=2025)
    result = engine.process_payroll(employee).as_dict()
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from ems_kernel.domain.clock import Clock, SystemClock
from ems_kernel.logging_config import LogContext, get_logger
from ems_modules.employees.models import Employee
from ems_modules.payroll.config import PayrollConfig
from ems_modules.payroll.helpers import compute_breakdown, to_decimal
from ems_modules.payroll.lookups import (
    AttendanceLookup,
    PerformanceLookup,
    TaxRateLookup,
)
from ems_modules.payroll.models import (
    CalculationStatus,
    NetSalaryOutcome,
    PayrollPeriod,
    PayrollResult,
)

logger = get_logger("modules.payroll.engine")


class PayrollEngine:
    """
    Payroll figures from injected lookups.

    Contract
    --------
    * ``evaluate`` returns a tagged ``NetSalaryOutcome``.
    * ``calculate_net_salary`` returns the net salary or ``None``.
    * ``process_payroll`` always returns a ``PayrollResult``.

    Non-goals
    ---------
    * Does NOT retry, time out or cache lookups.
    * Does NOT persist results.
    """

    def __init__(
        self,
        attendance: AttendanceLookup,
        tax_rates: TaxRateLookup,
        performance: PerformanceLookup,
        config: PayrollConfig | None = None,
        clock: Clock | None = None,
    ):
        self._attendance = attendance
        self._tax_rates = tax_rates
        self._performance = performance
        self._config = config or PayrollConfig.with_defaults()
        self._clock = clock or SystemClock()

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def evaluate(self, employee: Employee, month: int, year: int) -> NetSalaryOutcome:
        """Run one full evaluation and report how it ended."""
        employee_id = getattr(employee, "id", None)
        period = PayrollPeriod(month, year)

        with LogContext.bind(employee_id=employee_id, period=str(period)):
            days_present = tax_rate = performance = None
            try:
                days_present = self._attendance.days_present(employee.id, month, year)
                tax_rate = self._tax_rates.tax_rate(employee)
                performance = self._performance.score(employee)

                missing = tuple(
                    name
                    for name, value in (("tax_rate", tax_rate), ("performance", performance))
                    if value is None
                )
                if missing:
                    logger.warning(
                        "payroll_data_inconsistent",
                        extra={"missing": list(missing)},
                    )
                    return NetSalaryOutcome(
                        status=CalculationStatus.INCONSISTENT,
                        employee_id=employee_id,
                        period=period,
                        days_present=days_present,
                        tax_rate=None if tax_rate is None else to_decimal(tax_rate),
                        performance=performance,
                        missing=missing,
                    )

                if days_present < 0:
                    logger.warning(
                        "attendance_negative",
                        extra={"days_present": days_present},
                    )

                rate = to_decimal(tax_rate)
                breakdown = compute_breakdown(
                    base_salary=employee.base_salary,
                    days_present=days_present,
                    tax_rate=rate,
                    performance=performance,
                    config=self._config,
                )
            except Exception as exc:
                logger.error(
                    "payroll_calculation_fault",
                    exc_info=True,
                    extra={"days_present": days_present, "performance": performance},
                )
                return NetSalaryOutcome(
                    status=CalculationStatus.FAULT,
                    employee_id=employee_id,
                    period=period,
                    days_present=days_present,
                    performance=performance,
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )

            logger.info(
                "net_salary_calculated",
                extra={
                    "days_present": days_present,
                    "tax_rate": str(rate),
                    "performance": performance,
                    "gross_salary": str(breakdown.gross_salary),
                    "bonus": str(breakdown.bonus),
                    "tax": str(breakdown.tax),
                    "net_salary": str(breakdown.net_salary),
                },
            )
            return NetSalaryOutcome(
                status=CalculationStatus.OK,
                employee_id=employee_id,
                period=period,
                breakdown=breakdown,
                days_present=days_present,
                tax_rate=rate,
                performance=performance,
            )

    def calculate_net_salary(
        self, employee: Employee, month: int, year: int,
    ) -> Decimal | None:
        """
        Net salary for ``employee`` in ``month``/``year``.

        Gross, bonus and tax are each rounded to ``config.amount_quantum``
        (``ROUND_HALF_UP``) before they are summed, so the net is the sum of
        the amounts ``process_payroll`` reports, not the unrounded product.
        With base 1000 and 7 of 22 days, gross is 318.18, not 318.1818...

        Returns:
            ``gross + bonus - tax``, or ``None`` when the tax rate or
            performance score is unavailable or a lookup failed.
        """
        return self.evaluate(employee, month, year).net_salary

    # -------------------------------------------------------------------------
    # Payroll processing
    # -------------------------------------------------------------------------

    def current_period(self) -> PayrollPeriod:
        """Calendar month/year of the injected clock."""
        return PayrollPeriod.containing(self._clock.today())

    def process_payroll(
        self, employee: Employee, period: PayrollPeriod | None = None,
    ) -> PayrollResult:
        """
        Payroll figures for ``employee`` (current period unless given).

        A non-OK evaluation yields ``PayrollResult.zero()``; partial figures
        are never reported.
        """
        period = period or self.current_period()
        outcome = self.evaluate(employee, period.month, period.year)
        if not outcome.is_ok:
            logger.info(
                "payroll_defaulted_to_zero",
                extra={
                    "employee_id": outcome.employee_id,
                    "period": str(period),
                    "status": outcome.status.value,
                },
            )
            return PayrollResult.zero()
        return PayrollResult.from_breakdown(outcome.breakdown)

    def run_payroll(
        self,
        employees: Iterable[Employee],
        period: PayrollPeriod | None = None,
    ) -> dict[str, PayrollResult]:
        """Process every employee for one period, keyed by employee id."""
        period = period or self.current_period()
        results = {
            employee.id: self.process_payroll(employee, period)
            for employee in employees
        }
        logger.info(
            "payroll_run_completed",
            extra={"period": str(period), "employee_count": len(results)},
        )
        return results
