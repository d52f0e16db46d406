"""
Pytest fixtures for the EMS test suite.

Provides:
- Structured logging configuration and log capture
- Deterministic clock
- In-memory SQLite sessions for the SQL employee store
- Recording lookup fakes for the payroll engine
"""

import json
import logging
from datetime import datetime, timezone
from decimal import Decimal
from io import StringIO

import pytest

from ems_kernel.db.engine import (
    create_tables,
    get_session_factory,
    init_engine_from_url,
    reset_engine,
)
from ems_kernel.domain.clock import DeterministicClock
from ems_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from ems_modules.employees.models import Employee
from ems_modules.employees.registry import EmployeeRegistry
from ems_modules.employees.store import InMemoryEmployeeStore


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture ems logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, engine):
            engine.calculate_net_salary(employee, 11, 2025)
            logs = captured_logs()
            assert any(r["message"] == "net_salary_calculated" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("ems")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Clock
# =============================================================================


@pytest.fixture
def deterministic_clock():
    """Clock fixed inside November 2025."""
    return DeterministicClock(
        fixed_time=datetime(2025, 11, 14, 9, 30, 0, tzinfo=timezone.utc),
    )


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database with the employees table."""
    init_engine_from_url("sqlite://")
    create_tables()
    yield get_session_factory()
    reset_engine()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# =============================================================================
# Employees
# =============================================================================


@pytest.fixture
def store():
    return InMemoryEmployeeStore()


@pytest.fixture
def registry(store):
    return EmployeeRegistry(store)


@pytest.fixture
def alice():
    return Employee.of("E1", "Alice", "22000", "0.1", 95)


# =============================================================================
# Recording lookup fakes
# =============================================================================


class RecordingAttendance:
    """Answers a fixed day count and records every call."""

    def __init__(self, days: int):
        self.days = days
        self.calls: list[tuple[str, int, int]] = []

    def days_present(self, employee_id: str, month: int, year: int) -> int:
        self.calls.append((employee_id, month, year))
        return self.days


class RecordingTaxRate:
    def __init__(self, rate):
        self.rate = rate
        self.calls = 0

    def tax_rate(self, employee):
        self.calls += 1
        return self.rate


class RecordingPerformance:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def score(self, employee):
        self.calls += 1
        return self.value


class FailingLookup:
    """Raises on every call, standing in for an unreachable service."""

    def __init__(self, exc: Exception | None = None):
        self.exc = exc or ConnectionError("service unreachable")

    def days_present(self, employee_id, month, year):
        raise self.exc

    def tax_rate(self, employee):
        raise self.exc

    def score(self, employee):
        raise self.exc


@pytest.fixture
def lookups():
    """Factory for recording lookups: ``lookups(days, tax_rate, performance)``."""

    def _make(days=22, tax_rate=Decimal("0.1"), performance=90):
        return (
            RecordingAttendance(days),
            RecordingTaxRate(tax_rate),
            RecordingPerformance(performance),
        )

    return _make


@pytest.fixture
def failing_lookup():
    return FailingLookup()
