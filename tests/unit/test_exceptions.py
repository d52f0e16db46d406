"""Tests for the typed exception hierarchy (ems_kernel/exceptions.py)."""

from ems_kernel.exceptions import (
    ConfigurationError,
    DuplicateEmployeeError,
    EmsError,
    InvalidArgumentError,
)


class TestExceptionHierarchy:

    def test_every_error_is_an_ems_error(self):
        for exc_type in (InvalidArgumentError, DuplicateEmployeeError, ConfigurationError):
            assert issubclass(exc_type, EmsError)

    def test_duplicate_is_an_invalid_argument(self):
        assert issubclass(DuplicateEmployeeError, InvalidArgumentError)

    def test_codes_are_class_attributes(self):
        assert InvalidArgumentError.code == "INVALID_ARGUMENT"
        assert DuplicateEmployeeError.code == "EMPLOYEE_ALREADY_EXISTS"
        assert ConfigurationError.code == "INVALID_CONFIGURATION"

    def test_not_a_builtin_value_error(self):
        assert not issubclass(InvalidArgumentError, ValueError)


class TestStructuredData:

    def test_invalid_argument_reason(self):
        exc = InvalidArgumentError("Base salary cannot be negative", employee_id="E2")
        assert exc.reason == "Base salary cannot be negative"
        assert exc.employee_id == "E2"
        assert str(exc) == "Base salary cannot be negative"

    def test_duplicate_message(self):
        exc = DuplicateEmployeeError("E1")
        assert exc.employee_id == "E1"
        assert "already exists" in exc.reason

    def test_configuration_error(self):
        exc = ConfigurationError("payroll", "unknown key 'bonus'")
        assert exc.section == "payroll"
        assert str(exc) == "Invalid configuration in 'payroll': unknown key 'bonus'"
