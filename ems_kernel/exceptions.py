"""
Typed exception hierarchy for the employee management core.

Every error has a typed class (catch by type, not by message), a ``code``
class attribute (machine-readable, API-safe) and carries its context as
attributes rather than only inside the message string.

    EmsError (base)
    |
    +-- InvalidArgumentError
    |   +-- DuplicateEmployeeError
    |
    +-- ConfigurationError

Error codes:

    Category        | Code                      | When Raised
    ----------------|---------------------------|--------------------------------
    Registry        | INVALID_ARGUMENT          | Employee record fails validation
                    | EMPLOYEE_ALREADY_EXISTS   | Employee id already in the store
    ----------------|---------------------------|--------------------------------
    Config          | INVALID_CONFIGURATION     | Settings file section malformed

Payroll data problems are deliberately absent from this hierarchy: an
unavailable tax rate or performance score, and any failure raised by a lookup,
are reported through ``NetSalaryOutcome`` and never raised to the caller.

Usage::

    try:
        registry.create_employee(employee)
    except DuplicateEmployeeError as e:
        return {"error": e.code, "employee_id": e.employee_id}
    except InvalidArgumentError as e:
        return {"error": e.code, "reason": e.reason}
"""


class EmsError(Exception):
    """
    Base exception for all employee management errors.

    All subclasses must have a ``code`` class attribute.
    """

    code: str = "EMS_ERROR"


# Registry exceptions


class InvalidArgumentError(EmsError):
    """An employee record was rejected by the registry."""

    code: str = "INVALID_ARGUMENT"

    def __init__(self, reason: str, employee_id: str | None = None):
        self.reason = reason
        self.employee_id = employee_id
        super().__init__(reason)


class DuplicateEmployeeError(InvalidArgumentError):
    """An employee with the same id is already stored."""

    code: str = "EMPLOYEE_ALREADY_EXISTS"

    def __init__(self, employee_id: str):
        super().__init__(
            f"Employee with ID {employee_id} already exists",
            employee_id=employee_id,
        )


# Configuration exceptions


class ConfigurationError(EmsError):
    """A settings file section could not be turned into typed config."""

    code: str = "INVALID_CONFIGURATION"

    def __init__(self, section: str, detail: str):
        self.section = section
        self.detail = detail
        super().__init__(f"Invalid configuration in '{section}': {detail}")
