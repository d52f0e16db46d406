"""
Pure domain layer.

Holds the time abstraction shared by the payroll module.  No ORM, database
or I/O dependencies (``SystemClock`` is the one sanctioned time boundary).
"""

from ems_kernel.domain.clock import Clock, DeterministicClock, SystemClock

__all__ = [
    "Clock",
    "DeterministicClock",
    "SystemClock",
]
