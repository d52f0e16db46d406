"""
EMS Kernel

Shared infrastructure for the employee management core:
- Structured JSON logging with request-scoped context
- Typed exception hierarchy with machine-readable codes
- Injectable clock
- SQLAlchemy declarative base and engine/session management
"""

__version__ = "0.1.0"
