"""
Module: ems_kernel.db.base
Responsibility: Declarative base class for all SQLAlchemy ORM models.  Provides
    the type annotation map that keeps column types consistent across the
    schema.
Architecture position: Kernel > DB.  Lowest-level import target for ORM
    models.  MUST NOT import from ems_modules or ems_config.

Invariants enforced:
    - Decimal precision: Python Decimal maps to Numeric(38, 9).  NEVER use
      float for monetary amounts or rates.
    - Timestamps are timezone-aware.
"""

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import DateTime, Numeric
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base for all SQLAlchemy models.

    Unlike entity tables keyed by surrogate ids, the employee table is keyed
    by the caller-supplied employee id, so no primary key is imposed here.
    """

    type_annotation_map: ClassVar[dict] = {
        Decimal: Numeric(38, 9),
        datetime: DateTime(timezone=True),
    }
