"""
Employee ORM Persistence Model (``ems_modules.employees.orm``).

Responsibility:
    SQLAlchemy ORM model persisting the frozen ``Employee`` DTO, with
    ``to_dto()`` / ``from_dto()`` round-trip conversion.

Invariants enforced:
    - ``id`` is the caller-supplied employee id and the primary key, so two
      rows can never share an id.
    - ``base_salary`` and ``bonus_rate`` are Decimal (Numeric(38,9)).
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ems_kernel.db.base import Base


class EmployeeModel(Base):
    """ORM model for ``Employee``."""

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    base_salary: Mapped[Decimal] = mapped_column(nullable=False)
    bonus_rate: Mapped[Decimal] = mapped_column(nullable=False)
    performance_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_employees_name", "name"),
    )

    def to_dto(self):
        from ems_modules.employees.models import Employee
        return Employee(
            id=self.id,
            name=self.name,
            base_salary=self.base_salary,
            bonus_rate=self.bonus_rate,
            performance_score=self.performance_score,
        )

    @classmethod
    def from_dto(cls, dto) -> "EmployeeModel":
        return cls(
            id=dto.id,
            name=dto.name,
            base_salary=Decimal(str(dto.base_salary)),
            bonus_rate=Decimal(str(dto.bonus_rate)),
            performance_score=dto.performance_score,
        )

    def __repr__(self) -> str:
        return f"<EmployeeModel {self.id}: {self.name}>"
