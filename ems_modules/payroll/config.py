"""
Payroll Configuration Schema.

Defines the calculation constants of the payroll engine with their
standard defaults.  Company-specific values are loaded at runtime through
``ems_config.loader``.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Self

from ems_kernel.logging_config import get_logger

logger = get_logger("modules.payroll.config")


def _finite_decimal(name: str, value) -> Decimal:
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"{name} must be finite, got {value!r}")
    return amount


@dataclass(frozen=True)
class BonusTier:
    """Bonus rate granted when the performance score reaches ``threshold``."""
    threshold: int
    rate: Decimal

    def __post_init__(self):
        object.__setattr__(self, "rate", _finite_decimal("bonus tier rate", self.rate))
        if self.rate < 0 or self.rate > 1:
            raise ValueError(f"bonus tier rate must be between 0 and 1, got {self.rate}")


def _default_tiers() -> tuple[BonusTier, ...]:
    return (
        BonusTier(threshold=85, rate=Decimal("0.20")),
        BonusTier(threshold=70, rate=Decimal("0.10")),
    )


@dataclass
class PayrollConfig:
    """
    Configuration schema for the payroll engine.

    Tiers are checked in order and the first one whose threshold the score
    reaches wins; a score below every threshold gets ``default_bonus_rate``.

        config = PayrollConfig(full_attendance_days=21)
    """

    # Days present that count as full attendance for any month
    full_attendance_days: int = 22

    # Bonus tiers, highest threshold first
    bonus_tiers: tuple[BonusTier, ...] = field(default_factory=_default_tiers)
    default_bonus_rate: Decimal = Decimal("0.05")

    # Rounding applied to gross, bonus and tax
    amount_quantum: Decimal = Decimal("0.01")

    def __post_init__(self):
        if self.full_attendance_days <= 0:
            raise ValueError("full_attendance_days must be positive")

        self.default_bonus_rate = _finite_decimal(
            "default_bonus_rate", self.default_bonus_rate,
        )
        if self.default_bonus_rate < 0 or self.default_bonus_rate > 1:
            raise ValueError("default_bonus_rate must be between 0 and 1")

        self.amount_quantum = _finite_decimal("amount_quantum", self.amount_quantum)
        if self.amount_quantum <= 0:
            raise ValueError("amount_quantum must be positive")

        thresholds = [tier.threshold for tier in self.bonus_tiers]
        if thresholds != sorted(thresholds, reverse=True):
            raise ValueError("bonus_tiers must be sorted by threshold descending")
        if len(set(thresholds)) != len(thresholds):
            raise ValueError("bonus_tiers thresholds must be unique")

        logger.debug(
            "payroll_config_initialized",
            extra={
                "full_attendance_days": self.full_attendance_days,
                "bonus_tiers": [
                    {"threshold": t.threshold, "rate": str(t.rate)}
                    for t in self.bonus_tiers
                ],
                "default_bonus_rate": str(self.default_bonus_rate),
            },
        )

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with the standard constants."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from a dictionary (e.g., a parsed settings file)."""
        logger.info(
            "payroll_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        data = dict(data)
        if "bonus_tiers" in data:
            data["bonus_tiers"] = tuple(
                BonusTier(**tier) if isinstance(tier, dict) else tier
                for tier in data["bonus_tiers"]
            )
        return cls(**data)
