"""
Settings Loader (``ems_config.loader``).

Responsibility
--------------
Loads a YAML settings file and parses it into typed ``EmsSettings``:
the ``PayrollConfig`` for the engine and the database URL for the employee
store.

Layout::

    payroll:
      full_attendance_days: 22
      default_bonus_rate: "0.05"
      bonus_tiers:
        - {threshold: 85, rate: "0.20"}
        - {threshold: 70, rate: "0.10"}
    database:
      url: sqlite://

The ``EMS_DATABASE_URL`` environment variable overrides ``database.url``.

Failure modes
-------------
* Missing file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* A section that is not a mapping, an unknown key, or a value rejected by
  ``PayrollConfig``  -> ``ConfigurationError``.
"""

from __future__ import annotations

import os
from decimal import InvalidOperation
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from ems_kernel.exceptions import ConfigurationError
from ems_kernel.logging_config import get_logger
from ems_modules.payroll.config import PayrollConfig

logger = get_logger("config.loader")

DATABASE_URL_ENV = "EMS_DATABASE_URL"
DEFAULT_DATABASE_URL = "sqlite://"


@dataclass(frozen=True)
class EmsSettings:
    """Runtime settings assembled from a settings file and the environment."""

    payroll: PayrollConfig = field(default_factory=PayrollConfig.with_defaults)
    database_url: str = DEFAULT_DATABASE_URL


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Returns an empty dict for an empty file.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "top level must be a mapping")
    return data


def _section(data: Mapping[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(name, "section must be a mapping")
    return value


def parse_settings(
    data: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> EmsSettings:
    """Build ``EmsSettings`` from an already-parsed settings mapping."""
    environ = os.environ if environ is None else environ

    payroll_data = _section(data, "payroll")
    try:
        payroll = PayrollConfig.from_dict(payroll_data)
    except (TypeError, ValueError, InvalidOperation) as exc:
        raise ConfigurationError("payroll", str(exc)) from exc

    database_url = environ.get(DATABASE_URL_ENV) or _section(data, "database").get(
        "url", DEFAULT_DATABASE_URL
    )

    logger.info(
        "settings_parsed",
        extra={
            "payroll_keys": sorted(payroll_data),
            "database_url_from_env": DATABASE_URL_ENV in environ,
        },
    )
    return EmsSettings(payroll=payroll, database_url=database_url)


def load_settings(
    path: Path | str,
    environ: Mapping[str, str] | None = None,
) -> EmsSettings:
    """Load and parse the settings file at ``path``."""
    path = Path(path)
    logger.info("settings_loading", extra={"path": str(path)})
    return parse_settings(load_yaml_file(path), environ=environ)
