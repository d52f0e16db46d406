"""
EMS configuration.

Single public entry point for runtime settings: ``load_settings()``.
"""

from ems_config.loader import EmsSettings, load_settings, parse_settings

__all__ = [
    "EmsSettings",
    "load_settings",
    "parse_settings",
]
