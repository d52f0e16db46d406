"""Tests for the YAML settings loader (ems_config/loader.py)."""

from decimal import Decimal

import pytest
import yaml

from ems_config.loader import (
    DATABASE_URL_ENV,
    DEFAULT_DATABASE_URL,
    load_settings,
    load_yaml_file,
    parse_settings,
)
from ems_kernel.exceptions import ConfigurationError

SETTINGS_YAML = """
payroll:
  full_attendance_days: 21
  default_bonus_rate: "0.04"
  bonus_tiers:
    - {threshold: 90, rate: "0.25"}
    - {threshold: 75, rate: "0.12"}
database:
  url: sqlite:///payroll.db
"""


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "ems.yaml"
    path.write_text(SETTINGS_YAML, encoding="utf-8")
    return path


class TestLoadSettings:

    def test_full_file(self, settings_file):
        settings = load_settings(settings_file, environ={})
        assert settings.payroll.full_attendance_days == 21
        assert settings.payroll.default_bonus_rate == Decimal("0.04")
        assert settings.payroll.bonus_tiers[0].threshold == 90
        assert settings.database_url == "sqlite:///payroll.db"

    def test_env_overrides_database_url(self, settings_file):
        settings = load_settings(
            settings_file,
            environ={DATABASE_URL_ENV: "postgresql://ems@localhost/ems"},
        )
        assert settings.database_url == "postgresql://ems@localhost/ems"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        settings = load_settings(path, environ={})
        assert settings.payroll.full_attendance_days == 22
        assert settings.database_url == DEFAULT_DATABASE_URL

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.yaml", environ={})

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("payroll: [unclosed", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_yaml_file(path)


class TestParseSettings:

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_settings({"payroll": ["not", "a", "mapping"]}, environ={})
        assert exc_info.value.section == "payroll"

    def test_unknown_payroll_key(self):
        with pytest.raises(ConfigurationError, match="payroll"):
            parse_settings({"payroll": {"overtime": True}}, environ={})

    def test_invalid_payroll_value(self):
        with pytest.raises(ConfigurationError, match="full_attendance_days"):
            parse_settings({"payroll": {"full_attendance_days": -1}}, environ={})

    def test_non_numeric_bonus_rate(self):
        with pytest.raises(ConfigurationError, match="default_bonus_rate") as exc_info:
            parse_settings({"payroll": {"default_bonus_rate": "five percent"}}, environ={})
        assert exc_info.value.section == "payroll"

    def test_non_numeric_tier_rate(self):
        with pytest.raises(ConfigurationError, match="bonus tier rate"):
            parse_settings(
                {"payroll": {"bonus_tiers": [{"threshold": 85, "rate": "a lot"}]}},
                environ={},
            )

    def test_non_numeric_attendance_days(self):
        with pytest.raises(ConfigurationError):
            parse_settings({"payroll": {"full_attendance_days": "twenty"}}, environ={})

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_yaml_file(path)
