"""Tests for engine initialization and table management (ems_kernel/db/engine.py)."""

import pytest
from sqlalchemy import inspect

from ems_kernel.db.engine import (
    create_tables,
    drop_tables,
    get_engine,
    get_session,
    init_engine_from_url,
    reset_engine,
)


class TestUninitialized:

    def test_get_engine_before_init(self):
        reset_engine()
        with pytest.raises(RuntimeError, match="not initialized"):
            get_engine()

    def test_get_session_before_init(self):
        reset_engine()
        with pytest.raises(RuntimeError, match="not initialized"):
            get_session()


class TestTables:

    def test_create_and_drop(self, captured_logs):
        init_engine_from_url("sqlite://")
        try:
            create_tables()
            assert "employees" in inspect(get_engine()).get_table_names()

            drop_tables()
            assert "employees" not in inspect(get_engine()).get_table_names()
        finally:
            reset_engine()

        created = [r for r in captured_logs() if r["message"] == "tables_created"]
        assert created[0]["tables"] == ["employees"]
