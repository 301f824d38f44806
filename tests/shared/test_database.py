"""Tests for shared/database.py."""

from unittest.mock import MagicMock

from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from shared.database import check_connection, create_db_engine, init_db


class TestCreateDbEngine:
    def test_in_memory_sqlite_uses_static_pool(self):
        engine = create_db_engine("sqlite://")
        try:
            assert isinstance(engine.pool, StaticPool)
        finally:
            engine.dispose()

    def test_file_sqlite_is_not_pinned(self, tmp_path):
        engine = create_db_engine(f"sqlite:///{tmp_path / 'app.db'}")
        try:
            assert not isinstance(engine.pool, StaticPool)
        finally:
            engine.dispose()


class TestInitDb:
    def test_creates_tables(self):
        engine = create_db_engine("sqlite://")
        try:
            init_db(engine)
            tables = set(inspect(engine).get_table_names())
            assert {"users", "orders"} <= tables
        finally:
            engine.dispose()

    def test_is_idempotent(self, engine):
        init_db(engine)
        assert "users" in inspect(engine).get_table_names()


class TestCheckConnection:
    def test_live_database(self, engine):
        assert check_connection(engine) is True

    def test_unreachable_database(self):
        engine = MagicMock()
        engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        assert check_connection(engine) is False
