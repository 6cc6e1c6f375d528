from __future__ import annotations

from datetime import datetime

import mysql.connector
import pytest

from src.jornada_system.jornada_system.core.exceptions import BackendError
from src.jornada_system.jornada_system.database.bootstrap import (
    _strip_create_db_and_use,
    _strip_line_comments,
    iter_sql_statements,
)
from src.jornada_system.jornada_system.database.connection import DBConfig
from src.jornada_system.jornada_system.database.mysql_base import db_cursor, normalize_mysql_datetime


def test_iter_sql_statements_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES ('it\\'s;');\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        "INSERT INTO t VALUES ('it\\'s;')",
        "SELECT 1",
    ]


def test_database_statements_and_comments_are_stripped():
    sql = "CREATE DATABASE foo;\nUSE foo;\n-- comment\nCREATE TABLE x (id INT);\n"

    cleaned = _strip_line_comments(_strip_create_db_and_use(sql))

    assert list(iter_sql_statements(cleaned)) == ["CREATE TABLE x (id INT)"]


def test_normalize_mysql_datetime_variants():
    expected = datetime(2026, 2, 2, 9, 30)

    assert normalize_mysql_datetime(expected) is expected
    assert normalize_mysql_datetime("2026-02-02 09:30:00") == expected
    assert normalize_mysql_datetime(b"2026-02-02T09:30:00") == expected
    assert normalize_mysql_datetime("  ") is None
    assert normalize_mysql_datetime(None) is None
    with pytest.raises(TypeError):
        normalize_mysql_datetime(12)


def test_db_config_defaults():
    cfg = DBConfig.from_dict({"user": "app"})

    assert cfg.describe() == "app@localhost:3306/jornada_db"
    assert cfg.connection_timeout == 10


class _FakeCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class _FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class _Factory:
    def __init__(self, conn=None, error=None):
        self._conn = conn
        self._error = error

    def connect(self):
        if self._error:
            raise self._error
        return self._conn


def test_db_cursor_commits_on_success():
    conn = _FakeConn(_FakeCursor())

    with db_cursor(_Factory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and conn.closed
    assert not conn.rolled_back


def test_db_cursor_wraps_driver_errors():
    conn = _FakeConn(_FakeCursor(error=mysql.connector.Error(msg="tabla inexistente")))

    with pytest.raises(BackendError, match="tabla inexistente"):
        with db_cursor(_Factory(conn)) as (_, cur):
            cur.execute("SELECT * FROM nada")

    assert conn.rolled_back and conn.closed
    assert not conn.committed


def test_db_cursor_wraps_connect_errors():
    with pytest.raises(BackendError, match="sin conexión"):
        with db_cursor(_Factory(error=mysql.connector.Error(msg="sin conexión"))):
            pass
