from __future__ import annotations

import re

import pytest

from src.attendance_ledger.attendance_ledger.database import bootstrap as bootstrap_module
from src.attendance_ledger.attendance_ledger.database.bootstrap import apply_schema, read_schema_sql


def _column_definition(sql: str, table: str, column: str) -> str:
    body = re.search(rf"CREATE TABLE IF NOT EXISTS {table} \((.*?)\n\)", sql, re.S).group(1)
    for line in body.splitlines():
        if line.strip().startswith(column + " "):
            return " ".join(line.split())
    raise AssertionError(f"{table}.{column} not declared")


def test_packaged_schema_is_readable():
    sql = read_schema_sql()

    assert "CREATE TABLE IF NOT EXISTS persons" in sql
    assert "CREATE TABLE IF NOT EXISTS attendance_records" in sql


@pytest.mark.parametrize("column", ["external_id", "contact"])
def test_person_identifiers_use_binary_collation(column):
    definition = _column_definition(read_schema_sql(), "persons", column)

    assert "COLLATE utf8mb4_bin" in definition
    assert "NOT NULL" in definition


def test_explicit_schema_path_wins(tmp_path):
    custom = tmp_path / "schema.sql"
    custom.write_text("CREATE TABLE t (id INT);", encoding="utf-8")

    assert read_schema_sql(custom) == "CREATE TABLE t (id INT);"


def test_apply_schema_runs_each_table_statement(monkeypatch, make_db):
    opened = []

    def fake_connect(**kwargs):
        conn, _ = make_db()
        opened.append((kwargs, conn))
        return conn

    monkeypatch.setattr(bootstrap_module.mysql.connector, "connect", fake_connect)
    db_config = {"host": "db", "user": "u", "password": "p", "database": "ledger_x"}

    count = apply_schema(db_config)

    (server_kwargs, server_conn), (db_kwargs, db_conn) = opened
    assert "database" not in server_kwargs
    assert server_conn.executed[0][0].startswith("CREATE DATABASE IF NOT EXISTS `ledger_x`")
    assert db_kwargs["database"] == "ledger_x"
    statements = [sql for sql, _ in db_conn.executed]
    assert count == len(statements) == 2
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS persons")
    assert "external_id VARCHAR(50) NOT NULL COLLATE utf8mb4_bin" in statements[0]
    assert statements[1].startswith("CREATE TABLE IF NOT EXISTS attendance_records")
    assert not any("USE " in s or "--" in s for s in statements)
    assert db_conn.committed and db_conn.closed and server_conn.closed
