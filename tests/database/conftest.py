from __future__ import annotations

from typing import Any, Optional

import pytest


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self._conn = conn
        self.lastrowid: Optional[int] = None
        self.rowcount = 0
        self._result: list[dict] = []
        self.closed = False

    def execute(self, sql: str, params: tuple = ()) -> None:
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))
        if self._conn.errors:
            err = self._conn.errors.pop(0)
            if err is not None:
                raise err
        self._result = self._conn.results.pop(0) if self._conn.results else []
        self.lastrowid = self._conn.lastrowid

    def fetchone(self) -> Optional[dict]:
        return self._result[0] if self._result else None

    def fetchall(self) -> list[dict]:
        return list(self._result)

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    """Records statements; ``results`` feed successive executes, ``errors`` make them fail."""

    def __init__(self, *, results: Optional[list[list[dict]]] = None, errors: Optional[list[Any]] = None):
        self.results = list(results or [])
        self.errors = list(errors or [])
        self.executed: list[tuple[str, tuple]] = []
        self.lastrowid: Optional[int] = None
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    def connect(self) -> FakeConnection:
        return self.conn


@pytest.fixture
def make_db():
    def _make(**kwargs) -> tuple[FakeConnection, FakeConnFactory]:
        conn = FakeConnection(**kwargs)
        return conn, FakeConnFactory(conn)

    return _make
