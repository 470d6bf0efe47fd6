from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from mysql.connector import errors

from ..core.constants import ER_DUP_ENTRY, ER_LOCK_DEADLOCK, ER_LOCK_WAIT_TIMEOUT
from ..core.exceptions import StorageUnavailableError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_TRANSIENT_ERRNOS = {ER_LOCK_WAIT_TIMEOUT, ER_LOCK_DEADLOCK}


def is_transient(err: errors.Error) -> bool:
    """Connection loss, pool exhaustion and lock timeouts: the caller may retry."""
    if isinstance(err, (errors.InterfaceError, errors.OperationalError, errors.PoolError)):
        return True
    return err.errno in _TRANSIENT_ERRNOS


def is_duplicate_key(err: errors.Error) -> bool:
    return isinstance(err, errors.IntegrityError) and err.errno == ER_DUP_ENTRY


def _rollback(conn) -> None:
    try:
        conn.rollback()
    except errors.Error as err:
        # Connection is already gone; the server discards the transaction.
        logger.debug("rollback failed: %s", err)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Run one transaction: commit on success, roll back on any exception.

    Transient driver errors surface as StorageUnavailableError; every other
    driver error (e.g. IntegrityError) propagates unchanged for the repository
    to interpret.
    """

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except errors.Error as err:
        _rollback(conn)
        if is_transient(err):
            logger.warning("storage error (errno=%s): %s", err.errno, err)
            raise StorageUnavailableError("Database is unavailable, please retry") from err
        raise
    except Exception:
        _rollback(conn)
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
