from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DataSourceError, DataSourceTimeoutError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# Client-side codes mysql-connector raises when a connect/read times out.
_TIMEOUT_ERRNOS = {
    errorcode.CR_CONN_HOST_ERROR,
    errorcode.CR_SERVER_LOST,
    errorcode.ER_LOCK_WAIT_TIMEOUT,
}


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Read-only cursor; driver errors surface as DataSourceError."""

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise _translate(e) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error as e:
        raise _translate(e) from e
    finally:
        conn.close()


def _translate(error: mysql.connector.Error) -> DataSourceError:
    if getattr(error, "errno", None) in _TIMEOUT_ERRNOS:
        logger.warning("Data source timed out: %s", error)
        return DataSourceTimeoutError(str(error))
    logger.error("Data source query failed: %s", error)
    return DataSourceError(str(error))


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(values: Sequence[object]) -> str:
    """Placeholder list for ``IN (...)``; callers guard against empty input."""
    return ", ".join(["%s"] * len(values))
