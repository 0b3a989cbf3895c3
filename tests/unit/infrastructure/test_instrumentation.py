"""
Name: Instrumented Pool Tests

Responsibilities:
  - Connections handed out are TimedConnection proxies
  - Healthcheck on acquire; driver failure -> DatabaseConnectionError
"""

from unittest.mock import MagicMock

import psycopg
import pytest

from leavedesk.infrastructure.db.errors import DatabaseConnectionError
from leavedesk.infrastructure.db.instrumentation import (
    InstrumentedConnectionPool,
    TimedConnection,
    _statement_kind,
)

pytestmark = pytest.mark.unit


def _inner_pool(conn):
    ctx = MagicMock()
    ctx.__enter__.return_value = conn
    ctx.__exit__.return_value = False
    pool = MagicMock()
    pool.connection.return_value = ctx
    return pool


@pytest.mark.parametrize(
    "sql, kind",
    [
        ("SELECT 1", "SELECT"),
        ("  insert into users values (1)", "INSERT"),
        ("\n    UPDATE leaves SET x = 1", "UPDATE"),
        ("", "UNKNOWN"),
    ],
)
def test_statement_kind(sql, kind):
    assert _statement_kind(sql) == kind


def test_connection_is_timed_and_healthchecked():
    conn = MagicMock()
    pool = InstrumentedConnectionPool(_inner_pool(conn))

    with pool.connection() as timed:
        assert isinstance(timed, TimedConnection)
        timed.execute("SELECT user_id FROM users WHERE user_id = %s", (1,))

    conn.execute.assert_any_call("SELECT 1")
    conn.execute.assert_any_call("SELECT user_id FROM users WHERE user_id = %s", (1,))


def test_healthcheck_can_be_disabled():
    conn = MagicMock()
    pool = InstrumentedConnectionPool(_inner_pool(conn), healthcheck_on_acquire=False)

    with pool.connection():
        pass

    conn.execute.assert_not_called()


def test_failed_healthcheck_raises_connection_error():
    conn = MagicMock()
    conn.execute.side_effect = psycopg.OperationalError("server closed")
    inner = _inner_pool(conn)
    pool = InstrumentedConnectionPool(inner)

    with pytest.raises(DatabaseConnectionError):
        with pool.connection():
            pass

    # The connection went back to the pool even though the check failed.
    ctx = inner.connection.return_value
    ctx.__exit__.assert_called_once()
    assert ctx.__exit__.call_args.args[0] is psycopg.OperationalError


def test_other_attributes_are_delegated():
    inner = MagicMock()
    inner.get_stats.return_value = {"pool_size": 3}

    assert InstrumentedConnectionPool(inner).get_stats() == {"pool_size": 3}
