"""
Name: Database Pool Tests

Responsibilities:
  - Pool lifecycle (init, get, close)
  - Fail fast on double init and on use before init
  - Connections are configured (statement_timeout) and dict rows

Notes:
  - Offline: psycopg_pool.ConnectionPool is mocked
"""

from unittest.mock import MagicMock, patch

import pytest

from leavedesk.infrastructure.db.errors import (
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
)
from leavedesk.infrastructure.db.instrumentation import InstrumentedConnectionPool
from leavedesk.infrastructure.db.pool import (
    _configure_connection,
    close_pool,
    get_pool,
    init_pool,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _clean_pool():
    close_pool()
    yield
    close_pool()


def test_init_pool_wraps_connection_pool():
    with patch("psycopg_pool.ConnectionPool") as MockPool:
        pool = init_pool("postgresql://test", min_size=2, max_size=10)

    MockPool.assert_called_once()
    kwargs = MockPool.call_args.kwargs
    assert kwargs["conninfo"] == "postgresql://test"
    assert kwargs["min_size"] == 2
    assert kwargs["max_size"] == 10
    assert "row_factory" in kwargs["kwargs"]
    assert isinstance(pool, InstrumentedConnectionPool)
    assert get_pool() is pool


def test_init_pool_twice_raises():
    with patch("psycopg_pool.ConnectionPool"):
        init_pool("postgresql://test", min_size=1, max_size=2)
        with pytest.raises(PoolAlreadyInitializedError, match="ya fue inicializado"):
            init_pool("postgresql://test", min_size=1, max_size=2)


def test_get_pool_without_init_raises():
    with pytest.raises(PoolNotInitializedError, match="no inicializado"):
        get_pool()


def test_close_pool_closes_and_is_idempotent():
    with patch("psycopg_pool.ConnectionPool") as MockPool:
        real_pool = MagicMock()
        MockPool.return_value = real_pool
        init_pool("postgresql://test", min_size=1, max_size=2)

    close_pool()
    close_pool()

    real_pool.close.assert_called_once()
    with pytest.raises(PoolNotInitializedError):
        get_pool()


def test_configure_connection_sets_statement_timeout():
    conn = MagicMock()
    _configure_connection(conn, statement_timeout_ms=1500)

    conn.execute.assert_called_once_with("SET statement_timeout = 1500")
    conn.commit.assert_called_once()


def test_configure_connection_skips_zero_timeout():
    conn = MagicMock()
    _configure_connection(conn, statement_timeout_ms=0)
    conn.execute.assert_not_called()
