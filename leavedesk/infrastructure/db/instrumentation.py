"""
===============================================================================
TARJETA CRC — infrastructure/db/instrumentation.py
===============================================================================

Clases:
  - TimedConnection (Proxy)
  - InstrumentedConnectionPool (Facade/Proxy)

Responsabilidades:
  - Medir conn.execute(...) sin tocar los repositorios.
  - Loguear queries lentas (baja cardinalidad: solo el tipo de sentencia).
  - Healthcheck opcional al adquirir una conexión (SELECT 1).
  - Si el healthcheck falla, devolver la conexión al pool antes de propagar.

Colaboradores:
  - crosscutting.logger
  - crosscutting.metrics.observe_db_query_duration
  - psycopg_pool.ConnectionPool (pool real)
===============================================================================
"""

from __future__ import annotations

import sys
import time
from typing import Any, ContextManager

from psycopg import Error as PsycopgError

from ...crosscutting.logger import logger
from ...crosscutting.metrics import observe_db_query_duration
from .errors import DatabaseConnectionError

DEFAULT_SLOW_QUERY_SECONDS = 0.25


def _statement_kind(sql: Any) -> str:
    """Tipo de sentencia para logs y métricas (SELECT, INSERT, ...)."""
    parts = str(sql).lstrip().split(None, 1)
    return parts[0].upper() if parts else "UNKNOWN"


class TimedConnection:
    """
    Proxy de conexión: intercepta execute() para medirlo.

    Todo lo demás se delega a la conexión real vía __getattr__.
    """

    def __init__(self, inner_conn, *, slow_query_seconds: float) -> None:
        self._conn = inner_conn
        self._slow = slow_query_seconds

    def execute(self, sql, *args, **kwargs):
        start = time.perf_counter()
        try:
            return self._conn.execute(sql, *args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            kind = _statement_kind(sql)
            observe_db_query_duration(kind, elapsed)
            if elapsed >= self._slow:
                logger.warning(
                    "query lenta en DB",
                    extra={"kind": kind, "seconds": round(elapsed, 4)},
                )

    def __getattr__(self, item: str):
        return getattr(self._conn, item)


class _ConnectionContext(ContextManager[TimedConnection]):
    """Envuelve el context manager del pool y entrega TimedConnection."""

    def __init__(
        self, inner_ctx, *, slow_query_seconds: float, healthcheck: bool
    ) -> None:
        self._inner_ctx = inner_ctx
        self._slow = slow_query_seconds
        self._healthcheck = healthcheck

    def __enter__(self) -> TimedConnection:
        try:
            conn = self._inner_ctx.__enter__()
        except PsycopgError as exc:
            raise DatabaseConnectionError(
                "No se pudo adquirir una conexión a la DB."
            ) from exc

        if self._healthcheck:
            try:
                conn.execute("SELECT 1")
            except PsycopgError as exc:
                # R: La conexión ya salió del pool; hay que devolverla.
                self._inner_ctx.__exit__(*sys.exc_info())
                raise DatabaseConnectionError(
                    "La conexión a la DB no respondió al healthcheck."
                ) from exc

        return TimedConnection(conn, slow_query_seconds=self._slow)

    def __exit__(self, exc_type, exc, tb) -> bool:
        return self._inner_ctx.__exit__(exc_type, exc, tb)


class InstrumentedConnectionPool:
    """
    Facade sobre el pool real.

    El gateway sigue usando `with pool.connection() as conn:` pero recibe
    una TimedConnection.
    """

    def __init__(
        self,
        inner_pool,
        *,
        slow_query_seconds: float = DEFAULT_SLOW_QUERY_SECONDS,
        healthcheck_on_acquire: bool = True,
    ) -> None:
        self._pool = inner_pool
        self._slow_seconds = slow_query_seconds
        self._healthcheck = healthcheck_on_acquire

    def connection(self, *args, **kwargs) -> ContextManager[TimedConnection]:
        inner_ctx = self._pool.connection(*args, **kwargs)
        return _ConnectionContext(
            inner_ctx,
            slow_query_seconds=self._slow_seconds,
            healthcheck=self._healthcheck,
        )

    def __getattr__(self, item: str):
        return getattr(self._pool, item)
