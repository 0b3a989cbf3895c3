"""
===============================================================================
TARJETA CRC — infrastructure/db/pool.py
===============================================================================

Componente:
  Pool de conexiones PostgreSQL (uno por proceso)

Responsabilidades:
  - Inicializar, exponer y cerrar el pool.
  - Configurar conexiones: statement_timeout.
  - Devolver un pool instrumentado (observabilidad sin tocar repositorios).

Colaboradores:
  - psycopg_pool.ConnectionPool
  - infrastructure/db/instrumentation.InstrumentedConnectionPool

Principios:
  - Fail fast (doble init, uso antes de init)
  - El pool se construye una vez al arrancar y se pasa explícito al gateway
===============================================================================
"""

from __future__ import annotations

import threading
from functools import partial
from typing import Optional

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError
from .instrumentation import InstrumentedConnectionPool

_pool: Optional[InstrumentedConnectionPool] = None
_pool_lock = threading.Lock()


def _configure_connection(conn, *, statement_timeout_ms: int) -> None:
    """Setup por conexión que corre el pool al crear cada conexión."""
    if statement_timeout_ms > 0:
        conn.execute(f"SET statement_timeout = {int(statement_timeout_ms)}")
        conn.commit()


def init_pool(
    database_url: str,
    min_size: int,
    max_size: int,
    *,
    statement_timeout_ms: int = 0,
) -> InstrumentedConnectionPool:
    """Inicializa el pool (una vez por proceso) y lo devuelve."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("El pool ya fue inicializado.")

        # R: Import lazy: los módulos se importan sin driver de DB configurado.
        from psycopg.rows import dict_row
        from psycopg_pool import ConnectionPool

        logger.info(
            "inicializando pool de DB",
            extra={"min_size": min_size, "max_size": max_size},
        )

        real_pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=partial(
                _configure_connection, statement_timeout_ms=statement_timeout_ms
            ),
            kwargs={"row_factory": dict_row},
            open=True,
        )

        _pool = InstrumentedConnectionPool(real_pool)
        logger.info("pool de DB inicializado")
        return _pool


def get_pool() -> InstrumentedConnectionPool:
    """Devuelve el pool del proceso."""
    if _pool is None:
        raise PoolNotInitializedError(
            "Pool no inicializado. Llamar init_pool() primero."
        )
    return _pool


def close_pool() -> None:
    """Cierra el pool (idempotente)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            logger.info("cerrando pool de DB")
            try:
                _pool.close()
            finally:
                _pool = None
