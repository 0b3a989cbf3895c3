"""
===============================================================================
TARJETA CRC — infrastructure/db/gateway.py
===============================================================================

Clase:
  PersistenceGateway

Responsabilidades:
  - Ejecutar SQL parametrizado contra el pool (una conexión y una
    transacción por llamada).
  - Devolver un QueryOutcome (filas + rowcount, o error) en vez de lanzar.
  - Loguear la causa real una sola vez, con un error_id que el caller
    puede exponer.

Colaboradores:
  - InstrumentedConnectionPool (infrastructure/db/instrumentation.py)
  - crosscutting.exceptions.DatabaseError (payload de error del outcome)
  - infrastructure.repositories.postgres.* (únicos consumidores)

Restricciones:
  - El SQL siempre es parametrizado (placeholders %s); nunca interpolar input.
  - Las filas son dicts por nombre de columna (pool con dict_row).
  - Sin reintentos: una falla se reporta de inmediato.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from psycopg import Error as PsycopgError

from ...crosscutting.exceptions import DatabaseError
from ...crosscutting.logger import logger
from .errors import DatabasePoolError

Row = dict[str, Any]


@dataclass(frozen=True)
class QueryOutcome:
    """
    Resultado de una llamada al gateway.

    Contrato:
      - Éxito: error es None; rows tiene las filas devueltas (puede ser vacío)
        y rowcount la cantidad de filas afectadas/devueltas.
      - Falla: error no es None; rows está vacío.
    """

    rows: list[Row] = field(default_factory=list)
    rowcount: int = 0
    error: DatabaseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def first(self) -> Row | None:
        return self.rows[0] if self.rows else None


class PersistenceGateway:
    """Frontera sobre el store relacional."""

    def __init__(self, pool) -> None:
        self._pool = pool

    def fetch_one(
        self, query: str, params: Iterable[object] = (), *, op: str
    ) -> QueryOutcome:
        """Ejecuta una sentencia y se queda como máximo con la primera fila."""
        outcome = self._run(query, params, op=op)
        if outcome.ok and len(outcome.rows) > 1:
            return QueryOutcome(rows=outcome.rows[:1], rowcount=outcome.rowcount)
        return outcome

    def fetch_all(
        self, query: str, params: Iterable[object] = (), *, op: str
    ) -> QueryOutcome:
        return self._run(query, params, op=op)

    def execute(
        self, query: str, params: Iterable[object] = (), *, op: str
    ) -> QueryOutcome:
        """Ejecuta una mutación; también junta las filas de RETURNING (si hay)."""
        return self._run(query, params, op=op)

    def ping(self) -> bool:
        return self._run("SELECT 1 AS ok", (), op="ping").ok

    def _run(self, query: str, params: Iterable[object], *, op: str) -> QueryOutcome:
        try:
            with self._pool.connection() as conn:
                cur = conn.execute(query, tuple(params))
                rows = list(cur.fetchall()) if cur.description is not None else []
                rowcount = cur.rowcount if cur.rowcount >= 0 else len(rows)
                return QueryOutcome(rows=rows, rowcount=rowcount)
        except (PsycopgError, DatabasePoolError) as exc:
            error = DatabaseError(f"{op} failed: {exc}", original_error=exc)
            logger.error(
                "persistence gateway: query falló",
                exc_info=True,
                extra={"op": op, "error_id": error.error_id},
            )
            return QueryOutcome(error=error)
