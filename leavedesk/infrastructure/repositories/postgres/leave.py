"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/leave.py
============================================================
Clase: PostgresLeaveRepository

Responsabilidades:
  - CRUD sobre la tabla `leaves` a través del PersistenceGateway.
  - Mapear filas crudas -> `LeaveRequest` del dominio.

Colaboradores:
  - infrastructure.db.gateway.PersistenceGateway
  - domain.entities.LeaveRequest / LeaveFields
  - domain.repositories.StoreResult

Restricciones / Notas:
  - leave_id es BIGSERIAL: lo genera PostgreSQL, nunca el caller.
  - user_id se guarda por valor (sin foreign key a users).
  - Orden de listado: leave_id ASC (orden de inserción).
============================================================
"""

from __future__ import annotations

from typing import List

from ....domain.entities import LeaveFields, LeaveRequest
from ....domain.repositories import StoreFailure, StoreResult
from ...db.gateway import PersistenceGateway, QueryOutcome, Row

_LEAVE_COLUMNS = (
    "leave_id, date_from, date_to, leave_type, reason, "
    "emergency_contact, user_id, created_at"
)


def _row_to_leave(row: Row) -> LeaveRequest:
    return LeaveRequest(
        leave_id=row["leave_id"],
        date_from=row["date_from"],
        date_to=row["date_to"],
        leave_type=row["leave_type"],
        reason=row["reason"],
        emergency_contact=row["emergency_contact"],
        user_id=row["user_id"],
        created_at=row.get("created_at"),
    )


def _single(outcome: QueryOutcome) -> StoreResult[LeaveRequest]:
    if not outcome.ok:
        return StoreResult.failure(
            StoreFailure(message=outcome.error.message, error_id=outcome.error.error_id)
        )
    row = outcome.first
    return StoreResult.success(_row_to_leave(row) if row else None)


def _field_params(fields: LeaveFields) -> tuple:
    return (
        fields.date_from,
        fields.date_to,
        fields.leave_type,
        fields.reason,
        fields.emergency_contact,
        fields.user_id,
    )


class PostgresLeaveRepository:
    """Persistencia de licencias en PostgreSQL."""

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway

    def list_leaves(self) -> StoreResult[List[LeaveRequest]]:
        outcome = self._gateway.fetch_all(
            f"SELECT {_LEAVE_COLUMNS} FROM leaves ORDER BY leave_id ASC",
            op="list_leaves",
        )
        if not outcome.ok:
            return StoreResult.failure(
                StoreFailure(
                    message=outcome.error.message, error_id=outcome.error.error_id
                )
            )
        return StoreResult.success([_row_to_leave(r) for r in outcome.rows])

    def get_leave(self, leave_id: int) -> StoreResult[LeaveRequest]:
        return _single(
            self._gateway.fetch_one(
                f"SELECT {_LEAVE_COLUMNS} FROM leaves WHERE leave_id = %s",
                (leave_id,),
                op="get_leave",
            )
        )

    def create_leave(self, fields: LeaveFields) -> StoreResult[LeaveRequest]:
        return _single(
            self._gateway.execute(
                f"""
                    INSERT INTO leaves (
                        date_from, date_to, leave_type, reason,
                        emergency_contact, user_id
                    )
                    VALUES (%s, %s, %s, %s, %s, %s)
                    RETURNING {_LEAVE_COLUMNS}
                """,
                _field_params(fields),
                op="create_leave",
            )
        )

    def update_leave(
        self, leave_id: int, fields: LeaveFields
    ) -> StoreResult[LeaveRequest]:
        return _single(
            self._gateway.execute(
                f"""
                    UPDATE leaves
                    SET date_from = %s, date_to = %s, leave_type = %s,
                        reason = %s, emergency_contact = %s, user_id = %s
                    WHERE leave_id = %s
                    RETURNING {_LEAVE_COLUMNS}
                """,
                (*_field_params(fields), leave_id),
                op="update_leave",
            )
        )

    def delete_leave(self, leave_id: int) -> StoreResult[LeaveRequest]:
        return _single(
            self._gateway.execute(
                f"DELETE FROM leaves WHERE leave_id = %s RETURNING {_LEAVE_COLUMNS}",
                (leave_id,),
                op="delete_leave",
            )
        )

    def ping(self) -> bool:
        return self._gateway.ping()
