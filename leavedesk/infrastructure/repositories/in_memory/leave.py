"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/leave.py
============================================================
Clase: InMemoryLeaveRepository

Responsabilidades:
  - Guardar licencias en memoria (tests / dev local).
  - Generar leave ids como un BIGSERIAL: crecientes y nunca reutilizados.

Colaboradores:
  - domain.entities.LeaveRequest / LeaveFields
  - domain.repositories.LeaveRepository (contrato)
============================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import count
from threading import Lock
from typing import Dict, List

from ....domain.entities import LeaveFields, LeaveRequest
from ....domain.repositories import LeaveRepository, StoreResult


class InMemoryLeaveRepository(LeaveRepository):
    """Store de licencias en memoria, thread-safe."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._leaves: Dict[int, LeaveRequest] = {}
        self._ids = count(1)

    def list_leaves(self) -> StoreResult[List[LeaveRequest]]:
        with self._lock:
            return StoreResult.success(list(self._leaves.values()))

    def get_leave(self, leave_id: int) -> StoreResult[LeaveRequest]:
        with self._lock:
            return StoreResult.success(self._leaves.get(leave_id))

    def create_leave(self, fields: LeaveFields) -> StoreResult[LeaveRequest]:
        with self._lock:
            leave = LeaveRequest.from_fields(
                next(self._ids), fields, created_at=datetime.now(timezone.utc)
            )
            self._leaves[leave.leave_id] = leave
            return StoreResult.success(leave)

    def update_leave(
        self, leave_id: int, fields: LeaveFields
    ) -> StoreResult[LeaveRequest]:
        with self._lock:
            current = self._leaves.get(leave_id)
            if current is None:
                return StoreResult.success(None)
            updated = LeaveRequest.from_fields(
                leave_id, fields, created_at=current.created_at
            )
            self._leaves[leave_id] = updated
            return StoreResult.success(updated)

    def delete_leave(self, leave_id: int) -> StoreResult[LeaveRequest]:
        with self._lock:
            return StoreResult.success(self._leaves.pop(leave_id, None))

    def ping(self) -> bool:
        return True
