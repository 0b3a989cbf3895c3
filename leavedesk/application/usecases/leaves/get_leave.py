"""
CASO DE USO: Obtener licencia

Una licencia por id; NOT_FOUND si no existe.
"""

from __future__ import annotations

from ....domain.repositories import LeaveRepository
from .leave_results import LeaveResult, leave_not_found, leave_store_error


class GetLeaveUseCase:
    def __init__(self, leave_repository: LeaveRepository) -> None:
        self._leaves = leave_repository

    def execute(self, leave_id: int) -> LeaveResult:
        stored = self._leaves.get_leave(leave_id)
        if not stored.ok:
            return LeaveResult(error=leave_store_error(stored.error))
        if stored.value is None:
            return LeaveResult(error=leave_not_found())
        return LeaveResult(leave=stored.value)
