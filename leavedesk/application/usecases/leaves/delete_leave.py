"""
===============================================================================
CASO DE USO: Eliminar licencia
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    DeleteLeaveUseCase

Responsabilidades:
    - Borrar la licencia (hard delete) y devolverla como `deletedLeave`.
    - NOT_FOUND si no existe (un segundo delete del mismo id es 404).

Colaboradores:
    - LeaveRepository.delete_leave()
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.logger import logger
from ....domain.repositories import LeaveRepository
from .leave_results import (
    MSG_LEAVE_DELETED,
    DeleteLeaveResult,
    leave_not_found,
    leave_store_error,
)


class DeleteLeaveUseCase:
    def __init__(self, leave_repository: LeaveRepository) -> None:
        self._leaves = leave_repository

    def execute(self, leave_id: int) -> DeleteLeaveResult:
        stored = self._leaves.delete_leave(leave_id)
        if not stored.ok:
            return DeleteLeaveResult(error=leave_store_error(stored.error))
        if stored.value is None:
            return DeleteLeaveResult(error=leave_not_found())

        logger.info("licencia eliminada", extra={"leave_id": leave_id})
        return DeleteLeaveResult(message=MSG_LEAVE_DELETED, leave=stored.value)
