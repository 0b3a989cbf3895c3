"""
CASO DE USO: Listar licencias

Devuelve todas las licencias, ordenadas por leave id (orden de inserción).
"""

from __future__ import annotations

from ....domain.repositories import LeaveRepository
from .leave_results import ListLeavesResult, leave_store_error


class ListLeavesUseCase:
    def __init__(self, leave_repository: LeaveRepository) -> None:
        self._leaves = leave_repository

    def execute(self) -> ListLeavesResult:
        stored = self._leaves.list_leaves()
        if not stored.ok:
            return ListLeavesResult(leaves=[], error=leave_store_error(stored.error))
        return ListLeavesResult(leaves=stored.value or [])
