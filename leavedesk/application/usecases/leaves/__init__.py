"""
===============================================================================
CASOS DE USO DE LICENCIAS (API pública / exports)
===============================================================================
"""

from __future__ import annotations

from .create_leave import CreateLeaveUseCase
from .delete_leave import DeleteLeaveUseCase
from .get_leave import GetLeaveUseCase
from .leave_results import (
    DeleteLeaveResult,
    LeaveError,
    LeaveErrorCode,
    LeaveInput,
    LeaveResult,
    ListLeavesResult,
)
from .list_leaves import ListLeavesUseCase
from .update_leave import UpdateLeaveUseCase

__all__ = [
    # Casos de uso
    "ListLeavesUseCase",
    "GetLeaveUseCase",
    "CreateLeaveUseCase",
    "UpdateLeaveUseCase",
    "DeleteLeaveUseCase",
    # Entrada / resultados / errores
    "LeaveInput",
    "ListLeavesResult",
    "LeaveResult",
    "DeleteLeaveResult",
    "LeaveError",
    "LeaveErrorCode",
]
