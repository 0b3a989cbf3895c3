"""
===============================================================================
CASO DE USO: Actualizar licencia
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    UpdateLeaveUseCase

Responsabilidades:
    - Reemplazar todos los campos de una licencia existente.
    - NOT_FOUND cuando no se afectó ninguna fila.

Colaboradores:
    - LeaveRepository.update_leave() / get_leave()
    - ProfileRepository (modo estricto: el dueño debe existir)

Reglas:
    - Un id inexistente es NOT_FOUND aunque el payload sea inválido (campos
      faltantes, tipos rechazados o reglas estrictas): ante cualquier error
      de validación primero se busca la licencia y la ausencia gana.
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import LeaveRepository, ProfileRepository
from .leave_results import LeaveInput, LeaveResult, leave_not_found, leave_store_error
from .leave_rules import check_leave_input, to_leave_fields


class UpdateLeaveUseCase:
    def __init__(
        self,
        leave_repository: LeaveRepository,
        profile_repository: ProfileRepository | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self._leaves = leave_repository
        self._profiles = profile_repository
        self._strict = strict

    def execute(self, leave_id: int, data: LeaveInput) -> LeaveResult:
        error = check_leave_input(data, strict=self._strict, profiles=self._profiles)
        if error is not None:
            existing = self._leaves.get_leave(leave_id)
            if not existing.ok:
                return LeaveResult(error=leave_store_error(existing.error))
            if existing.value is None:
                return LeaveResult(error=leave_not_found())
            return LeaveResult(error=error)

        stored = self._leaves.update_leave(leave_id, to_leave_fields(data))
        if not stored.ok:
            return LeaveResult(error=leave_store_error(stored.error))
        if stored.value is None:
            return LeaveResult(error=leave_not_found())
        return LeaveResult(leave=stored.value)
