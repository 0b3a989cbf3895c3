"""
===============================================================================
CASO DE USO: Crear licencia
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    CreateLeaveUseCase

Responsabilidades:
    - Validar el input (leave_rules.check_leave_input).
    - Persistir la licencia; el store genera leave_id.
    - Devolver la licencia persistida.

Colaboradores:
    - LeaveRepository.create_leave()
    - ProfileRepository (modo estricto: el dueño debe existir)
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.logger import logger
from ....domain.repositories import LeaveRepository, ProfileRepository
from .leave_results import LeaveInput, LeaveResult, leave_store_error
from .leave_rules import check_leave_input, to_leave_fields


class CreateLeaveUseCase:
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

    def execute(self, data: LeaveInput) -> LeaveResult:
        error = check_leave_input(data, strict=self._strict, profiles=self._profiles)
        if error is not None:
            return LeaveResult(error=error)

        stored = self._leaves.create_leave(to_leave_fields(data))
        if not stored.ok:
            return LeaveResult(error=leave_store_error(stored.error))

        logger.info(
            "licencia creada",
            extra={"leave_id": stored.value.leave_id, "subject_id": data.user_id},
        )
        return LeaveResult(leave=stored.value)
