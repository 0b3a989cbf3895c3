"""
===============================================================================
CASO DE USO: Eliminar perfil
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    DeleteProfileUseCase

Responsabilidades:
    - Borrar el perfil (hard delete, sin soft delete).
    - Confirmar con un mensaje que nombra al perfil borrado.
    - NOT_FOUND si no existe; borrar dos veces da 200 y luego 404.

Colaboradores:
    - ProfileRepository.delete_profile()

Notas:
    - Las licencias que referencian al user id se conservan (referencia por valor).
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.logger import logger
from ....domain.repositories import ProfileRepository
from .profile_results import (
    DeleteProfileResult,
    profile_not_found,
    profile_store_error,
)


class DeleteProfileUseCase:
    def __init__(self, profile_repository: ProfileRepository) -> None:
        self._profiles = profile_repository

    def execute(self, user_id: int) -> DeleteProfileResult:
        stored = self._profiles.delete_profile(user_id)
        if not stored.ok:
            return DeleteProfileResult(error=profile_store_error(stored.error))

        deleted = stored.value
        if deleted is None:
            return DeleteProfileResult(error=profile_not_found())

        logger.info("perfil eliminado", extra={"subject_id": user_id})
        return DeleteProfileResult(
            message=f"User {deleted.first_name} deleted successfully",
            profile=deleted,
        )
