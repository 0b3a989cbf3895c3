"""
===============================================================================
CASO DE USO: Actualizar perfil
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    UpdateProfileUseCase

Responsabilidades:
    - Reemplazar los campos mutables de un perfil existente.
    - Nunca tocar el identificador ni la credencial.
    - NOT_FOUND cuando no se afectó ninguna fila.

Colaboradores:
    - application.validation.first_missing
    - ProfileRepository.update_profile() / get_profile()

Reglas:
    - Un id inexistente es NOT_FOUND aunque el payload sea inválido (campos
      faltantes o tipos rechazados): ante un error de validación primero se
      busca el perfil y la ausencia gana.
    - Tipos rechazados en un perfil existente -> VALIDATION_ERROR con
      "Invalid request" y el primer campo rechazado.
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ....domain.entities import ProfileFields
from ....domain.repositories import ProfileRepository
from ...validation import MSG_INVALID_REQUEST, MSG_MISSING_FIELDS, first_missing
from .profile_results import (
    RESOURCE_PROFILE,
    ProfileError,
    ProfileErrorCode,
    ProfileResult,
    UpdateProfileInput,
    profile_not_found,
    profile_store_error,
)

_REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "firstName",
    "lastName",
    "email",
    "designation",
    "dateOfBirth",
    "supervisor",
)


class UpdateProfileUseCase:
    def __init__(self, profile_repository: ProfileRepository) -> None:
        self._profiles = profile_repository

    def execute(self, user_id: int, data: UpdateProfileInput) -> ProfileResult:
        if data.rejected_fields:
            return self._invalid(
                user_id, data.rejected_fields[0], message=MSG_INVALID_REQUEST
            )

        missing = first_missing(
            {
                "firstName": data.first_name,
                "lastName": data.last_name,
                "email": data.email,
                "designation": data.designation,
                "dateOfBirth": data.date_of_birth,
                "supervisor": data.supervisor,
            },
            _REQUIRED_FIELDS,
        )
        if missing is not None:
            return self._invalid(user_id, missing)

        stored = self._profiles.update_profile(
            user_id,
            ProfileFields(
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                designation=data.designation,
                date_of_birth=data.date_of_birth,
                supervisor=data.supervisor,
            ),
        )
        if not stored.ok:
            return ProfileResult(error=profile_store_error(stored.error))
        if stored.value is None:
            return ProfileResult(error=profile_not_found())
        return ProfileResult(profile=stored.value)

    def _invalid(
        self, user_id: int, field: str, *, message: str = MSG_MISSING_FIELDS
    ) -> ProfileResult:
        existing = self._profiles.get_profile(user_id)
        if not existing.ok:
            return ProfileResult(error=profile_store_error(existing.error))
        if existing.value is None:
            return ProfileResult(error=profile_not_found())
        return ProfileResult(
            error=ProfileError(
                code=ProfileErrorCode.VALIDATION_ERROR,
                message=message,
                resource=RESOURCE_PROFILE,
                field=field,
            )
        )
