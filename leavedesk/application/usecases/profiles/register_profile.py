"""
===============================================================================
CASO DE USO: Registrar perfil
===============================================================================

Objetivo de negocio:
    Crear un perfil de personal junto con su credencial.

-------------------------------------------------------------------------------
TARJETA CRC (Clase-Responsabilidad-Colaborador)
-------------------------------------------------------------------------------
Clase:
    RegisterProfileUseCase

Responsabilidades:
    - Exigir todos los campos (se informa el primer faltante, nombre del wire).
    - Hashear el password antes de que algo llegue al store.
    - Devolver el perfil persistido (created_at lo asigna el store).

Colaboradores:
    - application.validation.first_missing
    - identity.credentials.CredentialHasher
    - ProfileRepository.create_profile()

Notas:
    - El password en claro nunca se guarda ni se loguea.
    - Un user id duplicado es una falla del store (primary key): INTERNAL_ERROR.
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ....crosscutting.logger import logger
from ....domain.entities import Profile, ProfileFields
from ....domain.repositories import ProfileRepository
from ....identity.credentials import CredentialHasher
from ...validation import MSG_MISSING_FIELDS, first_missing
from .profile_results import (
    RESOURCE_PROFILE,
    ProfileError,
    ProfileErrorCode,
    ProfileResult,
    RegisterProfileInput,
    profile_store_error,
)

_REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "userId",
    "firstName",
    "lastName",
    "email",
    "designation",
    "dateOfBirth",
    "supervisor",
    "password",
)


class RegisterProfileUseCase:
    def __init__(
        self,
        profile_repository: ProfileRepository,
        hasher: CredentialHasher,
    ) -> None:
        self._profiles = profile_repository
        self._hasher = hasher

    def execute(self, data: RegisterProfileInput) -> ProfileResult:
        missing = first_missing(
            {
                "userId": data.user_id,
                "firstName": data.first_name,
                "lastName": data.last_name,
                "email": data.email,
                "designation": data.designation,
                "dateOfBirth": data.date_of_birth,
                "supervisor": data.supervisor,
                "password": data.password,
            },
            _REQUIRED_FIELDS,
        )
        if missing is not None:
            return ProfileResult(
                error=ProfileError(
                    code=ProfileErrorCode.VALIDATION_ERROR,
                    message=MSG_MISSING_FIELDS,
                    resource=RESOURCE_PROFILE,
                    field=missing,
                )
            )

        profile = Profile.register(
            data.user_id,
            ProfileFields(
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                designation=data.designation,
                date_of_birth=data.date_of_birth,
                supervisor=data.supervisor,
            ),
            password_hash=self._hasher.hash(data.password),
        )

        stored = self._profiles.create_profile(profile)
        if not stored.ok:
            return ProfileResult(error=profile_store_error(stored.error))

        logger.info("perfil registrado", extra={"subject_id": data.user_id})
        return ProfileResult(profile=stored.value)
