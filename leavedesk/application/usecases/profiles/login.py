"""
===============================================================================
CASO DE USO: Login (password -> bearer token)
===============================================================================

Objetivo de negocio:
    Canjear user id + password por un access token recién emitido.

-------------------------------------------------------------------------------
TARJETA CRC (Clase-Responsabilidad-Colaborador)
-------------------------------------------------------------------------------
Clase:
    LoginUseCase

Responsabilidades:
    - Exigir userId y password (si no, VALIDATION_ERROR).
    - NOT_FOUND cuando ningún perfil tiene ese id.
    - INVALID_CREDENTIAL cuando el digest no verifica.
    - Emitir un token para el sujeto si todo es correcto.
    - Re-hashear el password cuando el digest guardado usa otro costo Argon2.

Colaboradores:
    - ProfileRepository.get_profile() / update_password_hash()
    - identity.credentials.CredentialHasher.verify() / needs_rehash()
    - identity.tokens.TokenService.issue()
    - crosscutting.metrics.record_login()

Seguridad:
    - Nunca loguear el password; solo el subject id y el resultado.

Notas:
    - Si el re-hash falla en el store, el login igual es exitoso (el digest
      viejo sigue verificando); se loguea con su error_id.
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_login
from ....domain.entities import Profile
from ....domain.repositories import ProfileRepository
from ....identity.credentials import CredentialHasher
from ....identity.tokens import TokenService
from ...validation import first_missing
from .profile_results import (
    RESOURCE_PROFILE,
    LoginInput,
    LoginResult,
    ProfileError,
    ProfileErrorCode,
    profile_not_found,
    profile_store_error,
)

_MSG_MISSING_LOGIN: Final[str] = "Missing userId or password"
_MSG_INVALID_PASSWORD: Final[str] = "Invalid password"


class LoginUseCase:
    def __init__(
        self,
        profile_repository: ProfileRepository,
        hasher: CredentialHasher,
        token_service: TokenService,
    ) -> None:
        self._profiles = profile_repository
        self._hasher = hasher
        self._tokens = token_service

    def execute(self, data: LoginInput) -> LoginResult:
        missing = first_missing(
            {"userId": data.user_id, "password": data.password},
            ("userId", "password"),
        )
        if missing is not None:
            record_login("invalid_request")
            return LoginResult(
                error=ProfileError(
                    code=ProfileErrorCode.VALIDATION_ERROR,
                    message=_MSG_MISSING_LOGIN,
                    field=missing,
                )
            )

        stored = self._profiles.get_profile(data.user_id)
        if not stored.ok:
            record_login("error")
            return LoginResult(error=profile_store_error(stored.error))

        profile = stored.value
        if profile is None:
            record_login("unknown_user")
            logger.info(
                "login: usuario desconocido", extra={"subject_id": data.user_id}
            )
            return LoginResult(error=profile_not_found())

        if not self._hasher.verify(data.password, profile.password_hash):
            record_login("invalid_credential")
            logger.info(
                "login: credencial inválida", extra={"subject_id": data.user_id}
            )
            return LoginResult(
                error=ProfileError(
                    code=ProfileErrorCode.INVALID_CREDENTIAL,
                    message=_MSG_INVALID_PASSWORD,
                    resource=RESOURCE_PROFILE,
                )
            )

        if self._hasher.needs_rehash(profile.password_hash):
            self._rehash(profile, data.password)

        issued = self._tokens.issue(profile.user_id)
        record_login("success")
        logger.info("login: token emitido", extra={"subject_id": profile.user_id})
        return LoginResult(token=issued.token, expires_in=issued.expires_in)

    def _rehash(self, profile: Profile, password: str) -> None:
        updated = self._profiles.update_password_hash(
            profile.user_id, self._hasher.hash(password)
        )
        if not updated.ok:
            logger.warning(
                "login: no se pudo actualizar el digest",
                extra={
                    "subject_id": profile.user_id,
                    "error_id": updated.error.error_id,
                },
            )
            return
        logger.info("login: digest re-hasheado", extra={"subject_id": profile.user_id})
