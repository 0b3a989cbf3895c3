"""
===============================================================================
RESULTADOS DE CASOS DE USO DE PERFILES (modelos compartidos de resultado/error)
===============================================================================

Por qué:
    - Los use cases devuelven resultados tipados en vez de lanzar.
    - El mapeo HTTP es uniforme (interfaces.api.http.error_mapping).
    - Los flujos se testean por resultado, sin mocks HTTP.

-------------------------------------------------------------------------------
TARJETA CRC (Módulo-Responsabilidad-Colaborador)
-------------------------------------------------------------------------------
Componente:
    profile_results (módulo)

Responsabilidades:
    - ProfileErrorCode: conjunto estable de categorías de error.
    - ProfileError: contrato mínimo de error (code, message, resource, field).
    - DTOs de resultado: ListProfilesResult, ProfileResult, DeleteProfileResult,
      LoginResult.
    - DTOs de entrada: RegisterProfileInput, UpdateProfileInput, LoginInput.

Colaboradores:
    - domain.entities.Profile
    - domain.repositories.StoreFailure
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Final, List

from ....domain.entities import Profile
from ....domain.repositories import StoreFailure

RESOURCE_PROFILE: Final[str] = "User"
MSG_PROFILE_NOT_FOUND: Final[str] = "User not found"


class ProfileErrorCode(str, Enum):
    """
    Categorías de error de los casos de uso de perfiles y login.

      - VALIDATION_ERROR: input faltante/vacío o con tipo inválido.
      - NOT_FOUND: ningún perfil con ese identificador.
      - INVALID_CREDENTIAL: el password no coincide con el digest guardado.
      - INTERNAL_ERROR: falló el store (diagnóstico en message).
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class ProfileError:
    code: ProfileErrorCode
    message: str
    resource: str | None = None
    field: str | None = None
    error_id: str | None = None


def profile_not_found() -> ProfileError:
    return ProfileError(
        code=ProfileErrorCode.NOT_FOUND,
        message=MSG_PROFILE_NOT_FOUND,
        resource=RESOURCE_PROFILE,
    )


def profile_store_error(failure: StoreFailure) -> ProfileError:
    return ProfileError(
        code=ProfileErrorCode.INTERNAL_ERROR,
        message=failure.message,
        resource=RESOURCE_PROFILE,
        error_id=failure.error_id,
    )


@dataclass
class ListProfilesResult:
    profiles: List[Profile]
    error: ProfileError | None = None


@dataclass
class ProfileResult:
    """
    Resultado de get / register / update.

    Contrato:
      - Éxito: profile != None y error == None
      - Falla: profile == None y error != None
    """

    profile: Profile | None = None
    error: ProfileError | None = None


@dataclass
class DeleteProfileResult:
    message: str | None = None
    profile: Profile | None = None
    error: ProfileError | None = None


@dataclass
class LoginResult:
    token: str | None = None
    token_type: str = "bearer"
    expires_in: int | None = None
    error: ProfileError | None = None


@dataclass(frozen=True)
class RegisterProfileInput:
    user_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    designation: str | None = None
    date_of_birth: date | None = None
    supervisor: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class UpdateProfileInput:
    """
    Campos mutables de un perfil tal como llegan del cliente.

    rejected_fields: campos (nombres del wire) que no pudieron convertirse al
    tipo esperado; "body" si el payload no era un objeto JSON.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    designation: str | None = None
    date_of_birth: date | None = None
    supervisor: str | None = None
    rejected_fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class LoginInput:
    user_id: int | None = None
    password: str | None = None
