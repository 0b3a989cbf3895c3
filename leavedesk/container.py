"""
===============================================================================
TARJETA CRC — leavedesk/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorios, servicios de identidad, use cases).
  - Exponer factories para FastAPI (Depends) y para el bootstrap.
  - Mantener singletons con lru_cache para recursos compartidos/pesados.
  - Centralizar decisiones de runtime según Settings.

Colaboradores:
  - leavedesk.crosscutting.config.get_settings
  - leavedesk.domain.repositories (puertos)
  - leavedesk.infrastructure.* (implementaciones)
  - leavedesk.identity.* (hasher, token service, auth gate)
  - leavedesk.application.usecases.* (casos de uso)

Patrones:
  - Composition Root
  - Dependency Inversion (los use cases dependen de puertos)
  - Singletons lazy con lru_cache

Notas:
  - Sin lógica de negocio acá.
  - Sin import de FastAPI acá (solo factories).
  - El secreto de firma y el pool se construyen una vez y se pasan
    explícitos; nada más abajo los lee como globals.
===============================================================================
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from .application.usecases import (
    CreateLeaveUseCase,
    DeleteLeaveUseCase,
    DeleteProfileUseCase,
    GetLeaveUseCase,
    GetProfileUseCase,
    ListLeavesUseCase,
    ListProfilesUseCase,
    LoginUseCase,
    RegisterProfileUseCase,
    UpdateLeaveUseCase,
    UpdateProfileUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import LeaveRepository, ProfileRepository
from .identity.auth_gate import AuthGate
from .identity.credentials import CredentialHasher, HasherSettings
from .identity.tokens import TokenService, TokenSettings
from .infrastructure.db import PersistenceGateway, get_pool
from .infrastructure.repositories import (
    InMemoryLeaveRepository,
    InMemoryProfileRepository,
    PostgresLeaveRepository,
    PostgresProfileRepository,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    """
    Regla:
      - app_env en {"test", "testing", "ci"} => adaptadores en memoria.
    """
    return get_settings().is_test()


# =============================================================================
# Identidad (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_credential_hasher() -> CredentialHasher:
    settings = get_settings()
    return CredentialHasher(
        HasherSettings(
            time_cost=settings.argon2_time_cost,
            memory_cost_kib=settings.argon2_memory_cost_kib,
            parallelism=settings.argon2_parallelism,
        )
    )


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    """Token service atado al secreto y la ventana de validez configurados."""
    settings = get_settings()
    return TokenService(
        TokenSettings(
            secret=settings.jwt_secret,
            access_ttl=timedelta(hours=settings.jwt_access_ttl_hours),
        )
    )


@lru_cache(maxsize=1)
def get_auth_gate() -> AuthGate:
    return AuthGate(get_token_service())


# =============================================================================
# Persistencia (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_persistence_gateway() -> PersistenceGateway:
    """Gateway sobre el pool del proceso (init_pool tiene que haber corrido)."""
    return PersistenceGateway(get_pool())


@lru_cache(maxsize=1)
def get_profile_repository() -> ProfileRepository:
    """Repositorio de perfiles (en memoria en test; Postgres en runtime)."""
    if _is_test_env():
        return InMemoryProfileRepository()
    return PostgresProfileRepository(get_persistence_gateway())


@lru_cache(maxsize=1)
def get_leave_repository() -> LeaveRepository:
    """Repositorio de licencias (en memoria en test; Postgres en runtime)."""
    if _is_test_env():
        return InMemoryLeaveRepository()
    return PostgresLeaveRepository(get_persistence_gateway())


# =============================================================================
# Casos de uso (una instancia por request; baratos de construir)
# =============================================================================


def get_login_use_case() -> LoginUseCase:
    return LoginUseCase(
        profile_repository=get_profile_repository(),
        hasher=get_credential_hasher(),
        token_service=get_token_service(),
    )


def get_list_profiles_use_case() -> ListProfilesUseCase:
    return ListProfilesUseCase(get_profile_repository())


def get_get_profile_use_case() -> GetProfileUseCase:
    return GetProfileUseCase(get_profile_repository())


def get_register_profile_use_case() -> RegisterProfileUseCase:
    return RegisterProfileUseCase(
        profile_repository=get_profile_repository(),
        hasher=get_credential_hasher(),
    )


def get_update_profile_use_case() -> UpdateProfileUseCase:
    return UpdateProfileUseCase(get_profile_repository())


def get_delete_profile_use_case() -> DeleteProfileUseCase:
    return DeleteProfileUseCase(get_profile_repository())


def get_list_leaves_use_case() -> ListLeavesUseCase:
    return ListLeavesUseCase(get_leave_repository())


def get_get_leave_use_case() -> GetLeaveUseCase:
    return GetLeaveUseCase(get_leave_repository())


def get_create_leave_use_case() -> CreateLeaveUseCase:
    return CreateLeaveUseCase(
        get_leave_repository(),
        get_profile_repository(),
        strict=get_settings().leave_validation_strict,
    )


def get_update_leave_use_case() -> UpdateLeaveUseCase:
    return UpdateLeaveUseCase(
        get_leave_repository(),
        get_profile_repository(),
        strict=get_settings().leave_validation_strict,
    )


def get_delete_leave_use_case() -> DeleteLeaveUseCase:
    return DeleteLeaveUseCase(get_leave_repository())


def clear_container_caches() -> None:
    """Descarta singletons cacheados (tests, o tras cambiar settings)."""
    for factory in (
        get_credential_hasher,
        get_token_service,
        get_auth_gate,
        get_persistence_gateway,
        get_profile_repository,
        get_leave_repository,
    ):
        factory.cache_clear()
