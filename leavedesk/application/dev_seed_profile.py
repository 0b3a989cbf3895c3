# =============================================================================
# ARCHIVO: application/dev_seed_profile.py
# =============================================================================
"""
===============================================================================
TAREA: Perfil semilla de desarrollo (solo local)
===============================================================================

Qué:
    Asegura que exista un perfil de desarrollo con password conocido, para
    poder usar la API apenas corre `alembic upgrade head` (POST /login con
    userId=1 / "testpassword" por default).

Seguridad:
    - Guard estricto: solo corre con APP_ENV == "local".
    - Idempotente: un perfil existente no se toca.

CRC:
    Componente: ensure_dev_profile
    Responsabilidades:
      - Chequear el guard de entorno
      - Crear el perfil si falta (password hasheado)
    Colaboradores:
      - ProfileRepository
      - CredentialHasher
      - Settings (dev_seed_profile*)
===============================================================================
"""

from __future__ import annotations

from datetime import date
from typing import Final

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.entities import Profile, ProfileFields
from ..domain.repositories import ProfileRepository
from ..identity.credentials import CredentialHasher

_SEED_FIRST_NAME: Final[str] = "Test"
_SEED_LAST_NAME: Final[str] = "User"
_SEED_DESIGNATION: Final[str] = "Tester"
_SEED_DATE_OF_BIRTH: Final[date] = date(1990, 1, 1)
_SEED_SUPERVISOR: Final[str] = "Supervisor"


def _assert_allowed_environment(settings: Settings) -> None:
    env = (settings.app_env or "").strip().lower()
    if env != "local":
        raise RuntimeError(
            f"FATAL: DEV_SEED_PROFILE está habilitado pero ENV es '{env}' "
            "(debe ser 'local'). El guard evita seeds accidentales."
        )


def ensure_dev_profile(
    settings: Settings,
    *,
    profile_repo: ProfileRepository,
    hasher: CredentialHasher,
) -> bool:
    """
    Asegura que exista el perfil de desarrollo si está configurado.

    Devuelve True cuando se creó un perfil.
    """
    if not settings.dev_seed_profile:
        return False

    _assert_allowed_environment(settings)

    user_id = settings.dev_seed_profile_user_id
    if not settings.dev_seed_profile_password:
        raise ValueError("Dev seed profile habilitado pero el password está vacío")

    existing = profile_repo.get_profile(user_id)
    if not existing.ok:
        raise RuntimeError(
            f"Dev seed profile: falló la búsqueda ({existing.error.message})"
        )
    if existing.value is not None:
        logger.info(
            "Dev seed profile: ya existe; se omite", extra={"subject_id": user_id}
        )
        return False

    profile = Profile.register(
        user_id,
        ProfileFields(
            first_name=_SEED_FIRST_NAME,
            last_name=_SEED_LAST_NAME,
            email=settings.dev_seed_profile_email,
            designation=_SEED_DESIGNATION,
            date_of_birth=_SEED_DATE_OF_BIRTH,
            supervisor=_SEED_SUPERVISOR,
        ),
        password_hash=hasher.hash(settings.dev_seed_profile_password),
    )
    created = profile_repo.create_profile(profile)
    if not created.ok:
        raise RuntimeError(
            f"Dev seed profile: falló el alta ({created.error.message})"
        )

    logger.info("Dev seed profile: perfil creado", extra={"subject_id": user_id})
    return True
