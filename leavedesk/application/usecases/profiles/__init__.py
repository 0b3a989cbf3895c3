"""
===============================================================================
CASOS DE USO DE PERFILES (API pública / exports)
===============================================================================

Responsabilidades:
    - Re-exportar los casos de uso de perfiles y login.
    - Re-exportar sus DTOs de entrada/resultado y tipos de error.
===============================================================================
"""

from __future__ import annotations

from .delete_profile import DeleteProfileUseCase
from .get_profile import GetProfileUseCase
from .list_profiles import ListProfilesUseCase
from .login import LoginUseCase
from .profile_results import (
    DeleteProfileResult,
    ListProfilesResult,
    LoginInput,
    LoginResult,
    ProfileError,
    ProfileErrorCode,
    ProfileResult,
    RegisterProfileInput,
    UpdateProfileInput,
)
from .register_profile import RegisterProfileUseCase
from .update_profile import UpdateProfileUseCase

__all__ = [
    # Casos de uso
    "ListProfilesUseCase",
    "GetProfileUseCase",
    "RegisterProfileUseCase",
    "UpdateProfileUseCase",
    "DeleteProfileUseCase",
    "LoginUseCase",
    # Entradas
    "RegisterProfileInput",
    "UpdateProfileInput",
    "LoginInput",
    # Resultados / errores
    "ListProfilesResult",
    "ProfileResult",
    "DeleteProfileResult",
    "LoginResult",
    "ProfileError",
    "ProfileErrorCode",
]
