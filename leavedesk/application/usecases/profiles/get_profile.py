"""
===============================================================================
CASO DE USO: Obtener perfil
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    GetProfileUseCase

Responsabilidades:
    - Buscar un perfil por user id.
    - NOT_FOUND si ninguna fila coincide.

Colaboradores:
    - ProfileRepository.get_profile()
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import ProfileRepository
from .profile_results import ProfileResult, profile_not_found, profile_store_error


class GetProfileUseCase:
    """Query: un perfil por identificador."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self._profiles = profile_repository

    def execute(self, user_id: int) -> ProfileResult:
        stored = self._profiles.get_profile(user_id)
        if not stored.ok:
            return ProfileResult(error=profile_store_error(stored.error))
        if stored.value is None:
            return ProfileResult(error=profile_not_found())
        return ProfileResult(profile=stored.value)
