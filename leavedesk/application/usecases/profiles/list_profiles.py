"""
===============================================================================
CASO DE USO: Listar perfiles
===============================================================================

TARJETA CRC
-------------------------------------------------------------------------------
Clase:
    ListProfilesUseCase

Responsabilidades:
    - Devolver todos los perfiles en orden de inserción (sin paginación).
    - Convertir una falla del store en INTERNAL_ERROR.

Colaboradores:
    - ProfileRepository.list_profiles()
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import ProfileRepository
from .profile_results import ListProfilesResult, profile_store_error


class ListProfilesUseCase:
    def __init__(self, profile_repository: ProfileRepository) -> None:
        self._profiles = profile_repository

    def execute(self) -> ListProfilesResult:
        stored = self._profiles.list_profiles()
        if not stored.ok:
            return ListProfilesResult(
                profiles=[], error=profile_store_error(stored.error)
            )
        return ListProfilesResult(profiles=stored.value or [])
