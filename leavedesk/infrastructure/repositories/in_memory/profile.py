"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/profile.py
============================================================
Clase: InMemoryProfileRepository

Responsabilidades:
  - Guardar perfiles en memoria (tests / dev local sin PostgreSQL).
  - Replicar el contrato de Postgres: orden de inserción, None para "no
    existe", resultado de falla ante user_id duplicado (primary key).

Colaboradores:
  - domain.entities.Profile / ProfileFields
  - domain.repositories.ProfileRepository (contrato)

Restricciones / Notas:
  - Thread-safe: todo acceso bajo un Lock (las rutas corren en threadpool).
  - Las entidades son inmutables; devolver las instancias guardadas es seguro.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List
from uuid import uuid4

from ....domain.entities import Profile, ProfileFields
from ....domain.repositories import ProfileRepository, StoreFailure, StoreResult


class InMemoryProfileRepository(ProfileRepository):
    """
    Store de perfiles en memoria, thread-safe.

    _profiles es la "tabla"; el orden de inserción del dict es el del listado.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._profiles: Dict[int, Profile] = {}

    def list_profiles(self) -> StoreResult[List[Profile]]:
        with self._lock:
            return StoreResult.success(list(self._profiles.values()))

    def get_profile(self, user_id: int) -> StoreResult[Profile]:
        with self._lock:
            return StoreResult.success(self._profiles.get(user_id))

    def create_profile(self, profile: Profile) -> StoreResult[Profile]:
        with self._lock:
            if profile.user_id in self._profiles:
                return StoreResult.failure(
                    StoreFailure(
                        message=(
                            "create_profile failed: duplicate key value violates "
                            f"pk_users (user_id={profile.user_id})"
                        ),
                        error_id=str(uuid4()),
                    )
                )
            stored = replace(profile, created_at=datetime.now(timezone.utc))
            self._profiles[profile.user_id] = stored
            return StoreResult.success(stored)

    def update_profile(
        self, user_id: int, fields: ProfileFields
    ) -> StoreResult[Profile]:
        with self._lock:
            current = self._profiles.get(user_id)
            if current is None:
                return StoreResult.success(None)
            updated = current.with_fields(fields)
            self._profiles[user_id] = updated
            return StoreResult.success(updated)

    def update_password_hash(
        self, user_id: int, password_hash: str
    ) -> StoreResult[Profile]:
        with self._lock:
            current = self._profiles.get(user_id)
            if current is None:
                return StoreResult.success(None)
            updated = replace(current, password_hash=password_hash)
            self._profiles[user_id] = updated
            return StoreResult.success(updated)

    def delete_profile(self, user_id: int) -> StoreResult[Profile]:
        with self._lock:
            return StoreResult.success(self._profiles.pop(user_id, None))

    def ping(self) -> bool:
        return True
