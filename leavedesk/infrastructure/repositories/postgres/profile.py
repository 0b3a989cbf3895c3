"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/profile.py
============================================================
Clase: PostgresProfileRepository

Responsabilidades:
  - CRUD sobre la tabla `users` a través del PersistenceGateway.
  - Mapear filas crudas -> `Profile` del dominio.
  - Convertir outcomes del gateway en StoreResult (valor / None / falla).

Colaboradores:
  - infrastructure.db.gateway.PersistenceGateway
  - domain.entities.Profile / ProfileFields
  - domain.repositories.StoreResult / StoreFailure

Restricciones / Notas:
  - Repositorio puro: sin reglas de negocio (la validación vive en use cases).
  - "No existe" es StoreResult(value=None), nunca un error.
  - Solo SQL parametrizado.
  - Orden estable en listados: created_at ASC, user_id ASC (inserción).
============================================================
"""

from __future__ import annotations

from typing import List
from uuid import uuid4

from ....domain.entities import Profile, ProfileFields
from ....domain.repositories import StoreFailure, StoreResult
from ...db.gateway import PersistenceGateway, QueryOutcome, Row

# R: Lista explícita de columnas: el contrato con las migraciones en un lugar.
_PROFILE_COLUMNS = (
    "user_id, first_name, last_name, email, designation, "
    "date_of_birth, supervisor, password_hash, created_at"
)

_PROFILE_ORDER_BY = "created_at ASC, user_id ASC"


def _row_to_profile(row: Row) -> Profile:
    return Profile(
        user_id=row["user_id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        designation=row["designation"],
        date_of_birth=row["date_of_birth"],
        supervisor=row["supervisor"],
        password_hash=row["password_hash"],
        created_at=row.get("created_at"),
    )


def _failure(outcome: QueryOutcome) -> StoreResult:
    assert outcome.error is not None
    return StoreResult.failure(
        StoreFailure(message=outcome.error.message, error_id=outcome.error.error_id)
    )


def _single(outcome: QueryOutcome) -> StoreResult[Profile]:
    if not outcome.ok:
        return _failure(outcome)
    row = outcome.first
    return StoreResult.success(_row_to_profile(row) if row else None)


class PostgresProfileRepository:
    """Persistencia de perfiles en PostgreSQL."""

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway

    def list_profiles(self) -> StoreResult[List[Profile]]:
        outcome = self._gateway.fetch_all(
            f"SELECT {_PROFILE_COLUMNS} FROM users ORDER BY {_PROFILE_ORDER_BY}",
            op="list_profiles",
        )
        if not outcome.ok:
            return _failure(outcome)
        return StoreResult.success([_row_to_profile(r) for r in outcome.rows])

    def get_profile(self, user_id: int) -> StoreResult[Profile]:
        return _single(
            self._gateway.fetch_one(
                f"SELECT {_PROFILE_COLUMNS} FROM users WHERE user_id = %s",
                (user_id,),
                op="get_profile",
            )
        )

    def create_profile(self, profile: Profile) -> StoreResult[Profile]:
        # R: Un user_id duplicado viola pk_users; el gateway lo reporta como falla.
        result = _single(
            self._gateway.execute(
                f"""
                    INSERT INTO users (
                        user_id, first_name, last_name, email, designation,
                        date_of_birth, supervisor, password_hash
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_PROFILE_COLUMNS}
                """,
                (
                    profile.user_id,
                    profile.first_name,
                    profile.last_name,
                    profile.email,
                    profile.designation,
                    profile.date_of_birth,
                    profile.supervisor,
                    profile.password_hash,
                ),
                op="create_profile",
            )
        )
        if result.ok and result.value is None:
            return StoreResult.failure(
                StoreFailure(
                    message="create_profile returned no row", error_id=str(uuid4())
                )
            )
        return result

    def update_profile(
        self, user_id: int, fields: ProfileFields
    ) -> StoreResult[Profile]:
        return _single(
            self._gateway.execute(
                f"""
                    UPDATE users
                    SET first_name = %s, last_name = %s, email = %s,
                        designation = %s, date_of_birth = %s, supervisor = %s
                    WHERE user_id = %s
                    RETURNING {_PROFILE_COLUMNS}
                """,
                (
                    fields.first_name,
                    fields.last_name,
                    fields.email,
                    fields.designation,
                    fields.date_of_birth,
                    fields.supervisor,
                    user_id,
                ),
                op="update_profile",
            )
        )

    def update_password_hash(
        self, user_id: int, password_hash: str
    ) -> StoreResult[Profile]:
        return _single(
            self._gateway.execute(
                f"""
                    UPDATE users SET password_hash = %s
                    WHERE user_id = %s
                    RETURNING {_PROFILE_COLUMNS}
                """,
                (password_hash, user_id),
                op="update_password_hash",
            )
        )

    def delete_profile(self, user_id: int) -> StoreResult[Profile]:
        return _single(
            self._gateway.execute(
                f"DELETE FROM users WHERE user_id = %s RETURNING {_PROFILE_COLUMNS}",
                (user_id,),
                op="delete_profile",
            )
        )

    def ping(self) -> bool:
        return self._gateway.ping()
