"""
CRC — domain/repositories.py

Nombre
- Interfaces de repositorio del dominio (Protocols) + resultados del store

Responsabilidades
- Definir los contratos de persistencia de perfiles y licencias (puertos).
- Mantener application/domain independientes de infraestructura (PostgreSQL,
  in-memory).
- Reportar fallas de almacenamiento como valores (StoreResult), nunca como
  excepciones.

Colaboradores
- domain.entities: Profile, ProfileFields, LeaveRequest, LeaveFields
- infrastructure.repositories: implementaciones postgres e in_memory

Restricciones
- Solo interfaces: sin efectos colaterales, sin imports de infraestructura,
  sin SQL.
- "No encontrado" es un resultado exitoso con value None.
- Los listados vuelven en orden de inserción.

Notas
- typing.Protocol para subtipado estructural ("duck typing").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Protocol, TypeVar

from .entities import LeaveFields, LeaveRequest, Profile, ProfileFields

T = TypeVar("T")


@dataclass(frozen=True)
class StoreFailure:
    """
    R: Falla de almacenamiento como dato.

    Campos:
      - message: mensaje de diagnóstico (seguro de mostrar, sin credenciales)
      - error_id: correlaciona con la entrada de log que tiene la causa
    """

    message: str
    error_id: str


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """
    R: Resultado de una llamada a un repositorio.

    Contrato:
      - Éxito: error es None (value puede ser None si no hay fila)
      - Falla: error no es None y value es None
    """

    value: Optional[T] = None
    error: Optional[StoreFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T]) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreFailure) -> "StoreResult[T]":
        return cls(error=error)


class ProfileRepository(Protocol):
    """R: Interfaz de persistencia de perfiles (tabla `users`)."""

    def list_profiles(self) -> StoreResult[List[Profile]]:
        """R: Todos los perfiles, en orden de inserción."""
        ...

    def get_profile(self, user_id: int) -> StoreResult[Profile]:
        """R: Perfil por id; value None si no existe."""
        ...

    def create_profile(self, profile: Profile) -> StoreResult[Profile]:
        """R: Inserta y devuelve la fila guardada (con created_at)."""
        ...

    def update_profile(
        self, user_id: int, fields: ProfileFields
    ) -> StoreResult[Profile]:
        """R: Actualiza los campos mutables; value None si no afectó filas."""
        ...

    def update_password_hash(
        self, user_id: int, password_hash: str
    ) -> StoreResult[Profile]:
        """R: Reemplaza solo el digest; value None si no existe."""
        ...

    def delete_profile(self, user_id: int) -> StoreResult[Profile]:
        """R: Borra y devuelve la fila eliminada; value None si no existe."""
        ...

    def ping(self) -> bool:
        """R: True si el store responde."""
        ...


class LeaveRepository(Protocol):
    """R: Interfaz de persistencia de licencias (tabla `leaves`)."""

    def list_leaves(self) -> StoreResult[List[LeaveRequest]]: ...

    def get_leave(self, leave_id: int) -> StoreResult[LeaveRequest]: ...

    def create_leave(self, fields: LeaveFields) -> StoreResult[LeaveRequest]:
        """R: Inserta con un leave_id generado y devuelve la fila guardada."""
        ...

    def update_leave(
        self, leave_id: int, fields: LeaveFields
    ) -> StoreResult[LeaveRequest]: ...

    def delete_leave(self, leave_id: int) -> StoreResult[LeaveRequest]: ...

    def ping(self) -> bool:
        """R: True si el store responde."""
        ...
