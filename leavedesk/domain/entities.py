"""
Nombre: Entidades de dominio

Responsabilidades:
  - Definir las entidades de negocio: Profile y LeaveRequest
  - Definir los bundles de campos que aceptan create/update
  - Mantener las entidades agnósticas de framework (sin FastAPI, sin psycopg)

Colaboradores:
  - domain.repositories: contratos de persistencia sobre estas entidades
  - application.usecases: las construyen y consumen
  - interfaces.api.http.schemas: las mapean desde/hacia JSON

Restricciones:
  - Dataclasses inmutables (frozen)
  - El digest de la credencial nunca sale del backend; repr lo oculta

Notas:
  - Los identificadores son enteros: userId lo asigna RRHH (legajo) y
    leaveId lo genera el store
  - supervisor es texto libre, no una foreign key
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class ProfileFields:
    """R: Campos mutables del perfil (todo menos identificador y credencial)."""

    first_name: str
    last_name: str
    email: str
    designation: str
    date_of_birth: date
    supervisor: str


@dataclass(frozen=True, slots=True)
class Profile:
    """R: Legajo de personal; tiene exactamente un digest de credencial."""

    user_id: int
    first_name: str
    last_name: str
    email: str
    designation: str
    date_of_birth: date
    supervisor: str
    password_hash: str = field(repr=False)
    created_at: datetime | None = None

    @classmethod
    def register(
        cls, user_id: int, fields: ProfileFields, *, password_hash: str
    ) -> "Profile":
        return cls(
            user_id=user_id,
            first_name=fields.first_name,
            last_name=fields.last_name,
            email=fields.email,
            designation=fields.designation,
            date_of_birth=fields.date_of_birth,
            supervisor=fields.supervisor,
            password_hash=password_hash,
        )

    def with_fields(self, fields: ProfileFields) -> "Profile":
        """R: Copia con campos mutables reemplazados (id/credencial se mantienen)."""
        return Profile(
            user_id=self.user_id,
            first_name=fields.first_name,
            last_name=fields.last_name,
            email=fields.email,
            designation=fields.designation,
            date_of_birth=fields.date_of_birth,
            supervisor=fields.supervisor,
            password_hash=self.password_hash,
            created_at=self.created_at,
        )


@dataclass(frozen=True, slots=True)
class LeaveFields:
    """R: Todos los campos de licencia que manda el cliente (create y update)."""

    date_from: date
    date_to: date
    leave_type: str
    reason: str
    emergency_contact: str
    user_id: int


@dataclass(frozen=True, slots=True)
class LeaveRequest:
    """R: Licencia asociada (por valor) a un identificador de perfil."""

    leave_id: int
    date_from: date
    date_to: date
    leave_type: str
    reason: str
    emergency_contact: str
    user_id: int
    created_at: datetime | None = None

    @classmethod
    def from_fields(
        cls, leave_id: int, fields: LeaveFields, *, created_at: datetime | None = None
    ) -> "LeaveRequest":
        return cls(
            leave_id=leave_id,
            date_from=fields.date_from,
            date_to=fields.date_to,
            leave_type=fields.leave_type,
            reason=fields.reason,
            emergency_contact=fields.emergency_contact,
            user_id=fields.user_id,
            created_at=created_at,
        )
