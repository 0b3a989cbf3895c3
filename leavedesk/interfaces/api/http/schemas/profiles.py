"""
===============================================================================
TARJETA CRC — schemas/profiles.py
===============================================================================

Módulo:
    Schemas HTTP de perfiles y login

Responsabilidades:
    - DTOs de request: todo campo opcional en el borde HTTP, así un campo
      faltante llega al use case y se reporta como "Missing required fields".
    - Los chequeos de tipo quedan acá (dateOfBirth fecha ISO, userId entero).
    - DTOs de respuesta: nombres camelCase en el wire; nunca la credencial.

Colaboradores:
    - domain.entities.Profile
===============================================================================
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from leavedesk.domain.entities import Profile


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class LoginReq(_CamelModel):
    user_id: int | None = Field(default=None, alias="userId")
    password: str | None = Field(default=None, description="Password en texto plano")


class UpdateProfileReq(_CamelModel):
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    designation: str | None = None
    date_of_birth: date | None = Field(default=None, alias="dateOfBirth")
    supervisor: str | None = None


class RegisterProfileReq(UpdateProfileReq):
    user_id: int | None = Field(default=None, alias="userId")
    password: str | None = None


# -----------------------------------------------------------------------------
# Respuestas
# -----------------------------------------------------------------------------
class LoginRes(_CamelModel):
    token: str
    token_type: str = Field(default="bearer", alias="tokenType")
    expires_in: int = Field(
        alias="expiresIn", description="Segundos hasta el vencimiento"
    )


class ProfileRes(_CamelModel):
    user_id: int = Field(alias="userId")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    designation: str
    date_of_birth: date = Field(alias="dateOfBirth")
    supervisor: str
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileRes":
        return cls(
            user_id=profile.user_id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            designation=profile.designation,
            date_of_birth=profile.date_of_birth,
            supervisor=profile.supervisor,
            created_at=profile.created_at,
        )


class DeleteProfileRes(_CamelModel):
    message: str
