"""
===============================================================================
TARJETA CRC — application/usecases/leaves/leave_rules.py
===============================================================================

Responsabilidades:
    - Validar un LeaveInput para create/update:
        * campos con tipo inválido (rejected_fields) -> "Invalid request"
        * todos los campos requeridos (se informa el primero, nombre del wire)
        * solo en modo estricto: `from` <= `to` y que el userId exista
    - Construir LeaveFields del dominio cuando el input es válido.

Colaboradores:
    - application.validation.first_missing
    - ProfileRepository.get_profile() (solo modo estricto)

Notas:
    - El modo estricto está apagado por defecto: las fechas no se ordenan y
      userId es un valor plano, sin chequear contra perfiles.
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ....domain.entities import LeaveFields
from ....domain.repositories import ProfileRepository
from ...validation import MSG_INVALID_REQUEST, MSG_MISSING_FIELDS, first_missing
from .leave_results import (
    RESOURCE_LEAVE,
    LeaveError,
    LeaveErrorCode,
    LeaveInput,
    leave_store_error,
)

REQUIRED_LEAVE_FIELDS: Final[tuple[str, ...]] = (
    "from",
    "to",
    "type",
    "reason",
    "emergencyContact",
    "userId",
)

_MSG_DATE_ORDER: Final[str] = "'from' must not be after 'to'"
_MSG_UNKNOWN_USER: Final[str] = "Referenced userId does not exist"


def _invalid(message: str, field: str) -> LeaveError:
    return LeaveError(
        code=LeaveErrorCode.VALIDATION_ERROR,
        message=message,
        resource=RESOURCE_LEAVE,
        field=field,
    )


def missing_leave_field(data: LeaveInput) -> str | None:
    return first_missing(
        {
            "from": data.date_from,
            "to": data.date_to,
            "type": data.leave_type,
            "reason": data.reason,
            "emergencyContact": data.emergency_contact,
            "userId": data.user_id,
        },
        REQUIRED_LEAVE_FIELDS,
    )


def check_leave_input(
    data: LeaveInput,
    *,
    strict: bool,
    profiles: ProfileRepository | None,
) -> LeaveError | None:
    """Devuelve el primer error de validación de `data`, o None si es válido."""
    if data.rejected_fields:
        return _invalid(MSG_INVALID_REQUEST, data.rejected_fields[0])

    missing = missing_leave_field(data)
    if missing is not None:
        return _invalid(MSG_MISSING_FIELDS, missing)

    if not strict:
        return None

    if data.date_from > data.date_to:
        return _invalid(_MSG_DATE_ORDER, "to")

    if profiles is not None:
        owner = profiles.get_profile(data.user_id)
        if not owner.ok:
            return leave_store_error(owner.error)
        if owner.value is None:
            return _invalid(_MSG_UNKNOWN_USER, "userId")

    return None


def to_leave_fields(data: LeaveInput) -> LeaveFields:
    return LeaveFields(
        date_from=data.date_from,
        date_to=data.date_to,
        leave_type=data.leave_type,
        reason=data.reason,
        emergency_contact=data.emergency_contact,
        user_id=data.user_id,
    )
