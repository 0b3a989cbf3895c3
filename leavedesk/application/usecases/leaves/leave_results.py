"""
===============================================================================
RESULTADOS DE CASOS DE USO DE LICENCIAS (modelos compartidos)
===============================================================================

TARJETA CRC (Módulo-Responsabilidad-Colaborador)
-------------------------------------------------------------------------------
Componente:
    leave_results (módulo)

Responsabilidades:
    - LeaveErrorCode / LeaveError: fallas tipadas de los casos de uso.
    - DTOs de resultado: ListLeavesResult, LeaveResult, DeleteLeaveResult.
    - DTO de entrada: LeaveInput (compartido por create y update).

Colaboradores:
    - domain.entities.LeaveRequest
    - domain.repositories.StoreFailure
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Final, List

from ....domain.entities import LeaveRequest
from ....domain.repositories import StoreFailure

RESOURCE_LEAVE: Final[str] = "Leave"
MSG_LEAVE_NOT_FOUND: Final[str] = "Leave not found"
MSG_LEAVE_DELETED: Final[str] = "Leave deleted successfully"


class LeaveErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class LeaveError:
    code: LeaveErrorCode
    message: str
    resource: str | None = None
    field: str | None = None
    error_id: str | None = None


def leave_not_found() -> LeaveError:
    return LeaveError(
        code=LeaveErrorCode.NOT_FOUND,
        message=MSG_LEAVE_NOT_FOUND,
        resource=RESOURCE_LEAVE,
    )


def leave_store_error(failure: StoreFailure) -> LeaveError:
    return LeaveError(
        code=LeaveErrorCode.INTERNAL_ERROR,
        message=failure.message,
        resource=RESOURCE_LEAVE,
        error_id=failure.error_id,
    )


@dataclass
class ListLeavesResult:
    leaves: List[LeaveRequest]
    error: LeaveError | None = None


@dataclass
class LeaveResult:
    """
    Resultado de get / create / update.

    Contrato:
      - Éxito: leave != None y error == None
      - Falla: leave == None y error != None
    """

    leave: LeaveRequest | None = None
    error: LeaveError | None = None


@dataclass
class DeleteLeaveResult:
    message: str | None = None
    leave: LeaveRequest | None = None
    error: LeaveError | None = None


@dataclass(frozen=True)
class LeaveInput:
    """
    Datos de una licencia tal como llegan del cliente.

    rejected_fields: campos (nombres del wire) que no pudieron convertirse al
    tipo esperado; "body" si el payload no era un objeto JSON.
    """

    date_from: date | None = None
    date_to: date | None = None
    leave_type: str | None = None
    reason: str | None = None
    emergency_contact: str | None = None
    user_id: int | None = None
    rejected_fields: tuple[str, ...] = ()
