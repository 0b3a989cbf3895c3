"""
===============================================================================
TARJETA CRC — schemas/leaves.py
===============================================================================

Módulo:
    Schemas HTTP de licencias

Responsabilidades:
    - LeaveReq: el mismo body para create y update (from, to, type, reason,
      emergencyContact, userId), todo opcional en el borde.
    - LeaveRes / DeleteLeaveRes: formato camelCase del wire.

Colaboradores:
    - domain.entities.LeaveRequest
===============================================================================
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from leavedesk.domain.entities import LeaveRequest


class LeaveReq(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # R: `from` es keyword; por eso los alias en el rango de fechas.
    date_from: date | None = Field(default=None, alias="from")
    date_to: date | None = Field(default=None, alias="to")
    leave_type: str | None = Field(default=None, alias="type")
    reason: str | None = None
    emergency_contact: str | None = Field(default=None, alias="emergencyContact")
    user_id: int | None = Field(default=None, alias="userId")


class LeaveRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    leave_id: int = Field(alias="leaveId")
    date_from: date = Field(alias="from")
    date_to: date = Field(alias="to")
    leave_type: str = Field(alias="type")
    reason: str
    emergency_contact: str = Field(alias="emergencyContact")
    user_id: int = Field(alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @classmethod
    def from_leave(cls, leave: LeaveRequest) -> "LeaveRes":
        return cls(
            leave_id=leave.leave_id,
            date_from=leave.date_from,
            date_to=leave.date_to,
            leave_type=leave.leave_type,
            reason=leave.reason,
            emergency_contact=leave.emergency_contact,
            user_id=leave.user_id,
            created_at=leave.created_at,
        )


class DeleteLeaveRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_leave: LeaveRes = Field(alias="deletedLeave")
