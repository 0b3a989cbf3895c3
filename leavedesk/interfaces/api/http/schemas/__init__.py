"""DTOs HTTP (pydantic) de la API de leavedesk."""

from .leaves import DeleteLeaveRes, LeaveReq, LeaveRes
from .profiles import (
    DeleteProfileRes,
    LoginReq,
    LoginRes,
    ProfileRes,
    RegisterProfileReq,
    UpdateProfileReq,
)

__all__ = [
    "LoginReq",
    "LoginRes",
    "RegisterProfileReq",
    "UpdateProfileReq",
    "ProfileRes",
    "DeleteProfileRes",
    "LeaveReq",
    "LeaveRes",
    "DeleteLeaveRes",
]
