"""
Capa de casos de uso (operaciones de negocio)

Este paquete expone los puntos de entrada de la lógica de negocio, por recurso.

Estructura
----------
usecases/
├── profiles/   # Perfiles de personal + login
└── leaves/     # Licencias

Uso
---
    from leavedesk.application.usecases.profiles import LoginUseCase
    from leavedesk.application.usecases import CreateLeaveUseCase
"""

# Licencias
from .leaves import (
    CreateLeaveUseCase,
    DeleteLeaveResult,
    DeleteLeaveUseCase,
    GetLeaveUseCase,
    LeaveError,
    LeaveErrorCode,
    LeaveInput,
    LeaveResult,
    ListLeavesResult,
    ListLeavesUseCase,
    UpdateLeaveUseCase,
)

# Perfiles
from .profiles import (
    DeleteProfileResult,
    DeleteProfileUseCase,
    GetProfileUseCase,
    ListProfilesResult,
    ListProfilesUseCase,
    LoginInput,
    LoginResult,
    LoginUseCase,
    ProfileError,
    ProfileErrorCode,
    ProfileResult,
    RegisterProfileInput,
    RegisterProfileUseCase,
    UpdateProfileInput,
    UpdateProfileUseCase,
)

__all__ = [
    # Licencias
    "ListLeavesUseCase",
    "GetLeaveUseCase",
    "CreateLeaveUseCase",
    "UpdateLeaveUseCase",
    "DeleteLeaveUseCase",
    "LeaveInput",
    "ListLeavesResult",
    "LeaveResult",
    "DeleteLeaveResult",
    "LeaveError",
    "LeaveErrorCode",
    # Perfiles
    "ListProfilesUseCase",
    "GetProfileUseCase",
    "RegisterProfileUseCase",
    "UpdateProfileUseCase",
    "DeleteProfileUseCase",
    "LoginUseCase",
    "RegisterProfileInput",
    "UpdateProfileInput",
    "LoginInput",
    "ListProfilesResult",
    "ProfileResult",
    "DeleteProfileResult",
    "LoginResult",
    "ProfileError",
    "ProfileErrorCode",
]
