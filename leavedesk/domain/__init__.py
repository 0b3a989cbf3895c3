"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exports de la capa de dominio (superficie pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios desde application/interfaces.
    - Evitar imports profundos y acoplamiento innecesario.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - Nunca importar infraestructura acá.
===============================================================================
"""

from .entities import LeaveFields, LeaveRequest, Profile, ProfileFields
from .repositories import (
    LeaveRepository,
    ProfileRepository,
    StoreFailure,
    StoreResult,
)

__all__ = [
    "Profile",
    "ProfileFields",
    "LeaveRequest",
    "LeaveFields",
    "ProfileRepository",
    "LeaveRepository",
    "StoreResult",
    "StoreFailure",
]
