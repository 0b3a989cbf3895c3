# leavedesk/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Excepciones internas con:
- un error_code estable
- un error_id para correlacionar logs
- un mensaje legible (sin secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  LeavedeskError + subclases

Responsabilidades:
  - Estandarizar errores internos que después se mapean a HTTP
  - Generar error_id para trazabilidad

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - infrastructure/db/gateway.py (envuelve fallas del driver)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class LeavedeskError(Exception):
    """Base de errores internos: error_code + error_id + mensaje."""

    error_code: str = "LEAVEDESK_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class DatabaseError(LeavedeskError):
    """Errores de DB (conexión, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"
