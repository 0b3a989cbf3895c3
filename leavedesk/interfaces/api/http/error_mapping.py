"""
===============================================================================
TARJETA CRC — error_mapping.py (error de use case -> HTTP problem+json)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de use case a AppHTTPException.
  - Mantener el mapeo en un solo lugar para que los routers sean finos.
  - Mantener la capa de aplicación libre de HTTP.

Reglas:
  - Las excepciones de infraestructura nunca llegan a la API: los use cases
    devuelven errores tipados (code + message [+ resource, field, error_id]).
  - INTERNAL_ERROR conserva un mensaje de diagnóstico y el error_id que
    correlaciona con el log del server. Nunca un stack trace.

Colaboradores:
  - application.usecases (ProfileErrorCode, LeaveErrorCode)
  - crosscutting.error_responses (factories)
===============================================================================
"""

from __future__ import annotations

from typing import Any, NoReturn

from leavedesk.application.usecases import (
    LeaveError,
    LeaveErrorCode,
    ProfileError,
    ProfileErrorCode,
)
from leavedesk.crosscutting.error_responses import (
    AppHTTPException,
    internal_error,
    invalid_credential,
    not_found,
    validation_error,
)
from leavedesk.crosscutting.logger import logger


def _field_details(field: str | None) -> list[dict[str, Any]] | None:
    return [{"field": field}] if field else None


def _internal(message: str, error_id: str | None) -> AppHTTPException:
    logger.error(
        "request falló en el store",
        extra={"error_id": error_id, "diagnostic": message},
    )
    exc = internal_error(diagnostic=message)
    if error_id:
        exc.details = [*(exc.details or []), {"error_id": error_id}]
    return exc


def raise_profile_error(error: ProfileError) -> NoReturn:
    """Traduce ProfileError -> HTTP."""
    if error.code == ProfileErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message, _field_details(error.field))
    if error.code == ProfileErrorCode.NOT_FOUND:
        raise not_found(error.message)
    if error.code == ProfileErrorCode.INVALID_CREDENTIAL:
        raise invalid_credential(error.message)
    raise _internal(error.message, error.error_id)


def raise_leave_error(error: LeaveError) -> NoReturn:
    """Traduce LeaveError -> HTTP."""
    if error.code == LeaveErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message, _field_details(error.field))
    if error.code == LeaveErrorCode.NOT_FOUND:
        raise not_found(error.message)
    raise _internal(error.message, error.error_id)
