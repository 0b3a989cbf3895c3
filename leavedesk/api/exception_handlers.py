"""
===============================================================================
TARJETA CRC — leavedesk/api/exception_handlers.py (mapeo central de excepciones)
===============================================================================

Responsabilidades:
  - Traducir excepciones a respuestas problem+json con campo `error`.
  - Validación de request (JSON roto, tipos inválidos, ids de path no
    enteros) -> 400.
  - Centralizar el logging de errores con request_id + error_id.
  - Nunca filtrar un stack trace al caller.

Patrones:
  - Exception Mapping (capa de presentación).
  - Fail-safe: cualquier excepción sin tipo -> INTERNAL_ERROR (logueada).

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, app_exception_handler
  - crosscutting.exceptions: LeavedeskError y subclases
  - application.validation: mensajes de validación compartidos
===============================================================================
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..application.validation import MSG_INVALID_REQUEST, MSG_MISSING_FIELDS
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
)
from ..crosscutting.exceptions import DatabaseError, LeavedeskError
from ..crosscutting.logger import logger

_MSG_INTERNAL = "Internal Server Error"


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


def _validation_details(exc: RequestValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append(
            {
                "field": ".".join(loc) or None,
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return details


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Input malformado es 400 VALIDATION_ERROR, no el 422 default de FastAPI."""
    errors = exc.errors()
    only_missing = bool(errors) and all(e.get("type") == "missing" for e in errors)
    app_exc = AppHTTPException(
        status_code=400,
        code=ErrorCode.VALIDATION_ERROR,
        detail=MSG_MISSING_FIELDS if only_missing else MSG_INVALID_REQUEST,
        details=_validation_details(exc),
    )
    return await app_exception_handler(request, app_exc)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Errores HTTP del framework (ruta desconocida, método incorrecto)."""
    if exc.status_code == 404:
        code = ErrorCode.NOT_FOUND
    elif exc.status_code >= 500:
        code = ErrorCode.INTERNAL_ERROR
    else:
        code = ErrorCode.VALIDATION_ERROR

    app_exc = AppHTTPException(
        status_code=exc.status_code, code=code, detail=str(exc.detail)
    )
    app_exc.headers = getattr(exc, "headers", None)
    return await app_exception_handler(request, app_exc)


async def leavedesk_error_handler(
    request: Request, exc: LeavedeskError
) -> JSONResponse:
    """Errores internos tipados que escaparon de un use case (raro)."""
    request_id = _request_id_from(request)
    logger.error(
        "error de servicio",
        extra={
            "code": exc.error_code,
            "error_id": exc.error_id,
            "error": exc.message,
            "request_id": request_id,
        },
    )
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=_MSG_INTERNAL,
        details=[{"message": exc.message}, {"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Fallback para excepciones sin tipo.

    - Log completo (stack trace).
    - Respuesta genérica (sin internals).
    """
    logger.error(
        "excepción no manejada",
        exc_info=True,
        extra={"request_id": _request_id_from(request), "error": str(exc)},
    )
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=_MSG_INTERNAL,
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app) -> None:
    """
    Registra los handlers en la app FastAPI.

    Nota:
      - AppHTTPException debe registrarse para mantener la forma problem+json.
      - Exception genérica va última, como fallback.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DatabaseError, leavedesk_error_handler)
    app.add_exception_handler(LeavedeskError, leavedesk_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
