# leavedesk/crosscutting/error_responses.py
"""
===============================================================================
MÓDULO: Respuestas de error estándar (estilo Problem Details)
===============================================================================

Objetivo
--------
Que TODO error HTTP tenga la misma forma para que:
- El cliente pueda ramificar por "code"
- Cada falla lleve un campo "error" legible
- El backend pueda correlacionar por request_id / error_id

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AppHTTPException + handlers

Responsabilidades:
  - Definir el catálogo de códigos de error (ErrorCode)
  - Armar el payload JSON de error (ErrorDetail)
  - Factories para los errores frecuentes
  - Handlers FastAPI que devuelven problem+json

Colaboradores:
  - crosscutting/middleware.py (request_id)
  - api/exception_handlers.py (mapea errores internos)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorCode(str, Enum):
    # 4xx
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_TOKEN = "MISSING_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    NOT_FOUND = "NOT_FOUND"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorDetail(BaseModel):
    """
    Body de error.

    Campos:
    - error: mensaje legible (siempre presente)
    - code: código de error estable para clientes
    - details: lista opcional de detalles (ej. [{"field": "email"}])
    """

    type: str = "about:blank"
    title: str
    status: int
    error: str
    code: ErrorCode
    instance: str | None = None
    details: list[dict[str, Any]] | None = None


PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

_OPENAPI_ERROR_CONTENT = {
    PROBLEM_JSON_MEDIA_TYPE: {"schema": {"$ref": "#/components/schemas/ErrorDetail"}}
}


def _openapi_error(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "model": ErrorDetail,
        "content": _OPENAPI_ERROR_CONTENT,
    }


OPENAPI_ERROR_RESPONSES = {
    "400": _openapi_error("Bad Request"),
    "401": _openapi_error("Unauthorized"),
    "403": _openapi_error("Forbidden"),
    "404": _openapi_error("Not Found"),
    "413": _openapi_error("Payload Too Large"),
    "default": _openapi_error("Error"),
}


class AppHTTPException(HTTPException):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      AppHTTPException

    Responsabilidades:
      - Adjuntar un ErrorCode estable
      - Llevar details opcionales (nombres de campo, mensajes de diagnóstico)

    Colaboradores:
      - app_exception_handler()
    ----------------------------------------------------------------------------
    """

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code
        self.details = details


# ---------------------------------------------------------------------------
# Factories de errores
# ---------------------------------------------------------------------------
def validation_error(
    detail: str, details: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.VALIDATION_ERROR, detail, details)


def missing_token(detail: str = "Token missing") -> AppHTTPException:
    return AppHTTPException(401, ErrorCode.MISSING_TOKEN, detail)


def invalid_token(detail: str = "Invalid token") -> AppHTTPException:
    return AppHTTPException(403, ErrorCode.INVALID_TOKEN, detail)


def invalid_credential(detail: str = "Invalid password") -> AppHTTPException:
    return AppHTTPException(401, ErrorCode.INVALID_CREDENTIAL, detail)


def not_found(detail: str) -> AppHTTPException:
    return AppHTTPException(404, ErrorCode.NOT_FOUND, detail)


def internal_error(
    detail: str = "Internal Server Error", diagnostic: str | None = None
) -> AppHTTPException:
    details = [{"message": diagnostic}] if diagnostic else None
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail, details)


def build_error_body(
    *,
    status: int,
    code: ErrorCode,
    error: str,
    instance: str | None,
    details: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Serializa un ErrorDetail (lo usan handlers y middlewares ASGI)."""
    return ErrorDetail(
        type=f"about:blank/{code.value.lower()}",
        title=code.value.replace("_", " ").title(),
        status=status,
        error=error,
        code=code,
        instance=instance,
        details=details or None,
    ).model_dump(exclude_none=True)


# ---------------------------------------------------------------------------
# Handlers FastAPI
# ---------------------------------------------------------------------------
async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    """
    Handler de AppHTTPException.

    Agrega instance (URL) y el request_id cuando está disponible.
    """
    request_id = getattr(getattr(request, "state", None), "request_id", None)

    details = exc.details or []
    if request_id:
        details = [*details, {"request_id": request_id}]

    body = build_error_body(
        status=exc.status_code,
        code=exc.code,
        error=str(exc.detail),
        instance=str(request.url),
        details=details,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body,
        headers=getattr(exc, "headers", None),
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )
