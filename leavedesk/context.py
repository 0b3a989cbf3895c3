"""
===============================================================================
TARJETA CRC — leavedesk/context.py (contexto por request)
===============================================================================

Responsabilidades:
  - Guardar el contexto del request en ContextVars (seguro en async).
  - Correlacionar logs sin pasar parámetros por todo el stack.
  - Helpers mínimos: set_*(), get_context_dict(), clear_context().

Colaboradores:
  - crosscutting.middleware: setea request_id/method/path al iniciar.
  - identity.auth_gate: setea user_id cuando el bearer token verifica.
  - crosscutting.logger: enriquece cada record vía get_context_dict().

Restricciones:
  - Solo strings primitivos (serialización JSON segura).
  - Defaults vacíos ("") en vez de None.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

# Sujeto autenticado (lo setea el auth gate, nunca los handlers).
user_id_var: ContextVar[str] = ContextVar("user_id", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"
_CTX_METHOD: Final[str] = "method"
_CTX_PATH: Final[str] = "path"
_CTX_USER_ID: Final[str] = "user_id"


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """
    Setea el contexto mínimo del request.

    String vacío significa "no disponible".
    """
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def set_user_context(user_id: str | int | None) -> None:
    user_id_var.set("" if user_id is None else str(user_id))


def get_context_dict() -> dict[str, str]:
    """Devuelve el contexto actual como dict, sin las claves vacías."""
    ctx: dict[str, str] = {}

    if val := request_id_var.get():
        ctx[_CTX_REQUEST_ID] = val
    if val := http_method_var.get():
        ctx[_CTX_METHOD] = val
    if val := http_path_var.get():
        ctx[_CTX_PATH] = val
    if val := user_id_var.get():
        ctx[_CTX_USER_ID] = val

    return ctx


def clear_context() -> None:
    """
    Limpia el contexto al final de un request.

    Evita que el contexto se filtre entre requests del mismo worker.
    """
    request_id_var.set("")
    http_method_var.set("")
    http_path_var.set("")
    user_id_var.set("")
