"""
===============================================================================
TARJETA CRC — application/validation.py
===============================================================================

Módulo:
    Contrato de campos requeridos compartido por create/update/login

Responsabilidades:
    - Decidir si un valor recibido cuenta como "faltante".
    - Informar el primer campo faltante, en orden de declaración.
    - Mensajes de validación compartidos con la capa HTTP.

Colaboradores:
    - application.usecases.profiles / leaves
    - api.exception_handlers (MSG_INVALID_REQUEST)

Reglas:
    - Faltante = None, string vacío o solo espacios, o cero numérico
      (un identificador cero nunca es válido para userId).
    - Los nombres de campo son los del wire (camelCase) para que el error
      HTTP los devuelva tal cual.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

MSG_MISSING_FIELDS: str = "Missing required fields"
MSG_INVALID_REQUEST: str = "Invalid request"


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    return False


def first_missing(values: Mapping[str, Any], required: Iterable[str]) -> str | None:
    """Devuelve el primer campo de `required` cuyo valor está vacío, o None."""
    for name in required:
        if is_blank(values.get(name)):
            return name
    return None
