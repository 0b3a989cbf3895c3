"""
===============================================================================
CAPA DE APLICACIÓN (API pública / exports)
===============================================================================

Puntos de entrada estables de la capa de aplicación:
  - validation: contrato de campos requeridos compartido por los casos de uso
  - ensure_dev_profile: seed solo para entorno local

Nota:
  - Los casos de uso se importan desde los subpaquetes de `usecases/`.
===============================================================================
"""

from .dev_seed_profile import ensure_dev_profile
from .validation import MSG_INVALID_REQUEST, MSG_MISSING_FIELDS, first_missing, is_blank

__all__ = [
    "ensure_dev_profile",
    "first_missing",
    "is_blank",
    "MSG_INVALID_REQUEST",
    "MSG_MISSING_FIELDS",
]
