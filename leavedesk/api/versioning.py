"""
===============================================================================
TARJETA CRC — leavedesk/api/versioning.py (alias de rutas)
===============================================================================

Responsabilidades:
  - Exponer el router de negocio bajo "/api" además de en la raíz, así los
    clientes de los paths históricos "/api/..." siguen funcionando.
  - Sin lógica duplicada: el mismo router se monta dos veces.

Colaboradores:
  - interfaces.api.http.router.router
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI

from ..interfaces.api.http.router import router as business_router

API_PREFIX = "/api"


def include_versioned_routes(app: FastAPI) -> None:
    """Monta el alias: /api/... -> el mismo router que /..."""
    api_router = APIRouter(prefix=API_PREFIX)
    api_router.include_router(business_router)
    app.include_router(api_router)


__all__ = ["include_versioned_routes", "API_PREFIX"]
