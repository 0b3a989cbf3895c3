"""
===============================================================================
TARJETA CRC — router.py (router raíz / composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que incluye FastAPI (app.include_router).
  - Adjuntar las respuestas problem+json a OpenAPI.
  - Componer los routers por feature (auth, users, leaves).

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.* (sub-routers por feature)

Notas:
  - Montado en "/" y, vía api/versioning.py, en "/api".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from leavedesk.crosscutting.error_responses import OPENAPI_ERROR_RESPONSES

from .routers.auth import router as auth_router
from .routers.leaves import router as leaves_router
from .routers.users import router as users_router


def build_router() -> APIRouter:
    """Arma el router de negocio (la factory evita side effects al importar)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(auth_router)
    api_router.include_router(users_router)
    api_router.include_router(leaves_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
