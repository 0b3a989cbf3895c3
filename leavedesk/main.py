"""
Nombre: Entrypoint ASGI del backend (leavedesk.main)

Responsabilidades:
  - Re-exportar la app FastAPI para servidores ASGI y tooling
  - Mantener estable el import path: uvicorn leavedesk.main:app

Notas/Restricciones:
  - Sin configuración ni IO acá; fino y predecible
"""

from leavedesk.api.main import app

__all__ = ["app"]
