"""
===============================================================================
TARJETA CRC — dependencies.py (dependencias compartidas de routers)
===============================================================================

Responsabilidades:
  - Atar una sola vez la dependencia del Auth Gate a la factory del
    container, así toda ruta protegida declara el mismo `Depends(require_auth)`.

Colaboradores:
  - identity.auth_gate.require_identity
  - container.get_auth_gate (reemplazable vía app.dependency_overrides)
===============================================================================
"""

from __future__ import annotations

from leavedesk.container import get_auth_gate
from leavedesk.identity.auth_gate import require_identity

require_auth = require_identity(get_auth_gate)

__all__ = ["require_auth"]
