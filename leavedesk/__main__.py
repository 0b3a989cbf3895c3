"""
Nombre: Runner local (python -m leavedesk)

Responsabilidades:
  - Servir leavedesk.main:app con uvicorn en settings.port (PORT, default 3000)
"""

import uvicorn

from leavedesk.crosscutting.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "leavedesk.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
