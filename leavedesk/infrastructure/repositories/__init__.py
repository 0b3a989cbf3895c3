"""
============================================================
TARJETA CRC
============================================================
Clase: leavedesk.infrastructure.repositories (exports del paquete)

Responsabilidades:
- Exponer los repositorios concretos (Postgres e InMemory) desde un único
  punto de import.

Colaboradores:
- Repositorios Postgres (SQL crudo sobre el persistence gateway)
- Repositorios InMemory (testing / fallback local)
============================================================
"""

from .in_memory import InMemoryLeaveRepository, InMemoryProfileRepository
from .postgres import PostgresLeaveRepository, PostgresProfileRepository

__all__ = [
    # Postgres
    "PostgresProfileRepository",
    "PostgresLeaveRepository",
    # En memoria
    "InMemoryProfileRepository",
    "InMemoryLeaveRepository",
]
