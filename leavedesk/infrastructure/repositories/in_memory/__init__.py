"""
Implementaciones de repositorios en memoria.

Para tests y desarrollo local. NO PARA PRODUCCIÓN.
Los datos se pierden al reiniciar el proceso.
"""

from .leave import InMemoryLeaveRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemoryLeaveRepository",
]
