"""
===============================================================================
TARJETA CRC — infrastructure/db/errors.py
===============================================================================

Componente:
  Errores tipados de pool/conectividad

Responsabilidades:
  - Evitar RuntimeError genéricos.
  - Semántica clara: "no inicializado", "ya inicializado", etc.
===============================================================================
"""


class DatabasePoolError(Exception):
    """Base de los errores del pool de conexiones."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """init_pool() se llamó más de una vez."""


class PoolNotInitializedError(DatabasePoolError):
    """Se usó el pool antes de init_pool()."""


class DatabaseConnectionError(DatabasePoolError):
    """No se pudo adquirir o validar una conexión."""
