"""Repositorios PostgreSQL (SQL sobre el persistence gateway)."""

from .leave import PostgresLeaveRepository
from .profile import PostgresProfileRepository

__all__ = ["PostgresProfileRepository", "PostgresLeaveRepository"]
