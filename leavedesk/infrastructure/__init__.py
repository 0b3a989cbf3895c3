"""Adaptadores de infraestructura: pool PostgreSQL, gateway y repositorios."""
