"""
============================================================
TARJETA CRC — alembic/env.py (entorno de migraciones)
============================================================
Componente: runtime de Alembic para leavedesk

Responsabilidades:
  - Correr las migraciones en modo online (conexión real) u offline (SQL).
  - Resolver la URL desde los Settings de la app (DATABASE_URL) y forzar
    el driver psycopg 3 que usa el backend.

Colaboradores:
  - leavedesk.crosscutting.config.get_settings
  - Alembic (context, config)
  - SQLAlchemy (make_url / create_engine), solo acá

Política:
  - Las migraciones se escriben a mano: no hay metadata ORM, así que
    autogenerate queda deshabilitado (target_metadata = None).
  - Una transacción por migración: si una falla, las anteriores quedan.
============================================================
"""

import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import NullPool

from leavedesk.crosscutting.config import get_settings

PSYCOPG_DRIVER = "postgresql+psycopg"

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

log = logging.getLogger("alembic.env")

target_metadata = None


def database_url() -> URL:
    """URL de la DB de la app con el driver psycopg 3."""
    url = make_url(get_settings().database_url)
    if url.get_backend_name() in {"postgres", "postgresql"}:
        url = url.set(drivername=PSYCOPG_DRIVER)
    return url


def _context_options() -> dict:
    return {
        "target_metadata": target_metadata,
        "version_table": "alembic_version",
        "transaction_per_migration": True,
    }


def run_migrations_offline() -> None:
    """Emite el SQL sin conectarse (alembic upgrade head --sql)."""
    context.configure(
        url=database_url().render_as_string(hide_password=False),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_context_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = database_url()
    log.info("migrando %s/%s", url.host or "localhost", url.database)

    engine = create_engine(url, poolclass=NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **_context_options())
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
