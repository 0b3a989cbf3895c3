"""
============================================================
TARJETA CRC (Clase / Responsabilidades / Colaboradores)
============================================================
Clase: 001_profiles_and_leaves (migración Alembic)

Responsabilidades:
  - Crear el schema base: `users` (perfiles + digest de credencial)
    y `leaves` (licencias).
  - Índices acordes a las queries reales (orden de listado, búsqueda por dueño).

Colaboradores:
  - PostgreSQL 14+
  - infrastructure/repositories/postgres/* (usan este schema como contrato)

Política:
  - Migración BASELINE. El downgrade borra ambas tablas (solo resets locales).
  - Convención de nombres:
      pk_<tabla>            - Primary keys
      ix_<tabla>_<col>      - Índices
  - leaves.user_id es un valor plano: sin foreign key a users.
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_profiles_and_leaves"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # =========================================================
    # 1) PERFILES (users)
    # =========================================================
    op.create_table(
        "users",
        # Lo asigna RRHH (legajo): sin secuencia.
        sa.Column("user_id", sa.BigInteger, nullable=False, autoincrement=False),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("designation", sa.Text, nullable=False),
        sa.Column("date_of_birth", sa.Date, nullable=False),
        # Texto libre, no es foreign key.
        sa.Column("supervisor", sa.Text, nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id", name="pk_users"),
    )
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # =========================================================
    # 2) LICENCIAS
    # =========================================================
    # BIGSERIAL: primary key BigInteger con autoincrement.
    op.create_table(
        "leaves",
        sa.Column("leave_id", sa.BigInteger, autoincrement=True, nullable=False),
        sa.Column("date_from", sa.Date, nullable=False),
        sa.Column("date_to", sa.Date, nullable=False),
        sa.Column("leave_type", sa.Text, nullable=False),
        sa.Column("reason", sa.Text, nullable=False),
        sa.Column("emergency_contact", sa.Text, nullable=False),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("leave_id", name="pk_leaves"),
    )
    op.create_index("ix_leaves_user_id", "leaves", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_leaves_user_id", table_name="leaves")
    op.drop_table("leaves")
    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_table("users")
