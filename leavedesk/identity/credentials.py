"""
===============================================================================
TARJETA CRC — identity/credentials.py
===============================================================================

Módulo:
    Hashing de credenciales (Argon2)

Responsabilidades:
    - Producir digests de password one-way con salt (Argon2id).
    - Verificar un plaintext contra un digest guardado en tiempo constante.
    - Nunca lanzar ante un digest malformado o vacío: la verificación falla.

Colaboradores:
    - argon2.PasswordHasher: KDF real + encoding de parámetros y salt.
    - crosscutting.config.Settings: parámetros de costo (snapshot HasherSettings).
    - application.usecases.profiles: register (hash) y login (verify/re-hash).

Notas de diseño:
    - La criptografía vive en el borde de identidad, nunca en el dominio.
    - Los parámetros de costo viajan dentro del digest: subirlos después deja
      verificables los digests viejos (needs_rehash indica cuándo actualizar).
    - Nunca loguear plaintexts ni digests.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


@dataclass(frozen=True, slots=True)
class HasherSettings:
    """Snapshot de costos Argon2."""

    time_cost: int = 3
    memory_cost_kib: int = 65536
    parallelism: int = 4


class CredentialHasher:
    """Hashing one-way y verificación de passwords."""

    def __init__(self, settings: HasherSettings | None = None) -> None:
        cfg = settings or HasherSettings()
        self._hasher = PasswordHasher(
            time_cost=cfg.time_cost,
            memory_cost=cfg.memory_cost_kib,
            parallelism=cfg.parallelism,
        )

    def hash(self, plaintext: str) -> str:
        """Digest con salt; dos llamadas con el mismo plaintext nunca coinciden."""
        return self._hasher.hash(plaintext)

    def verify(self, plaintext: str, digest: str | None) -> bool:
        """True solo si `plaintext` produjo `digest`."""
        if not digest:
            return False
        try:
            return self._hasher.verify(digest, plaintext)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, digest: str) -> bool:
        """True si `digest` se generó con otros parámetros de costo."""
        try:
            return self._hasher.check_needs_rehash(digest)
        except InvalidHashError:
            return True
