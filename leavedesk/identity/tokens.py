"""
===============================================================================
TARJETA CRC — identity/tokens.py
===============================================================================

Módulo:
    Servicio de bearer tokens (JWT, HS256)

Responsabilidades:
    - Emitir access tokens firmados que atan un subject id con iat/exp.
    - Verificar tokens: firma, expiración y claims mínimos.
    - Reportar fallas como errores tipados (InvalidSignature / Expired / Malformed).

Colaboradores:
    - PyJWT: encoding, firma y validación de claims registrados.
    - crosscutting.config.Settings: secreto + ventana de validez (TokenSettings).
    - identity.auth_gate: consume verify().
    - application.usecases.profiles.login: consume issue().

Notas de diseño:
    - El secreto de firma se inyecta al construir; este módulo nunca lee
      configuración por su cuenta.
    - Stateless: sin lista de revocación. Un token válido y vigente alcanza.
    - Claims mínimos: sub, iat, exp, typ. `sub` es string (RFC 7519).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"

TOKEN_TYPE_ACCESS: str = "access"

DEFAULT_ACCESS_TTL: timedelta = timedelta(hours=48)


class TokenError(Exception):
    """Base de toda falla de verificación de token."""

    reason: str = "invalid"


class InvalidSignature(TokenError):
    """La firma no coincide con el secreto del servicio."""

    reason = "invalid_signature"


class Expired(TokenError):
    """La expiración del token ya pasó."""

    reason = "expired"


class Malformed(TokenError):
    """El token no se puede parsear o le faltan claims requeridos."""

    reason = "malformed"


@dataclass(frozen=True, slots=True)
class TokenSettings:
    """Snapshot de configuración del servicio de tokens."""

    secret: str
    access_ttl: timedelta = DEFAULT_ACCESS_TTL


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    expires_in: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Emite y verifica bearer tokens firmados con vencimiento."""

    def __init__(
        self,
        settings: TokenSettings,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not settings.secret:
            raise ValueError("TokenService requires a non-empty signing secret")
        self._settings = settings
        self._clock = clock

    def issue(self, subject_id: int | str) -> IssuedToken:
        """Firma un token para `subject_id` válido por la ventana configurada."""
        now = self._clock()
        expires_in = int(self._settings.access_ttl.total_seconds())

        payload: dict[str, object] = {
            CLAIM_SUB: str(subject_id),
            CLAIM_IAT: int(now.timestamp()),
            CLAIM_EXP: int((now + self._settings.access_ttl).timestamp()),
            CLAIM_TYP: TOKEN_TYPE_ACCESS,
        }

        token = jwt.encode(payload, self._settings.secret, algorithm=JWT_ALGORITHM)
        return IssuedToken(token=token, expires_in=expires_in)

    def verify(self, token: str) -> int:
        """
        Valida `token` y devuelve su subject id.

        Raises:
            InvalidSignature: la firma no coincide.
            Expired: now > exp.
            Malformed: token no parseable o claims faltantes/inválidos.
        """
        if not token:
            raise Malformed("Empty token.")

        try:
            payload = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": [CLAIM_SUB, CLAIM_EXP], "verify_exp": False},
            )
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignature("Token signature mismatch.") from exc
        except jwt.InvalidTokenError as exc:
            raise Malformed("Token could not be parsed.") from exc

        # R: La expiración se compara contra el clock inyectado (testeable).
        exp = payload.get(CLAIM_EXP)
        if not isinstance(exp, (int, float)):
            raise Malformed("Token expiry is not numeric.")
        if self._clock().timestamp() > exp:
            raise Expired("Token expired.")

        token_type = payload.get(CLAIM_TYP)
        if token_type is not None and token_type != TOKEN_TYPE_ACCESS:
            raise Malformed("Unexpected token type.")

        try:
            return int(payload[CLAIM_SUB])
        except (TypeError, ValueError) as exc:
            raise Malformed("Token subject is not a valid identifier.") from exc
