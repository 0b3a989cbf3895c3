"""
===============================================================================
TARJETA CRC — identity/auth_gate.py
===============================================================================

Módulo:
    Auth Gate (etapa de bearer token)

Responsabilidades:
    - Extraer el token de `Authorization: Bearer <token>`.
    - Verificarlo con el TokenService.
    - Decidir: Authenticated(subject_id) o Rejected(reason).
    - Exponer la dependencia FastAPI que adjunta la identidad al request
      (request.state.identity + contexto de logs) o corta con un error.

Colaboradores:
    - identity.tokens.TokenService: verify().
    - crosscutting.error_responses: missing_token (401) / invalid_token (403).
    - crosscutting.metrics: contadores de rechazo.
    - leavedesk.context: user_id para correlación de logs.

Decisiones:
    - Sin header, esquema incorrecto o token vacío -> MISSING_TOKEN (401).
    - Cualquier falla de verificación, expiración incluida -> INVALID_TOKEN (403).
    - Sin acceso a la DB: tener un token válido alcanza.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from fastapi import Depends, Header, Request

from ..context import set_user_context
from ..crosscutting.error_responses import (
    AppHTTPException,
    invalid_token,
    missing_token,
)
from ..crosscutting.logger import logger
from ..crosscutting.metrics import record_auth_rejection
from .tokens import TokenError, TokenService

BEARER_SCHEME: str = "bearer"


class RejectionReason(str, Enum):
    MISSING_TOKEN = "MISSING_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"


@dataclass(frozen=True, slots=True)
class Identity:
    """Sujeto autenticado adjunto al request."""

    user_id: int


@dataclass(frozen=True, slots=True)
class GateDecision:
    """
    Resultado del gate.

    Contrato:
      - Authenticated: identity != None and reason == None
      - Rejected:      identity == None and reason != None
    """

    identity: Identity | None = None
    reason: RejectionReason | None = None
    message: str = ""

    @property
    def authenticated(self) -> bool:
        return self.identity is not None


def extract_bearer_token(authorization: str | None) -> str | None:
    """Extrae el token de `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    token = parts[1].strip()
    return token or None


class AuthGate:
    """Etapa stateless del request: entra el header, sale la decisión."""

    def __init__(self, token_service: TokenService) -> None:
        self._tokens = token_service

    def evaluate(self, authorization: str | None) -> GateDecision:
        token = extract_bearer_token(authorization)
        if token is None:
            return GateDecision(
                reason=RejectionReason.MISSING_TOKEN, message="Token missing"
            )

        try:
            subject_id = self._tokens.verify(token)
        except TokenError as exc:
            logger.info("auth gate: token rechazado", extra={"reason": exc.reason})
            return GateDecision(
                reason=RejectionReason.INVALID_TOKEN, message="Invalid token"
            )

        return GateDecision(identity=Identity(user_id=subject_id))


def rejection_to_http(decision: GateDecision) -> AppHTTPException:
    """Mapea una decisión rechazada a su error HTTP terminal."""
    if decision.reason == RejectionReason.MISSING_TOKEN:
        return missing_token(decision.message or "Token missing")
    return invalid_token(decision.message or "Invalid token")


def require_identity(gate_provider: Callable[[], AuthGate]) -> Callable:
    """Dependencia FastAPI: exige un bearer token verificado."""

    async def dependency(
        request: Request,
        gate: AuthGate = Depends(gate_provider),
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> Identity:
        decision = gate.evaluate(authorization)
        if not decision.authenticated:
            record_auth_rejection(decision.reason.value)
            raise rejection_to_http(decision)

        identity = decision.identity
        request.state.identity = identity
        set_user_context(identity.user_id)
        return identity

    return dependency
