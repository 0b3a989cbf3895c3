"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

TARJETA CRC (Módulo)
-------------------------------------------------------------------------------
Nombre:
    Métricas (Prometheus) con bajo acoplamiento

Responsabilidades:
    - Definir métricas Prometheus cuando la dependencia está instalada.
    - Exponer funciones chicas y estables para registrar eventos y duraciones.
    - Mantener cardinalidad baja: el endpoint es el template de la ruta
      (`/users/{user_id}`), nunca el path crudo; lo que no matchea ninguna
      ruta cae en UNMATCHED_ENDPOINT.
    - Construir la respuesta de /metrics.

Colaboradores:
    - crosscutting.middleware: latencia y conteo HTTP.
    - infrastructure/db/instrumentation: duración de queries.
    - identity.auth_gate: rechazos por motivo.
    - application.usecases.profiles.login: intentos de login por resultado.

Notas:
    - prometheus_client es opcional en runtime: sin él, cada función es no-op.
===============================================================================
"""

from __future__ import annotations

from typing import Optional

UNMATCHED_ENDPOINT = "unmatched"

_prometheus_available = False
_registry = None

try:
    from prometheus_client import (  # type: ignore
        CONTENT_TYPE_LATEST,
        CollectorRegistry,
        Counter,
        Histogram,
        generate_latest,
    )

    _prometheus_available = True
    _registry = CollectorRegistry()
except ImportError:
    pass


_requests_total: Optional["Counter"] = None
_request_latency: Optional["Histogram"] = None
_db_query_duration: Optional["Histogram"] = None
_auth_rejections_total: Optional["Counter"] = None
_logins_total: Optional["Counter"] = None


def _init_metrics() -> None:
    """Inicializa las métricas (una sola vez)."""
    global _requests_total, _request_latency
    global _db_query_duration, _auth_rejections_total, _logins_total

    if not _prometheus_available or _requests_total is not None:
        return

    _requests_total = Counter(
        "leavedesk_requests_total",
        "Total de requests HTTP",
        ["endpoint", "method", "status"],
        registry=_registry,
    )

    _request_latency = Histogram(
        "leavedesk_request_latency_seconds",
        "Latencia de requests HTTP (segundos)",
        ["endpoint", "method"],
        buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
        registry=_registry,
    )

    _db_query_duration = Histogram(
        "leavedesk_db_query_duration_seconds",
        "Duración de sentencias en DB (segundos)",
        ["kind"],
        buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
        registry=_registry,
    )

    _auth_rejections_total = Counter(
        "leavedesk_auth_rejections_total",
        "Requests rechazados por el auth gate",
        ["reason"],
        registry=_registry,
    )

    _logins_total = Counter(
        "leavedesk_logins_total",
        "Intentos de login por resultado",
        ["outcome"],
        registry=_registry,
    )


_init_metrics()


def record_request_metrics(
    endpoint: str, method: str, status_code: int, latency_seconds: float
) -> None:
    """
    Cuenta y mide un request HTTP.

    `endpoint` debe ser el template de la ruta (o UNMATCHED_ENDPOINT).
    """
    if not _prometheus_available:
        return
    label = endpoint or UNMATCHED_ENDPOINT
    if _requests_total:
        _requests_total.labels(
            endpoint=label, method=method, status=_status_bucket(status_code)
        ).inc()
    if _request_latency:
        _request_latency.labels(endpoint=label, method=method).observe(
            latency_seconds
        )


def observe_db_query_duration(kind: str, seconds: float) -> None:
    """Observa la duración de una sentencia en DB.

    `kind` debe ser de baja cardinalidad (SELECT/INSERT/UPDATE/...).
    """
    if not _prometheus_available:
        return
    if _db_query_duration:
        _db_query_duration.labels(kind=(kind or "UNKNOWN").upper()).observe(seconds)


def record_auth_rejection(reason: str) -> None:
    if not _prometheus_available:
        return
    if _auth_rejections_total:
        _auth_rejections_total.labels(reason=reason).inc()


def record_login(outcome: str) -> None:
    if not _prometheus_available:
        return
    if _logins_total:
        _logins_total.labels(outcome=outcome).inc()


def _status_bucket(code: int) -> str:
    if 200 <= code < 300:
        return "2xx"
    if 400 <= code < 500:
        return "4xx"
    if 500 <= code < 600:
        return "5xx"
    return "other"


def get_metrics_response() -> tuple[bytes, str]:
    """Body y content type para /metrics."""
    if not _prometheus_available:
        return b"# prometheus_client no instalado\n", "text/plain"
    return generate_latest(_registry), CONTENT_TYPE_LATEST


def is_prometheus_available() -> bool:
    return _prometheus_available
