"""
Nombre: Entry point de la aplicación FastAPI

Responsabilidades:
  - Inicializar la app FastAPI con metadata (título, versión)
  - Configurar middlewares (límite de body, contexto de request, CORS)
  - Montar el router de negocio en "/" y bajo el alias "/api"
  - Exponer endpoints de health, readiness y métricas

Colaboradores:
  - FastAPI: framework web ASGI
  - CORSMiddleware: manejo de Cross-Origin Resource Sharing
  - RequestContextMiddleware: request id y contexto de logs
  - BodyLimitMiddleware: rechaza bodies demasiado grandes con 413
  - interfaces.api.http.router: login, users, leaves

Restricciones:
  - CORS configurable vía ALLOWED_ORIGINS (separado por comas)
  - El pool se crea en el lifespan, nunca al importar
  - En el entorno de test los repositorios son en memoria: sin pool

Notas:
  - El orden de middlewares importa: RequestContext -> BodyLimit -> rutas
  - /healthz es solo liveness; /readyz hace ping al store
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..application.dev_seed_profile import ensure_dev_profile
from ..container import get_credential_hasher, get_profile_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import BodyLimitMiddleware, RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers
from .versioning import include_versioned_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ciclo de vida startup/shutdown. Inicializa el pool y el dev seed."""
    settings = get_settings()
    uses_pool = not settings.is_test()

    if uses_pool:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        )

    try:
        try:
            ensure_dev_profile(
                settings,
                profile_repo=get_profile_repository(),
                hasher=get_credential_hasher(),
            )
        except Exception as e:
            logger.error(f"Startup falló: {e}")
            raise

        logger.info(
            "Leavedesk API iniciando",
            extra={
                "app_env": settings.app_env,
                "token_ttl_hours": settings.jwt_access_ttl_hours,
                "leave_validation_strict": settings.leave_validation_strict,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )

        yield

    finally:
        if uses_pool:
            close_pool()
        logger.info("Leavedesk API apagándose")


def _get_allowed_origins() -> list[str]:
    """Orígenes CORS desde settings, con fallback ante errores al importar."""
    try:
        return get_settings().get_allowed_origins_list()
    except Exception:
        return ["http://localhost:3000"]


# R: Instancia FastAPI con la metadata de la API
app = FastAPI(
    title="Leavedesk API",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Password login (bearer tokens)"},
        {"name": "users", "description": "Personnel profiles"},
        {"name": "leaves", "description": "Leave requests"},
    ],
)

# R: Orden de middlewares (el último agregado corre primero):
# 1. RequestContextMiddleware - setea request_id
# 2. BodyLimitMiddleware - rechaza bodies grandes temprano
# 3. CORSMiddleware - maneja preflight
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)
app.add_middleware(BodyLimitMiddleware)
app.add_middleware(RequestContextMiddleware)

# R: Rutas de negocio en la raíz y bajo el alias /api
app.include_router(router)
include_versioned_routes(app)

# R: Handlers de excepciones para respuestas de error estructuradas
register_exception_handlers(app)


@app.get("/healthz", tags=["ops"])
def healthz(request: Request):
    """Liveness: el proceso responde."""
    return {
        "ok": True,
        "request_id": getattr(request.state, "request_id", None),
    }


@app.get("/readyz", tags=["ops"])
def readyz(request: Request, response: Response):
    """
    Readiness: el store de perfiles responde.

    Returns:
        ok: True si el store es alcanzable
        db: "connected" o "disconnected"
        request_id: id de correlación de este request
    """
    db_status = "disconnected"
    try:
        if get_profile_repository().ping():
            db_status = "connected"
    except Exception as e:
        logger.warning("Ready check: DB no disponible", extra={"error": str(e)})

    if db_status != "connected":
        response.status_code = 503

    return {
        "ok": db_status == "connected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }


@app.get("/metrics", tags=["ops"])
def metrics():
    """Métricas en formato de texto Prometheus."""
    from ..crosscutting.metrics import get_metrics_response, is_prometheus_available

    if not is_prometheus_available():
        return Response(
            content="# prometheus_client no instalado\n",
            media_type="text/plain",
        )

    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
