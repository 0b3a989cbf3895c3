"""
===============================================================================
TARJETA CRC — body.py (body JSON crudo para rutas PUT)
===============================================================================

Responsabilidades:
  - Leer el body del request sin validarlo contra un schema antes del handler.
  - Convertirlo al DTO de request y reportar los campos rechazados (tipos
    inválidos, JSON roto, payload que no es objeto) en vez de cortar con 400.
  - Documentar el schema del body en OpenAPI (la ruta no lo declara tipado).

Colaboradores:
  - routers/users.py y routers/leaves.py (PUT)
  - schemas.* (DTOs pydantic)

Reglas:
  - Body vacío o `null` -> DTO vacío (los faltantes los reporta el use case).
  - Un update sobre un id inexistente es 404 aunque el payload sea inválido;
    por eso la validación de tipos no puede cortar antes del use case.
===============================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_FIELD = "body"


@dataclass(frozen=True)
class RawBody:
    value: Any = None
    malformed: bool = False


async def read_json_body(request: Request) -> RawBody:
    """Dependencia FastAPI: body JSON decodificado, sin schema."""
    raw = await request.body()
    if not raw.strip():
        return RawBody()
    try:
        return RawBody(value=json.loads(raw))
    except ValueError:
        return RawBody(malformed=True)


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or BODY_FIELD


def parse_body(
    schema: Type[ModelT], body: RawBody
) -> tuple[ModelT, tuple[str, ...]]:
    """
    Convierte el body al DTO `schema`.

    Devuelve (dto, campos_rechazados). Si hubo rechazos el DTO vuelve vacío:
    el use case solo necesita saber que el payload es inválido.
    """
    if body.malformed:
        return schema(), (BODY_FIELD,)
    if body.value is None:
        return schema(), ()
    try:
        return schema.model_validate(body.value), ()
    except ValidationError as exc:
        rejected = tuple(
            dict.fromkeys(_field_name(tuple(err["loc"])) for err in exc.errors())
        )
        return schema(), rejected or (BODY_FIELD,)


def json_body_openapi(schema: Type[BaseModel]) -> dict[str, Any]:
    """`openapi_extra` que documenta `schema` como body JSON opcional."""
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
