"""
===============================================================================
TARJETA CRC — routers/users.py
===============================================================================

Clase/Módulo:
    Router de usuarios

Responsabilidades:
    - Endpoints HTTP de perfiles de personal.
    - Requests HTTP -> inputs de use case; resultados -> DTOs.
    - Traducir ProfileError -> problem+json (error_mapping).
    - El alta es pública; el resto de las rutas exige bearer token.
    - PUT lee el body crudo: un id inexistente es 404 aunque el payload
      tenga tipos inválidos.

Colaboradores:
    - application.usecases.profiles
    - container (factories de DI)
    - dependencies.require_auth (Auth Gate)
    - body.read_json_body / parse_body
    - schemas.profiles
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from leavedesk.application.usecases import (
    DeleteProfileUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    RegisterProfileInput,
    RegisterProfileUseCase,
    UpdateProfileInput,
    UpdateProfileUseCase,
)
from leavedesk.container import (
    get_delete_profile_use_case,
    get_get_profile_use_case,
    get_list_profiles_use_case,
    get_register_profile_use_case,
    get_update_profile_use_case,
)
from leavedesk.identity.auth_gate import Identity

from ..body import RawBody, json_body_openapi, parse_body, read_json_body
from ..dependencies import require_auth
from ..error_mapping import raise_profile_error
from ..schemas.profiles import (
    DeleteProfileRes,
    ProfileRes,
    RegisterProfileReq,
    UpdateProfileReq,
)

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[ProfileRes])
def list_users(
    use_case: ListProfilesUseCase = Depends(get_list_profiles_use_case),
    _identity: Identity = Depends(require_auth),
):
    result = use_case.execute()
    if result.error is not None:
        raise_profile_error(result.error)
    return [ProfileRes.from_profile(p) for p in result.profiles]


@router.post(
    "/users",
    response_model=ProfileRes,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    req: RegisterProfileReq | None = None,
    use_case: RegisterProfileUseCase = Depends(get_register_profile_use_case),
):
    req = req or RegisterProfileReq()
    result = use_case.execute(
        RegisterProfileInput(
            user_id=req.user_id,
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            designation=req.designation,
            date_of_birth=req.date_of_birth,
            supervisor=req.supervisor,
            password=req.password,
        )
    )
    if result.error is not None:
        raise_profile_error(result.error)
    return ProfileRes.from_profile(result.profile)


@router.get("/users/{user_id}", response_model=ProfileRes)
def get_user(
    user_id: int,
    use_case: GetProfileUseCase = Depends(get_get_profile_use_case),
    _identity: Identity = Depends(require_auth),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_profile_error(result.error)
    return ProfileRes.from_profile(result.profile)


@router.put(
    "/users/{user_id}",
    response_model=ProfileRes,
    openapi_extra=json_body_openapi(UpdateProfileReq),
)
def update_user(
    user_id: int,
    body: RawBody = Depends(read_json_body),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
    _identity: Identity = Depends(require_auth),
):
    req, rejected = parse_body(UpdateProfileReq, body)
    result = use_case.execute(
        user_id,
        UpdateProfileInput(
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            designation=req.designation,
            date_of_birth=req.date_of_birth,
            supervisor=req.supervisor,
            rejected_fields=rejected,
        ),
    )
    if result.error is not None:
        raise_profile_error(result.error)
    return ProfileRes.from_profile(result.profile)


@router.delete("/users/{user_id}", response_model=DeleteProfileRes)
def delete_user(
    user_id: int,
    use_case: DeleteProfileUseCase = Depends(get_delete_profile_use_case),
    _identity: Identity = Depends(require_auth),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_profile_error(result.error)
    return DeleteProfileRes(message=result.message)
