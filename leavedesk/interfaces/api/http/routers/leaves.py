"""
===============================================================================
TARJETA CRC — routers/leaves.py
===============================================================================

Clase/Módulo:
    Router de licencias

Responsabilidades:
    - Endpoints HTTP de licencias (todos detrás del Auth Gate).
    - Requests HTTP -> LeaveInput; resultados -> DTOs.
    - Traducir LeaveError -> problem+json (error_mapping).
    - PUT lee el body crudo: un id inexistente es 404 aunque el payload
      tenga tipos inválidos.

Colaboradores:
    - application.usecases.leaves
    - container (factories de DI)
    - dependencies.require_auth (Auth Gate)
    - body.read_json_body / parse_body
    - schemas.leaves
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from leavedesk.application.usecases import (
    CreateLeaveUseCase,
    DeleteLeaveUseCase,
    GetLeaveUseCase,
    LeaveInput,
    ListLeavesUseCase,
    UpdateLeaveUseCase,
)
from leavedesk.container import (
    get_create_leave_use_case,
    get_delete_leave_use_case,
    get_get_leave_use_case,
    get_list_leaves_use_case,
    get_update_leave_use_case,
)
from leavedesk.identity.auth_gate import Identity

from ..body import RawBody, json_body_openapi, parse_body, read_json_body
from ..dependencies import require_auth
from ..error_mapping import raise_leave_error
from ..schemas.leaves import DeleteLeaveRes, LeaveReq, LeaveRes

router = APIRouter(tags=["leaves"])


def _to_input(req: LeaveReq, rejected: tuple[str, ...] = ()) -> LeaveInput:
    return LeaveInput(
        date_from=req.date_from,
        date_to=req.date_to,
        leave_type=req.leave_type,
        reason=req.reason,
        emergency_contact=req.emergency_contact,
        user_id=req.user_id,
        rejected_fields=rejected,
    )


@router.get("/leaves", response_model=list[LeaveRes])
def list_leaves(
    use_case: ListLeavesUseCase = Depends(get_list_leaves_use_case),
    _identity: Identity = Depends(require_auth),
):
    result = use_case.execute()
    if result.error is not None:
        raise_leave_error(result.error)
    return [LeaveRes.from_leave(leave) for leave in result.leaves]


@router.post(
    "/leaves",
    response_model=LeaveRes,
    status_code=status.HTTP_201_CREATED,
)
def create_leave(
    req: LeaveReq | None = None,
    use_case: CreateLeaveUseCase = Depends(get_create_leave_use_case),
    _identity: Identity = Depends(require_auth),
):
    req = req or LeaveReq()
    result = use_case.execute(_to_input(req))
    if result.error is not None:
        raise_leave_error(result.error)
    return LeaveRes.from_leave(result.leave)


@router.get("/leaves/{leave_id}", response_model=LeaveRes)
def get_leave(
    leave_id: int,
    use_case: GetLeaveUseCase = Depends(get_get_leave_use_case),
    _identity: Identity = Depends(require_auth),
):
    result = use_case.execute(leave_id)
    if result.error is not None:
        raise_leave_error(result.error)
    return LeaveRes.from_leave(result.leave)


@router.put(
    "/leaves/{leave_id}",
    response_model=LeaveRes,
    openapi_extra=json_body_openapi(LeaveReq),
)
def update_leave(
    leave_id: int,
    body: RawBody = Depends(read_json_body),
    use_case: UpdateLeaveUseCase = Depends(get_update_leave_use_case),
    _identity: Identity = Depends(require_auth),
):
    req, rejected = parse_body(LeaveReq, body)
    result = use_case.execute(leave_id, _to_input(req, rejected))
    if result.error is not None:
        raise_leave_error(result.error)
    return LeaveRes.from_leave(result.leave)


@router.delete("/leaves/{leave_id}", response_model=DeleteLeaveRes)
def delete_leave(
    leave_id: int,
    use_case: DeleteLeaveUseCase = Depends(get_delete_leave_use_case),
    _identity: Identity = Depends(require_auth),
):
    result = use_case.execute(leave_id)
    if result.error is not None:
        raise_leave_error(result.error)
    return DeleteLeaveRes(
        message=result.message,
        deleted_leave=LeaveRes.from_leave(result.leave),
    )
