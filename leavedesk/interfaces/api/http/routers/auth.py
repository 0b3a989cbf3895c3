"""
===============================================================================
TARJETA CRC — routers/auth.py
===============================================================================

Responsabilidades:
  - POST /login: canjear userId + password por un bearer token.

Colaboradores:
  - application.usecases.profiles.LoginUseCase
  - error_mapping.raise_profile_error
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from leavedesk.application.usecases import LoginInput, LoginUseCase
from leavedesk.container import get_login_use_case

from ..error_mapping import raise_profile_error
from ..schemas.profiles import LoginReq, LoginRes

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginRes)
def login(
    req: LoginReq | None = None,
    use_case: LoginUseCase = Depends(get_login_use_case),
):
    req = req or LoginReq()
    result = use_case.execute(LoginInput(user_id=req.user_id, password=req.password))
    if result.error is not None:
        raise_profile_error(result.error)

    return LoginRes(
        token=result.token,
        token_type=result.token_type,
        expires_in=result.expires_in,
    )
