from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from src.application.use_cases.farm import change_passkey, update_profile
from src.domain.models.farm_profile import FarmProfile
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.passkey import PasskeyVerifier, ProtectedAction
from src.interfaces.http.deps import (
    get_auth_context,
    get_passkey_verifier,
    get_uow,
    require_passkey,
)
from src.interfaces.http.schemas.farm import (
    FarmProfileResponse,
    FarmProfileUpdate,
    PasskeyChange,
)

router = APIRouter(prefix="/farm", tags=["farm"])


@router.get("/profile", response_model=FarmProfileResponse)
async def get_profile(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    profile = await uow.farm_profiles.get(context.tenant_id)
    return FarmProfileResponse.model_validate(profile or FarmProfile(tenant_id=context.tenant_id))


@router.put("/profile", response_model=FarmProfileResponse)
async def put_profile(
    payload: FarmProfileUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    saved = await update_profile.execute(
        uow,
        context.tenant_id,
        context.role,
        update_profile.UpdateProfileInput(**payload.model_dump()),
    )
    return FarmProfileResponse.model_validate(saved)


@router.put(
    "/passkey",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passkey(ProtectedAction.CHANGE_PASSKEY))],
)
async def put_passkey(
    payload: PasskeyChange,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    verifier: PasskeyVerifier = Depends(get_passkey_verifier),
):
    await change_passkey.execute(
        uow, context.tenant_id, context.role, payload.new_passkey, verifier
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
