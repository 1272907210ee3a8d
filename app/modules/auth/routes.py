from fastapi import APIRouter, Depends
from app.modules.auth.schemas import MeResponse
from app.modules.profiles.service import ProfileService
from app.core.dependencies import get_current_user_id, get_profile_service
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=MeResponse)
async def get_current_user(
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Current user plus the onboarding status the client needs to pick a start screen."""
    profile = service.find_profile(current_user["id"])
    role = service.find_role(current_user["id"])
    return MeResponse(
        **current_user,
        role=role.role if role else None,
        is_onboarding_complete=bool(profile and profile.is_onboarding_complete),
        current_step=profile.current_step if profile else None,
    )
