from fastapi import APIRouter, Depends
from app.modules.profiles.schemas import ProfileUpdate, UserProfile, UserRole, RoleUpdate
from app.modules.profiles.service import ProfileService
from app.core.dependencies import get_current_user_id, get_profile_service
from typing import Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the current user's profile"""
    return service.get_profile(current_user["id"])


@router.put("/me", response_model=UserProfile)
async def upsert_my_profile(
    profile_data: ProfileUpdate,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Create or update the current user's profile (only the fields sent are written)"""
    return service.upsert_profile(current_user["id"], profile_data)


@router.delete("/me", status_code=204)
async def delete_my_profile(
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Delete the current user's profile"""
    service.delete_profile(current_user["id"])
    return None


@router.get("/me/role", response_model=UserRole)
async def get_my_role(
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    return service.get_role(current_user["id"])


@router.put("/me/role", response_model=UserRole)
async def upsert_my_role(
    role_data: RoleUpdate,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    return service.upsert_role(current_user["id"], role_data.role)
