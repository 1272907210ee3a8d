from supabase import Client
from app.modules.profiles.schemas import ProfileUpdate, UserProfile, UserRole
from typing import Any, Dict, Optional, Union
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

PROFILE_TABLE = "user_profile"
ROLE_TABLE = "user_role"


def _profile_payload(data: Union[ProfileUpdate, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(data, ProfileUpdate):
        return data.model_dump(exclude_none=True)
    return {k: v for k, v in data.items() if v is not None}


class ProfileService:
    def __init__(self, supabase: Client, role_client: Optional[Client] = None):
        self.supabase = supabase
        self.role_client = role_client or supabase

    # Profile

    def find_profile(self, user_id: str) -> Optional[UserProfile]:
        """Return the profile row for user_id, or None when the user has not saved anything yet."""
        try:
            result = self.supabase.table(PROFILE_TABLE)\
                .select("*")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            if not result.data:
                return None
            return UserProfile(**result.data[0])
        except Exception as e:
            logger.error(f"Error fetching profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch profile: {str(e)}")

    def get_profile(self, user_id: str) -> UserProfile:
        profile = self.find_profile(user_id)
        if profile is None:
            raise HTTPException(status_code=404, detail="Profile not found")
        return profile

    def create_profile(self, user_id: str, data: Union[ProfileUpdate, Dict[str, Any]]) -> UserProfile:
        try:
            insert_data = _profile_payload(data)
            insert_data["user_id"] = user_id
            result = self.supabase.table(PROFILE_TABLE).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create profile")
            return UserProfile(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create profile: {str(e)}")

    def update_profile(self, user_id: str, data: Union[ProfileUpdate, Dict[str, Any]]) -> UserProfile:
        try:
            update_data = _profile_payload(data)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table(PROFILE_TABLE)\
                .update(update_data)\
                .eq("user_id", user_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")
            return UserProfile(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update profile: {str(e)}")

    def upsert_profile(self, user_id: str, data: Union[ProfileUpdate, Dict[str, Any]]) -> UserProfile:
        """Insert or update the profile row keyed by user_id. Fields left as None are not written."""
        try:
            upsert_data = _profile_payload(data)
            upsert_data["user_id"] = user_id
            upsert_data["updated_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table(PROFILE_TABLE)\
                .upsert(upsert_data, on_conflict="user_id")\
                .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save profile")
            return UserProfile(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error upserting profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save profile: {str(e)}")

    def delete_profile(self, user_id: str) -> bool:
        try:
            result = self.supabase.table(PROFILE_TABLE)\
                .delete()\
                .eq("user_id", user_id)\
                .execute()
            return len(result.data or []) > 0
        except Exception as e:
            logger.error(f"Error deleting profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to delete profile: {str(e)}")

    def get_gender(self, user_id: str) -> str:
        """Gender used to pick muscle diagrams. Defaults to male when unset or unreadable."""
        try:
            result = self.supabase.table(PROFILE_TABLE)\
                .select("gender")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            if result.data and result.data[0].get("gender"):
                return result.data[0]["gender"].lower()
        except Exception as e:
            logger.error(f"Error fetching user gender: {e}")
        return "male"

    # Role

    def find_role(self, user_id: str) -> Optional[UserRole]:
        try:
            result = self.role_client.table(ROLE_TABLE)\
                .select("*")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            if not result.data:
                return None
            return UserRole(**result.data[0])
        except Exception as e:
            logger.error(f"Error fetching role for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch role: {str(e)}")

    def get_role(self, user_id: str) -> UserRole:
        role = self.find_role(user_id)
        if role is None:
            raise HTTPException(status_code=404, detail="Role not found")
        return role

    def create_role(self, user_id: str, role: str) -> UserRole:
        try:
            result = self.role_client.table(ROLE_TABLE)\
                .insert({"user_id": user_id, "role": role})\
                .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create role")
            return UserRole(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating role for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create role: {str(e)}")

    def update_role(self, user_id: str, role: str) -> UserRole:
        try:
            result = self.role_client.table(ROLE_TABLE)\
                .update({"role": role})\
                .eq("user_id", user_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Role not found")
            return UserRole(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating role for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update role: {str(e)}")

    def upsert_role(self, user_id: str, role: str) -> UserRole:
        try:
            result = self.role_client.table(ROLE_TABLE)\
                .upsert({"user_id": user_id, "role": role}, on_conflict="user_id")\
                .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save role")
            return UserRole(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error upserting role for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save role: {str(e)}")
