from pydantic import BaseModel
from typing import Literal, Optional, List
from datetime import datetime


class ProfileFields(BaseModel):
    # Personal information
    current_mood: Optional[str] = None
    full_name: Optional[str] = None
    nickname: Optional[str] = None
    age_range: Optional[str] = None
    gender: Optional[str] = None

    # Onboarding status
    current_step: Optional[int] = None
    is_onboarding_complete: Optional[bool] = None

    # Localization
    preferred_language: Optional[str] = None

    # Physical measurements
    height: Optional[float] = None
    weight: Optional[float] = None
    height_unit: Optional[str] = None
    weight_unit: Optional[str] = None

    # Location
    country: Optional[str] = None
    region_province: Optional[str] = None

    # Fitness preferences
    fitness_goal: Optional[str] = None
    fitness_level: Optional[str] = None
    workout_location: Optional[str] = None
    equipment_list: Optional[List[str]] = None
    workout_duration_minutes: Optional[int] = None
    weekly_frequency: Optional[List[str]] = None
    target_muscle_groups: Optional[List[str]] = None

    # Nutrition preferences
    dietary_preference: Optional[str] = None
    meal_plan_duration: Optional[List[str]] = None

    # Health information
    health_conditions: Optional[List[str]] = None

    # Security
    biometrics_enabled: Optional[bool] = None

    # Financial
    weekly_budget: Optional[float] = None
    weekly_budget_currency: Optional[str] = None

    # Subscription
    plan_code: Optional[str] = None


class ProfileUpdate(ProfileFields):
    """Partial update; only fields that are set are written."""


class UserProfile(ProfileFields):
    id: Optional[str] = None
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @property
    def display_name(self) -> Optional[str]:
        if self.nickname:
            return self.nickname
        if self.full_name:
            return self.full_name.split(" ")[0]
        return None


class UserRole(BaseModel):
    user_id: str
    role: str

    class Config:
        from_attributes = True


class RoleUpdate(BaseModel):
    # Only the self-service role can be written from the client
    role: Literal["member"] = "member"
