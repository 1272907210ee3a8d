from pydantic import BaseModel, field_validator
from typing import List, Optional, Union
from datetime import datetime


class AiFeatures(BaseModel):
    recommendations: Optional[bool] = None
    coach_chat_messages_per_day: Optional[int] = None


class LimitFeatures(BaseModel):
    saved_plans: Optional[int] = None
    workouts_per_day: Optional[int] = None
    nutrition_logs_per_day: Optional[int] = None


class ModuleFeatures(BaseModel):
    ai_coach: Optional[bool] = None
    training: Optional[bool] = None
    # either enabled or the name of the analytics tier ("basic", "advanced")
    analytics: Optional[Union[bool, str]] = None
    community: Optional[bool] = None
    nutrition: Optional[bool] = None


class PlanFeatures(BaseModel):
    ai: Optional[AiFeatures] = None
    limits: Optional[LimitFeatures] = None
    modules: Optional[ModuleFeatures] = None
    features_list: Optional[List[str]] = None


class Plan(BaseModel):
    code: str
    name: str
    price_usd: float
    features: PlanFeatures = PlanFeatures()
    stripe_price_id: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_validator("features", mode="before")
    @classmethod
    def empty_features(cls, value):
        return value or {}


class PlanResponse(Plan):
    feature_list: List[str] = []
    key_features: List[str] = []
