from pydantic import BaseModel
from typing import Dict, List, Optional
from app.core.notices import FormStatus, Toast
from app.modules.onboarding.header import HeaderConfig
from app.modules.profiles.schemas import UserProfile


class StepInfo(BaseModel):
    key: str
    number: int
    route: str
    label: str


class StepCatalogue(BaseModel):
    steps: List[StepInfo]
    total_steps: int
    options: Dict[str, Dict[str, List[str]]]


class StepValidation(BaseModel):
    step: str
    valid: bool
    header: HeaderConfig


class StepResult(BaseModel):
    step: str
    status: FormStatus
    next_route: Optional[str] = None
    header: HeaderConfig
    profile: Optional[UserProfile] = None
    toast: Optional[Toast] = None
    affirmation: Optional[str] = None


class ResumeResponse(BaseModel):
    route: str
    current_step: int
    is_onboarding_complete: bool = False
