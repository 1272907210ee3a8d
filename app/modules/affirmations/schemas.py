from pydantic import BaseModel, Field
from typing import List, Optional


class OnboardingAffirmationInput(BaseModel):
    preferred_language: Optional[str] = None
    current_mood: Optional[str] = None
    first_name: Optional[str] = None
    nickname: Optional[str] = None


class FitnessAffirmationInput(BaseModel):
    preferred_language: Optional[str] = None
    current_mood: Optional[str] = None
    fitness_goal: Optional[str] = None
    fitness_level: Optional[str] = None
    workout_location: Optional[str] = None
    equipment_list: List[str] = []
    workout_duration: Optional[int] = None
    weekly_frequency: List[str] = Field(default_factory=list, description="Selected weekday codes")

    @property
    def days_per_week(self) -> int:
        return len(self.weekly_frequency)


class DietaryAffirmationInput(BaseModel):
    preferred_language: Optional[str] = None
    current_mood: Optional[str] = None
    dietary_preference: Optional[str] = None
    weekly_budget: Optional[float] = None
    health_conditions: List[str] = []
    meal_plan_duration: List[str] = []


class CompletionMessageInput(BaseModel):
    preferred_language: Optional[str] = None
    nickname: Optional[str] = None
    full_name: Optional[str] = None
    current_mood: Optional[str] = None
    fitness_goal: Optional[str] = None
    gender: Optional[str] = None


class AffirmationResponse(BaseModel):
    affirmation: str
    language: str
    reveal_after_ms: int = 0


class TextGenerationRequest(BaseModel):
    prompt: str = Field(min_length=1)
    max_new_tokens: int = Field(default=60, ge=1, le=256)


class TextGenerationResponse(BaseModel):
    text: str
    model: str


class InferenceStatus(BaseModel):
    available: bool
    model: str
