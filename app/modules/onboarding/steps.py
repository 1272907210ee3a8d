"""
Per-step payloads for the onboarding wizard.

Each payload mirrors what one screen collects. Fields are optional because the
client posts the form as it stands; is_valid() is the rule that enables the
continue button and to_profile() builds the single profile upsert for the step.
"""
from typing import ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel, Field

from app.config.onboarding_config import (
    STEPS, LANGUAGES, MOODS, AGE_RANGES, GENDERS, FITNESS_GOALS, FITNESS_LEVELS,
    WORKOUT_LOCATIONS, WEEKDAYS, TARGET_MUSCLES, DIETARY_PREFERENCES,
    DEFAULT_BUDGET_CURRENCY, OTHER_OPTION, get_step
)
from app.modules.measurements.ruler import HEIGHT_UNITS, WEIGHT_UNITS


def merge_custom(selected: List[str], custom: List[str]) -> List[str]:
    """Selected codes without the "other" placeholder, followed by the typed entries."""
    merged = [code for code in selected if code != OTHER_OPTION]
    if OTHER_OPTION in selected:
        for entry in custom:
            entry = entry.strip()
            if entry and entry not in merged:
                merged.append(entry)
    return merged


class StepPayload(BaseModel):
    # what the error message calls this step's data
    subject: ClassVar[str] = "data"

    def is_valid(self) -> bool:
        return True

    def to_profile(self) -> Dict:
        return {}


class LanguageStep(StepPayload):
    subject: ClassVar[str] = "language preference"
    preferred_language: Optional[str] = None

    def is_valid(self) -> bool:
        return self.preferred_language in LANGUAGES

    def to_profile(self) -> Dict:
        return {"preferred_language": self.preferred_language}


class MoodStep(StepPayload):
    subject: ClassVar[str] = "mood"
    current_mood: Optional[str] = None

    def is_valid(self) -> bool:
        return self.current_mood in MOODS

    def to_profile(self) -> Dict:
        return {"current_mood": self.current_mood}


class ProfileStep(StepPayload):
    subject: ClassVar[str] = "profile"
    full_name: str = ""
    nickname: str = ""
    age_range: Optional[str] = None
    gender: Optional[str] = None

    def is_valid(self) -> bool:
        return (
            len(self.full_name.strip()) > 0
            and self.age_range in AGE_RANGES
            and self.gender in GENDERS
        )

    def to_profile(self) -> Dict:
        return {
            "full_name": self.full_name.strip(),
            "nickname": self.nickname.strip(),
            "age_range": self.age_range,
            "gender": self.gender,
        }


class LocationStep(StepPayload):
    subject: ClassVar[str] = "location"
    country: Optional[str] = None
    region_province: Optional[str] = None

    def is_valid(self) -> bool:
        return bool(self.country) and bool(self.region_province)

    def to_profile(self) -> Dict:
        return {"country": self.country, "region_province": self.region_province}


class HeightStep(StepPayload):
    subject: ClassVar[str] = "height"
    height: float = 0
    height_unit: str = "cm"

    def is_valid(self) -> bool:
        return self.height > 0 and self.height_unit in HEIGHT_UNITS

    def to_profile(self) -> Dict:
        return {"height": self.height, "height_unit": self.height_unit}


class WeightStep(StepPayload):
    subject: ClassVar[str] = "weight"
    weight: float = 0
    weight_unit: str = "kg"

    def is_valid(self) -> bool:
        return self.weight > 0 and self.weight_unit in WEIGHT_UNITS

    def to_profile(self) -> Dict:
        return {"weight": self.weight, "weight_unit": self.weight_unit}


class FitnessStep(StepPayload):
    subject: ClassVar[str] = "fitness preferences"
    fitness_goal: Optional[str] = None
    fitness_level: Optional[str] = None
    workout_location: Optional[str] = None
    equipment: List[str] = []
    custom_equipment: List[str] = []
    workout_duration_minutes: int = Field(default=30, ge=0)
    weekly_frequency: List[str] = []

    @property
    def selected_days(self) -> List[str]:
        return [day for day in self.weekly_frequency if day in WEEKDAYS]

    def is_valid(self) -> bool:
        if not (
            self.fitness_goal in FITNESS_GOALS
            and self.fitness_level in FITNESS_LEVELS
            and self.workout_location in WORKOUT_LOCATIONS
        ):
            return False
        if not self.selected_days:
            return False
        if self.workout_location == "gym":
            return True
        if not self.equipment:
            return False
        custom = [entry for entry in self.custom_equipment if entry.strip()]
        return OTHER_OPTION not in self.equipment or len(custom) > 0

    def to_profile(self) -> Dict:
        return {
            "fitness_goal": self.fitness_goal,
            "fitness_level": self.fitness_level,
            "workout_location": self.workout_location,
            "equipment_list": merge_custom(self.equipment, self.custom_equipment),
            "workout_duration_minutes": self.workout_duration_minutes,
            "weekly_frequency": self.selected_days,
        }


class TargetMuscleStep(StepPayload):
    subject: ClassVar[str] = "target muscles"
    target_muscle_groups: List[str] = []

    def is_valid(self) -> bool:
        return any(muscle in TARGET_MUSCLES for muscle in self.target_muscle_groups)

    def to_profile(self) -> Dict:
        return {
            "target_muscle_groups": [m for m in self.target_muscle_groups if m in TARGET_MUSCLES]
        }


class DietaryStep(StepPayload):
    subject: ClassVar[str] = "dietary preferences"
    dietary_preference: Optional[str] = None
    weekly_budget: Optional[float] = Field(default=None, ge=0)
    meal_plan_duration: List[str] = []
    health_conditions: List[str] = []
    custom_health_conditions: List[str] = []

    def is_valid(self) -> bool:
        return self.dietary_preference in DIETARY_PREFERENCES and len(self.meal_plan_duration) > 0

    def to_profile(self) -> Dict:
        return {
            "dietary_preference": self.dietary_preference,
            "weekly_budget": self.weekly_budget,
            "weekly_budget_currency": DEFAULT_BUDGET_CURRENCY,
            "meal_plan_duration": self.meal_plan_duration,
            "health_conditions": merge_custom(self.health_conditions, self.custom_health_conditions),
        }


class FinishStep(StepPayload):
    subject: ClassVar[str] = "onboarding"


STEP_PAYLOADS: Dict[str, Type[StepPayload]] = {
    "language": LanguageStep,
    "mood": MoodStep,
    "profile": ProfileStep,
    "location": LocationStep,
    "height": HeightStep,
    "weight": WeightStep,
    "fitness": FitnessStep,
    "target-muscle-group": TargetMuscleStep,
    "dietary": DietaryStep,
    "finish": FinishStep,
}


def parse_payload(step_key: str, data: Optional[Dict]) -> StepPayload:
    """Build the payload model for a step; raises KeyError for unknown steps."""
    return STEP_PAYLOADS[step_key](**(data or {}))


def step_index(step_key: str) -> int:
    for index, step in enumerate(STEPS):
        if step["key"] == step_key:
            return index
    raise KeyError(step_key)


def next_step(step_key: str) -> Optional[Dict]:
    index = step_index(step_key)
    if index + 1 < len(STEPS):
        return STEPS[index + 1]
    return None


def previous_step(step_key: str) -> Optional[Dict]:
    """Finish goes back to the start of the wizard; language has nowhere to go."""
    if step_key == "finish":
        return get_step("language")
    index = step_index(step_key)
    if index == 0:
        return None
    return STEPS[index - 1]
