from pydantic import BaseModel, Field
from typing import List, Optional
from app.modules.workouts.schemas import WorkoutPlan, WorkoutPlanFull


class UserWorkoutPlanCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    motivation: Optional[str] = None
    level: str = "beginner"
    total_minutes: Optional[int] = None
    total_calories: Optional[int] = None
    is_free: bool = False
    image_path: Optional[str] = None
    image_alt: Optional[str] = None
    duration_days: Optional[int] = None
    tier_code: Optional[str] = None
    category: Optional[str] = None
    total_exercises: Optional[int] = None


class UserWorkoutPlanUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    motivation: Optional[str] = None
    level: Optional[str] = None
    total_minutes: Optional[int] = None
    total_calories: Optional[int] = None
    is_free: Optional[bool] = None
    image_path: Optional[str] = None
    image_alt: Optional[str] = None
    duration_days: Optional[int] = None
    tier_code: Optional[str] = None
    category: Optional[str] = None
    total_exercises: Optional[int] = None


class UserWorkoutPlan(WorkoutPlan):
    user_id: Optional[str] = None


class UserWorkoutPlanFull(WorkoutPlanFull):
    user_id: Optional[str] = None


class UserPlanExerciseCreate(BaseModel):
    exercise_id: str = Field(min_length=1)
    position: int = Field(ge=0)
    section: str = "main"
    safety_tip: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration_seconds: Optional[int] = None
    rest_seconds: int = 30
    per_side: bool = False


class UserPlanExerciseUpdate(BaseModel):
    position: Optional[int] = Field(default=None, ge=0)
    section: Optional[str] = None
    safety_tip: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration_seconds: Optional[int] = None
    rest_seconds: Optional[int] = None
    per_side: Optional[bool] = None


class ExercisePosition(BaseModel):
    exercise_id: str
    position: int = Field(ge=0)


class ExerciseReorder(BaseModel):
    exercises: List[ExercisePosition] = Field(min_length=1)
