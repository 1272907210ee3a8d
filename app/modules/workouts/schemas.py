from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class WorkoutTag(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class WorkoutPlan(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    motivation: Optional[str] = None
    level: str
    total_minutes: Optional[int] = None
    total_calories: Optional[int] = None
    is_free: bool = False
    image_path: Optional[str] = None
    image_alt: Optional[str] = None
    created_at: Optional[datetime] = None
    duration_days: Optional[int] = None
    tier_code: Optional[str] = None
    category: Optional[str] = None
    total_exercises: Optional[int] = None

    class Config:
        from_attributes = True


class ExerciseDetails(BaseModel):
    id: str
    name: str
    default_safety_tip: Optional[str] = None
    primary_muscle: Optional[str] = None
    image_path: Optional[str] = None
    image_alt: Optional[str] = None
    created_at: Optional[datetime] = None
    image_slug: Optional[str] = None

    class Config:
        from_attributes = True


class PlanExercise(BaseModel):
    plan_id: str
    exercise_id: str
    position: int
    section: str
    safety_tip: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration_seconds: Optional[int] = None
    rest_seconds: int = 0
    per_side: bool = False

    class Config:
        from_attributes = True


class PlanExerciseWithDetails(PlanExercise):
    exercise_details: Optional[ExerciseDetails] = None


class WorkoutPlanWithTags(WorkoutPlan):
    tags: List[WorkoutTag] = []


class WorkoutPlanFull(WorkoutPlanWithTags):
    exercises: List[PlanExerciseWithDetails] = []


class WorkoutDetails(BaseModel):
    """Everything the workout detail screen needs in one response"""
    gender: str
    plan: WorkoutPlanFull
