import asyncio
from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.workouts.schemas import (
    WorkoutPlan, WorkoutTag, WorkoutPlanWithTags, WorkoutPlanFull,
    ExerciseDetails, PlanExercise, WorkoutDetails
)
from app.modules.workouts.service import WorkoutService
from app.modules.profiles.service import ProfileService
from app.core.dependencies import get_current_user_id, get_profile_service
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/workouts", tags=["workouts"])


def get_workout_service(supabase: Client = Depends(get_supabase)) -> WorkoutService:
    return WorkoutService(supabase)


@router.get("", response_model=List[WorkoutPlan])
async def list_workout_plans(
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.list_plans()


@router.get("/free", response_model=List[WorkoutPlan])
async def list_free_plans(
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_free_plans()


@router.get("/tags", response_model=List[WorkoutTag])
async def list_tags(
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.list_tags()


@router.get("/exercises", response_model=List[ExerciseDetails])
async def list_exercises(
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.list_exercise_details()


@router.get("/exercises/{exercise_id}", response_model=ExerciseDetails)
async def get_exercise(
    exercise_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_exercise_details(exercise_id)


@router.get("/level/{level}", response_model=List[WorkoutPlan])
async def list_plans_by_level(
    level: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_plans_by_level(level)


@router.get("/category/{category}", response_model=List[WorkoutPlan])
async def list_plans_by_category(
    category: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_plans_by_category(category)


@router.get("/{plan_id}", response_model=WorkoutPlan)
async def get_workout_plan(
    plan_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_plan(plan_id)


@router.get("/{plan_id}/tags", response_model=List[WorkoutTag])
async def get_plan_tags(
    plan_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_plan_tags(plan_id)


@router.get("/{plan_id}/with-tags", response_model=WorkoutPlanWithTags)
async def get_plan_with_tags(
    plan_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_plan_with_tags(plan_id)


@router.get("/{plan_id}/full", response_model=WorkoutPlanFull)
async def get_full_plan(
    plan_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    """Plan with tags and ordered exercises including their details"""
    return service.get_plan_full(plan_id)


@router.get("/{plan_id}/exercises", response_model=List[PlanExercise])
async def get_plan_exercises(
    plan_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service)
):
    return service.get_plan_exercises(plan_id)


@router.get("/{plan_id}/details", response_model=WorkoutDetails)
async def get_workout_details(
    plan_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: WorkoutService = Depends(get_workout_service),
    profiles: ProfileService = Depends(get_profile_service)
):
    """
    Detail screen data. The user's gender (for muscle diagrams) and the full
    plan are fetched concurrently.
    """
    gender, plan = await asyncio.gather(
        asyncio.to_thread(profiles.get_gender, current_user["id"]),
        asyncio.to_thread(service.get_plan_full, plan_id),
    )
    return WorkoutDetails(gender=gender, plan=plan)
