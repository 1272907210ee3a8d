from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.user_workouts.schemas import (
    UserWorkoutPlan, UserWorkoutPlanCreate, UserWorkoutPlanUpdate, UserWorkoutPlanFull,
    UserPlanExerciseCreate, UserPlanExerciseUpdate, ExerciseReorder
)
from app.modules.workouts.schemas import PlanExercise, WorkoutTag
from app.modules.user_workouts.service import UserWorkoutService
from app.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/user-workouts", tags=["user-workouts"])


def get_user_workout_service(
    current_user: Dict = Depends(get_current_user_id),
    supabase: Client = Depends(get_supabase)
) -> UserWorkoutService:
    return UserWorkoutService(supabase, current_user["id"])


@router.get("", response_model=List[UserWorkoutPlan])
async def list_my_plans(service: UserWorkoutService = Depends(get_user_workout_service)):
    """The current user's workout plans, newest first"""
    return service.list_user_plans()


@router.post("", response_model=UserWorkoutPlan, status_code=201)
async def create_plan(
    plan_data: UserWorkoutPlanCreate,
    service: UserWorkoutService = Depends(get_user_workout_service)
):
    return service.create_plan(plan_data)


@router.get("/level/{level}", response_model=List[UserWorkoutPlan])
async def list_my_plans_by_level(level: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    return service.list_user_plans_by_level(level)


@router.get("/category/{category}", response_model=List[UserWorkoutPlan])
async def list_my_plans_by_category(category: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    return service.list_user_plans_by_category(category)


@router.get("/{plan_id}", response_model=UserWorkoutPlan)
async def get_plan(plan_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    return service.get_user_plan(plan_id)


@router.get("/{plan_id}/full", response_model=UserWorkoutPlanFull)
async def get_full_plan(plan_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    return service.get_user_plan_full(plan_id)


@router.put("/{plan_id}", response_model=UserWorkoutPlan)
async def update_plan(
    plan_id: str,
    plan_data: UserWorkoutPlanUpdate,
    service: UserWorkoutService = Depends(get_user_workout_service)
):
    return service.update_plan(plan_id, plan_data)


@router.delete("/{plan_id}", status_code=204)
async def delete_plan(plan_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    service.delete_plan(plan_id)
    return None


@router.get("/{plan_id}/tags", response_model=List[WorkoutTag])
async def get_plan_tags(plan_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    service.get_plan_row(plan_id)
    return service.get_plan_tags(plan_id)


@router.put("/{plan_id}/tags/{tag_id}", response_model=List[WorkoutTag])
async def add_tag(plan_id: str, tag_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    """Tag a plan; returns the plan's tags"""
    return service.add_tag(plan_id, tag_id)


@router.delete("/{plan_id}/tags/{tag_id}", status_code=204)
async def remove_tag(plan_id: str, tag_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    service.remove_tag(plan_id, tag_id)
    return None


@router.get("/{plan_id}/exercises", response_model=List[PlanExercise])
async def get_plan_exercises(plan_id: str, service: UserWorkoutService = Depends(get_user_workout_service)):
    service.get_plan_row(plan_id)
    return service.get_plan_exercises(plan_id)


@router.post("/{plan_id}/exercises", response_model=PlanExercise, status_code=201)
async def add_exercise(
    plan_id: str,
    exercise_data: UserPlanExerciseCreate,
    service: UserWorkoutService = Depends(get_user_workout_service)
):
    return service.add_exercise(plan_id, exercise_data)


@router.post("/{plan_id}/exercises/reorder", response_model=List[PlanExercise])
async def reorder_exercises(
    plan_id: str,
    order: ExerciseReorder,
    service: UserWorkoutService = Depends(get_user_workout_service)
):
    """Set new positions; returns the exercises in their new order"""
    return service.reorder_exercises(plan_id, order)


@router.put("/{plan_id}/exercises/{exercise_id}", response_model=PlanExercise)
async def update_exercise(
    plan_id: str,
    exercise_id: str,
    exercise_data: UserPlanExerciseUpdate,
    service: UserWorkoutService = Depends(get_user_workout_service)
):
    return service.update_exercise(plan_id, exercise_id, exercise_data)


@router.delete("/{plan_id}/exercises/{exercise_id}", status_code=204)
async def remove_exercise(
    plan_id: str,
    exercise_id: str,
    service: UserWorkoutService = Depends(get_user_workout_service)
):
    service.remove_exercise(plan_id, exercise_id)
    return None
