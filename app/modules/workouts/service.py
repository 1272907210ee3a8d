from supabase import Client
from app.modules.workouts.schemas import (
    WorkoutPlan, WorkoutTag, WorkoutPlanWithTags, WorkoutPlanFull,
    ExerciseDetails, PlanExercise, PlanExerciseWithDetails
)
from typing import Any, Dict, List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def _require(value: str, what: str = "Plan ID") -> None:
    if not value or not value.strip():
        raise HTTPException(status_code=400, detail=f"{what} is required")


class WorkoutService:
    plans_table = "workout_plans"
    plan_tags_table = "workout_plan_tags"
    plan_tags_key = "plan_id"
    tags_table = "workout_tags"
    exercises_table = "workout_plan_exercises"
    details_table = "workout_plan_exercises_details"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _plan_rows(self, **filters: Any) -> List[Dict[str, Any]]:
        query = self.supabase.table(self.plans_table).select("*")
        for column, value in filters.items():
            query = query.eq(column, value)
        result = query.order("created_at", desc=True).execute()
        return result.data or []

    def list_plans(self) -> List[WorkoutPlan]:
        """All catalogue plans, newest first"""
        try:
            return [WorkoutPlan(**row) for row in self._plan_rows()]
        except Exception as e:
            logger.error(f"Error listing workout plans: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_plan_row(self, plan_id: str) -> Dict[str, Any]:
        _require(plan_id)
        try:
            result = self.supabase.table(self.plans_table)\
                .select("*")\
                .eq("id", plan_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Workout plan not found")
        return result.data[0]

    def get_plan(self, plan_id: str) -> WorkoutPlan:
        return WorkoutPlan(**self.get_plan_row(plan_id))

    def get_plan_tags(self, plan_id: str) -> List[WorkoutTag]:
        """Tags linked to a plan; lookup failures leave the plan untagged."""
        _require(plan_id)
        try:
            links = self.supabase.table(self.plan_tags_table)\
                .select("tag_id")\
                .eq(self.plan_tags_key, plan_id)\
                .execute()
            tag_ids = [row["tag_id"] for row in links.data or []]
            if not tag_ids:
                return []
            result = self.supabase.table(self.tags_table)\
                .select("*")\
                .in_("id", tag_ids)\
                .execute()
            return [WorkoutTag(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching tags for plan {plan_id}: {e}")
            return []

    def get_plan_with_tags(self, plan_id: str) -> WorkoutPlanWithTags:
        row = self.get_plan_row(plan_id)
        return WorkoutPlanWithTags(**row, tags=self.get_plan_tags(plan_id))

    def get_plan_exercises(self, plan_id: str) -> List[PlanExercise]:
        _require(plan_id)
        try:
            result = self.supabase.table(self.exercises_table)\
                .select("*")\
                .eq("plan_id", plan_id)\
                .order("position")\
                .execute()
            return [PlanExercise(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching exercises for plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _details_by_id(self, exercise_ids: List[str]) -> Dict[str, ExerciseDetails]:
        if not exercise_ids:
            return {}
        result = self.supabase.table(self.details_table)\
            .select("*")\
            .in_("id", exercise_ids)\
            .execute()
        return {row["id"]: ExerciseDetails(**row) for row in result.data or []}

    def get_plan_full(self, plan_id: str) -> WorkoutPlanFull:
        """Plan with tags and its exercises in order, each carrying its details."""
        plan = self.get_plan_with_tags(plan_id)

        try:
            exercises = self.get_plan_exercises(plan_id)
        except HTTPException:
            exercises = []

        details: Dict[str, ExerciseDetails] = {}
        try:
            details = self._details_by_id(list({e.exercise_id for e in exercises}))
        except Exception as e:
            logger.error(f"Error fetching exercise details for plan {plan_id}: {e}")

        return WorkoutPlanFull(
            **plan.model_dump(),
            exercises=[
                PlanExerciseWithDetails(**e.model_dump(), exercise_details=details.get(e.exercise_id))
                for e in exercises
            ],
        )

    def get_plans_by_level(self, level: str) -> List[WorkoutPlan]:
        _require(level, "Level")
        try:
            return [WorkoutPlan(**row) for row in self._plan_rows(level=level.lower())]
        except Exception as e:
            logger.error(f"Error fetching plans for level {level}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_plans_by_category(self, category: str) -> List[WorkoutPlan]:
        _require(category, "Category")
        try:
            return [WorkoutPlan(**row) for row in self._plan_rows(category=category)]
        except Exception as e:
            logger.error(f"Error fetching plans for category {category}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_free_plans(self) -> List[WorkoutPlan]:
        try:
            return [WorkoutPlan(**row) for row in self._plan_rows(is_free=True)]
        except Exception as e:
            logger.error(f"Error fetching free plans: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def list_tags(self) -> List[WorkoutTag]:
        try:
            result = self.supabase.table(self.tags_table).select("*").order("name").execute()
            return [WorkoutTag(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error listing workout tags: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def list_exercise_details(self) -> List[ExerciseDetails]:
        try:
            result = self.supabase.table(self.details_table).select("*").order("name").execute()
            return [ExerciseDetails(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error listing exercise details: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_exercise_details(self, exercise_id: str) -> ExerciseDetails:
        _require(exercise_id, "Exercise ID")
        try:
            result = self.supabase.table(self.details_table)\
                .select("*")\
                .eq("id", exercise_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching exercise {exercise_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Exercise not found")
        return ExerciseDetails(**result.data[0])
