from supabase import Client
from app.modules.user_workouts.schemas import (
    UserWorkoutPlan, UserWorkoutPlanCreate, UserWorkoutPlanUpdate, UserWorkoutPlanFull,
    UserPlanExerciseCreate, UserPlanExerciseUpdate, ExerciseReorder
)
from app.modules.workouts.schemas import PlanExercise, WorkoutTag
from app.modules.workouts.service import WorkoutService, _require
from typing import Any, Dict, List
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class UserWorkoutService(WorkoutService):
    """Workout plans a user created. Every read and write is scoped to that user."""

    plans_table = "user_workout_plans"
    plan_tags_table = "user_workout_plan_tags"
    plan_tags_key = "user_plan_id"
    exercises_table = "user_workout_plan_exercises"
    details_table = "user_workout_plan_exercises_details"

    def __init__(self, supabase: Client, user_id: str):
        super().__init__(supabase)
        self.user_id = user_id

    def _plan_rows(self, **filters: Any) -> List[Dict[str, Any]]:
        return super()._plan_rows(user_id=self.user_id, **filters)

    def get_plan_row(self, plan_id: str) -> Dict[str, Any]:
        _require(plan_id)
        try:
            result = self.supabase.table(self.plans_table)\
                .select("*")\
                .eq("id", plan_id)\
                .eq("user_id", self.user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching user workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Workout plan not found")
        return result.data[0]

    def list_user_plans(self) -> List[UserWorkoutPlan]:
        try:
            return [UserWorkoutPlan(**row) for row in self._plan_rows()]
        except Exception as e:
            logger.error(f"Error listing workout plans for {self.user_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_user_plan(self, plan_id: str) -> UserWorkoutPlan:
        return UserWorkoutPlan(**self.get_plan_row(plan_id))

    def get_user_plan_full(self, plan_id: str) -> UserWorkoutPlanFull:
        plan = self.get_plan_full(plan_id)
        return UserWorkoutPlanFull(**plan.model_dump(), user_id=self.user_id)

    def create_plan(self, data: UserWorkoutPlanCreate) -> UserWorkoutPlan:
        if not data.name.strip():
            raise HTTPException(status_code=400, detail="Plan name is required")
        try:
            insert_data = data.model_dump()
            insert_data["name"] = data.name.strip()
            insert_data["user_id"] = self.user_id
            insert_data["created_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table(self.plans_table).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create workout plan")
            return UserWorkoutPlan(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating workout plan for {self.user_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_plan(self, plan_id: str, data: UserWorkoutPlanUpdate) -> UserWorkoutPlan:
        _require(plan_id)
        update_data = data.model_dump(exclude_unset=True)
        if "name" in update_data:
            _require(update_data["name"] or "", "Plan name")
            update_data["name"] = update_data["name"].strip()
        if not update_data:
            return self.get_user_plan(plan_id)
        try:
            result = self.supabase.table(self.plans_table)\
                .update(update_data)\
                .eq("id", plan_id)\
                .eq("user_id", self.user_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Workout plan not found")
            return UserWorkoutPlan(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_plan(self, plan_id: str) -> None:
        self.get_plan_row(plan_id)
        try:
            self.supabase.table(self.plans_table)\
                .delete()\
                .eq("id", plan_id)\
                .eq("user_id", self.user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def list_user_plans_by_level(self, level: str) -> List[UserWorkoutPlan]:
        return [UserWorkoutPlan(**p.model_dump(), user_id=self.user_id) for p in self.get_plans_by_level(level)]

    def list_user_plans_by_category(self, category: str) -> List[UserWorkoutPlan]:
        return [UserWorkoutPlan(**p.model_dump(), user_id=self.user_id) for p in self.get_plans_by_category(category)]

    # Tags

    def add_tag(self, plan_id: str, tag_id: str) -> List[WorkoutTag]:
        """Link a catalogue tag to one of the user's plans. Linking twice is a no-op."""
        _require(tag_id, "Tag ID")
        self.get_plan_row(plan_id)
        try:
            existing = self.supabase.table(self.plan_tags_table)\
                .select("tag_id")\
                .eq(self.plan_tags_key, plan_id)\
                .eq("tag_id", tag_id)\
                .execute()
            if not existing.data:
                self.supabase.table(self.plan_tags_table)\
                    .insert({self.plan_tags_key: plan_id, "tag_id": tag_id})\
                    .execute()
        except Exception as e:
            logger.error(f"Error tagging workout plan {plan_id} with {tag_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return self.get_plan_tags(plan_id)

    def remove_tag(self, plan_id: str, tag_id: str) -> None:
        _require(tag_id, "Tag ID")
        self.get_plan_row(plan_id)
        try:
            result = self.supabase.table(self.plan_tags_table)\
                .delete()\
                .eq(self.plan_tags_key, plan_id)\
                .eq("tag_id", tag_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error removing tag {tag_id} from workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Tag is not on this plan")

    # Exercises

    def add_exercise(self, plan_id: str, data: UserPlanExerciseCreate) -> PlanExercise:
        self.get_plan_row(plan_id)
        try:
            insert_data = data.model_dump()
            insert_data["plan_id"] = plan_id
            result = self.supabase.table(self.exercises_table).insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add exercise")
            return PlanExercise(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error adding exercise to workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_exercise(self, plan_id: str, exercise_id: str, data: UserPlanExerciseUpdate) -> PlanExercise:
        _require(exercise_id, "Exercise ID")
        self.get_plan_row(plan_id)
        update_data = data.model_dump(exclude_unset=True)
        try:
            query = self.supabase.table(self.exercises_table)
            if update_data:
                query = query.update(update_data)
            else:
                query = query.select("*")
            result = query\
                .eq("plan_id", plan_id)\
                .eq("exercise_id", exercise_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating exercise {exercise_id} in workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Exercise is not in this plan")
        return PlanExercise(**result.data[0])

    def remove_exercise(self, plan_id: str, exercise_id: str) -> None:
        _require(exercise_id, "Exercise ID")
        self.get_plan_row(plan_id)
        try:
            result = self.supabase.table(self.exercises_table)\
                .delete()\
                .eq("plan_id", plan_id)\
                .eq("exercise_id", exercise_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error removing exercise {exercise_id} from workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Exercise is not in this plan")

    def reorder_exercises(self, plan_id: str, order: ExerciseReorder) -> List[PlanExercise]:
        """Write the given positions one exercise at a time, then return the plan's exercises in order."""
        self.get_plan_row(plan_id)
        try:
            for item in order.exercises:
                self.supabase.table(self.exercises_table)\
                    .update({"position": item.position})\
                    .eq("plan_id", plan_id)\
                    .eq("exercise_id", item.exercise_id)\
                    .execute()
        except Exception as e:
            logger.error(f"Error reordering exercises in workout plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return self.get_plan_exercises(plan_id)
