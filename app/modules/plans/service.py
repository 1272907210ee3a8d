from supabase import Client
from app.modules.plans.schemas import Plan, PlanResponse
from app.modules.plans.features import format_plan_features, get_key_features
from typing import Dict, Any, List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def to_response(row: Dict[str, Any]) -> PlanResponse:
    plan = Plan(**row)
    return PlanResponse(
        **plan.model_dump(),
        feature_list=format_plan_features(plan.features),
        key_features=get_key_features(plan.features),
    )


class PlanService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_active_plans(self) -> List[PlanResponse]:
        """Active subscription tiers, cheapest first"""
        try:
            result = self.supabase.table("plans")\
                .select("*")\
                .eq("is_active", True)\
                .order("price_usd")\
                .execute()
            return [to_response(row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error listing plans: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_plan(self, code: str) -> PlanResponse:
        try:
            result = self.supabase.table("plans")\
                .select("*")\
                .eq("code", code)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching plan {code}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=404, detail="Plan not found")
        return to_response(result.data[0])
