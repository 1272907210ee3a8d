from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.plans.schemas import PlanResponse
from app.modules.plans.service import PlanService
from supabase import Client
from typing import List

router = APIRouter(prefix="/plans", tags=["plans"])


def get_plan_service(supabase: Client = Depends(get_supabase)) -> PlanService:
    return PlanService(supabase)


@router.get("", response_model=List[PlanResponse])
async def list_plans(service: PlanService = Depends(get_plan_service)):
    """Subscription plans shown on the pricing dialog"""
    return service.list_active_plans()


@router.get("/{code}", response_model=PlanResponse)
async def get_plan(code: str, service: PlanService = Depends(get_plan_service)):
    return service.get_plan(code)
