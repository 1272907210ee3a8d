from fastapi import APIRouter, Body, Depends, Query
from typing import Any, Dict, Optional
from app.config.onboarding_config import STEPS, TOTAL_STEPS, get_options
from app.core.dependencies import get_current_user_id, get_header_store, get_onboarding_service
from app.modules.onboarding.header import (
    HeaderStore, HeaderConfig, HeaderUpdate, HeaderView, view_for_route
)
from app.modules.onboarding.schemas import (
    StepCatalogue, StepInfo, StepResult, StepValidation, ResumeResponse
)
from app.modules.onboarding.service import OnboardingService

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.get("/steps", response_model=StepCatalogue)
async def list_steps():
    """Wizard steps in order plus the option codes each one offers"""
    return StepCatalogue(
        steps=[StepInfo(**step) for step in STEPS],
        total_steps=TOTAL_STEPS,
        options=get_options(),
    )


@router.get("/resume", response_model=ResumeResponse)
async def resume_onboarding(
    current_user: Dict = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service)
):
    return service.resume(current_user["id"])


@router.get("/header", response_model=HeaderView)
async def get_header(
    route: Optional[str] = Query(default=None),
    current_user: Dict = Depends(get_current_user_id),
    headers: HeaderStore = Depends(get_header_store)
):
    """Header as rendered on a route; the route fills in a missing step number"""
    return view_for_route(headers.get_header(current_user["id"]), route)


@router.post("/header", response_model=HeaderConfig)
async def set_header(
    update: HeaderUpdate,
    current_user: Dict = Depends(get_current_user_id),
    headers: HeaderStore = Depends(get_header_store)
):
    """Merge a partial header config; fields not sent keep their value"""
    return headers.set_header(current_user["id"], update)


@router.post("/header/reset", response_model=HeaderConfig)
async def reset_header(
    current_user: Dict = Depends(get_current_user_id),
    headers: HeaderStore = Depends(get_header_store)
):
    return headers.reset_header(current_user["id"])


@router.post("/steps/{step}", response_model=StepResult)
async def submit_step(
    step: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    current_user: Dict = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service)
):
    """Save a step and get the route to continue to"""
    return service.submit_step(current_user["id"], step, payload)


@router.post("/steps/{step}/back", response_model=StepResult)
async def step_back(
    step: str,
    current_user: Dict = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service)
):
    return service.go_back(current_user["id"], step)


@router.post("/steps/{step}/validate", response_model=StepValidation)
async def validate_step(
    step: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    current_user: Dict = Depends(get_current_user_id),
    service: OnboardingService = Depends(get_onboarding_service)
):
    return service.validate_step(current_user["id"], step, payload)
