from fastapi import HTTPException
from typing import Dict, Optional
from pydantic import ValidationError
from app.config.onboarding_config import (
    STEPS, TOTAL_STEPS, COMPLETED_STEP, HOME_ROUTE, DEFAULT_ROLE, get_step
)
from app.core.notices import FormStatus, Toast
from app.modules.affirmations.generator import AffirmationGenerator, generator as default_generator
from app.modules.affirmations.schemas import (
    OnboardingAffirmationInput, FitnessAffirmationInput,
    DietaryAffirmationInput, CompletionMessageInput
)
from app.modules.onboarding.header import (
    HeaderStore, HeaderConfig, HeaderUpdate, is_header_visible, go_back as back_route_for
)
from app.modules.onboarding.schemas import StepResult, StepValidation, ResumeResponse
from app.modules.onboarding.steps import StepPayload, parse_payload, next_step, previous_step
from app.modules.profiles.schemas import UserProfile
from app.modules.profiles.service import ProfileService
import logging

logger = logging.getLogger(__name__)

FINISH_STEP = "finish"


class OnboardingService:
    def __init__(
        self,
        profiles: ProfileService,
        headers: HeaderStore,
        affirmations: Optional[AffirmationGenerator] = None
    ):
        self.profiles = profiles
        self.headers = headers
        self.affirmations = affirmations or default_generator

    def _get_step(self, step_key: str) -> Dict:
        step = get_step(step_key)
        if step is None:
            raise HTTPException(status_code=404, detail=f"Unknown onboarding step: {step_key}")
        return step

    def _parse(self, step_key: str, data: Optional[Dict]) -> StepPayload:
        try:
            return parse_payload(step_key, data)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=e.errors(include_url=False))

    def screen_header(self, step_key: str, valid: bool, busy: bool = False) -> HeaderUpdate:
        """The header config a step's screen writes while it is shown."""
        step = self._get_step(step_key)
        back = previous_step(step_key)
        forward = next_step(step_key)
        return HeaderUpdate(
            current_step=step["number"],
            total_steps=TOTAL_STEPS,
            can_go_back=back is not None,
            next_disabled=busy or not valid,
            back_route=back["route"] if back else None,
            next_route=forward["route"] if forward else None,
        )

    def validate_step(self, user_id: str, step_key: str, data: Optional[Dict]) -> StepValidation:
        """Check a form as it stands and publish the resulting header state."""
        self._get_step(step_key)
        payload = self._parse(step_key, data)
        valid = payload.is_valid()
        header = self.headers.set_header(user_id, self.screen_header(step_key, valid))
        return StepValidation(step=step_key, valid=valid, header=header)

    def submit_step(self, user_id: str, step_key: str, data: Optional[Dict]) -> StepResult:
        """
        Continue from a step: one profile upsert, then navigate forward.

        current_step only ever moves forward, so going back and re-submitting an
        earlier screen does not lose progress.
        """
        if step_key == FINISH_STEP:
            return self.finish(user_id)

        step = self._get_step(step_key)
        payload = self._parse(step_key, data)
        if not payload.is_valid():
            raise HTTPException(status_code=422, detail=f"Step '{step_key}' is incomplete")

        self.headers.set_header(user_id, self.screen_header(step_key, True, busy=True))
        number = step["number"]
        try:
            existing = self.profiles.find_profile(user_id)
            existing_step = existing.current_step if existing else None
            update = payload.to_profile()
            update["current_step"] = max(existing_step or number, number + 1)
            update["is_onboarding_complete"] = False
            profile = self.profiles.upsert_profile(user_id, update)
        except HTTPException as e:
            logger.error(f"Failed to save {payload.subject} for {user_id}: {e.detail}")
            if step_key != "language":
                return self._failed(user_id, step_key, f"Failed to save your {payload.subject}. Please try again.")
            profile = None

        if step_key == "language":
            self._ensure_role(user_id)

        header = self.headers.set_header(user_id, HeaderUpdate(
            next_disabled=False,
            animation="slide_from_right",
        ))
        forward = next_step(step_key)
        return StepResult(
            step=step_key,
            status=FormStatus.idle(),
            next_route=forward["route"] if forward else None,
            header=header,
            profile=profile,
            affirmation=self._affirmation_for(step_key, profile),
        )

    def finish(self, user_id: str) -> StepResult:
        """Mark onboarding complete and send the user home with a completion message."""
        try:
            profile = self.profiles.upsert_profile(user_id, {
                "is_onboarding_complete": True,
                "current_step": COMPLETED_STEP,
            })
        except HTTPException as e:
            logger.error(f"Failed to complete onboarding for {user_id}: {e.detail}")
            return self._failed(user_id, FINISH_STEP, "Failed to complete onboarding. Please try again.")

        # The wizard is over; the stored header is not needed again
        header = self.headers.get_header(user_id).model_copy(update={"animation": "fade"})
        self.headers.reset_header(user_id)
        return StepResult(
            step=FINISH_STEP,
            status=FormStatus.idle(),
            next_route=HOME_ROUTE,
            header=header,
            profile=profile,
            toast=Toast(message="Welcome to VitalSpark!", kind="success"),
            affirmation=self.completion_message(profile),
        )

    def go_back(self, user_id: str, step_key: str) -> StepResult:
        """Navigate to the previous screen. A header that disabled back for this step wins."""
        step = self._get_step(step_key)
        current = self.headers.get_header(user_id)
        back = previous_step(step_key)
        # Only a header shown on this step may override its defaults
        own_header = is_header_visible(step["route"]) and current.current_step == step["number"]
        config = current if own_header else HeaderConfig()
        config = config.model_copy(update={
            "can_go_back": config.can_go_back and back is not None,
            "back_route": config.back_route or (back["route"] if back else None),
        })
        route = back_route_for(config)
        if route is None:
            return StepResult(step=step_key, status=FormStatus.idle(), header=current)
        header = self.headers.set_header(user_id, HeaderUpdate(animation="slide_from_left"))
        return StepResult(
            step=step_key,
            status=FormStatus.idle(),
            next_route=route,
            header=header,
        )

    def resume(self, user_id: str) -> ResumeResponse:
        """Where a returning user should land."""
        profile = self.profiles.find_profile(user_id)
        if profile is None:
            first = STEPS[0]
            return ResumeResponse(route=first["route"], current_step=first["number"])
        if profile.is_onboarding_complete:
            self.headers.reset_header(user_id)
            return ResumeResponse(route=HOME_ROUTE, current_step=COMPLETED_STEP, is_onboarding_complete=True)

        number = max(1, min(TOTAL_STEPS, profile.current_step or 1))
        for step in STEPS:
            if step["number"] == number:
                return ResumeResponse(route=step["route"], current_step=number)
        return ResumeResponse(route=STEPS[0]["route"], current_step=1)

    def completion_message(self, profile: Optional[UserProfile]) -> str:
        data = CompletionMessageInput()
        if profile is not None:
            data = CompletionMessageInput(**profile.model_dump(include=set(CompletionMessageInput.model_fields)))
        return self.affirmations.completion(data)

    def _ensure_role(self, user_id: str) -> None:
        # Role is not shown anywhere in the wizard; a failure must not block navigation
        try:
            self.profiles.upsert_role(user_id, DEFAULT_ROLE)
        except HTTPException as e:
            logger.error(f"Failed to save user role for {user_id}: {e.detail}")

    def _failed(self, user_id: str, step_key: str, message: str) -> StepResult:
        header = self.headers.set_header(user_id, HeaderUpdate(next_disabled=False))
        return StepResult(
            step=step_key,
            status=FormStatus.error(message),
            header=header,
            toast=Toast(message=message, kind="error"),
        )

    def _affirmation_for(self, step_key: str, profile: Optional[UserProfile]) -> Optional[str]:
        if profile is None:
            return None
        if step_key == "mood":
            return self.affirmations.onboarding(OnboardingAffirmationInput(
                preferred_language=profile.preferred_language,
                current_mood=profile.current_mood,
                first_name=profile.full_name.split(" ")[0] if profile.full_name else None,
                nickname=profile.nickname or None,
            ))
        if step_key == "fitness":
            return self.affirmations.fitness(FitnessAffirmationInput(
                preferred_language=profile.preferred_language,
                current_mood=profile.current_mood,
                fitness_goal=profile.fitness_goal,
                fitness_level=profile.fitness_level,
                workout_location=profile.workout_location,
                equipment_list=profile.equipment_list or [],
                workout_duration=profile.workout_duration_minutes,
                weekly_frequency=profile.weekly_frequency or [],
            ))
        if step_key == "dietary":
            return self.affirmations.dietary(DietaryAffirmationInput(
                preferred_language=profile.preferred_language,
                current_mood=profile.current_mood,
                dietary_preference=profile.dietary_preference,
                weekly_budget=profile.weekly_budget,
                health_conditions=profile.health_conditions or [],
                meal_plan_duration=profile.meal_plan_duration or [],
            ))
        return None
