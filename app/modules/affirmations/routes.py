from fastapi import APIRouter, Depends, HTTPException
from app.config import settings
from app.config.onboarding_config import LANGUAGES, DEFAULT_LANGUAGE
from app.modules.affirmations.generator import AffirmationGenerator, generator
from app.modules.affirmations.inference import HuggingFaceClient, InferenceError, get_inference_client
from app.modules.affirmations.schemas import (
    OnboardingAffirmationInput, FitnessAffirmationInput, DietaryAffirmationInput,
    CompletionMessageInput, AffirmationResponse, TextGenerationRequest,
    TextGenerationResponse, InferenceStatus
)

router = APIRouter(prefix="/affirmations", tags=["affirmations"])


def get_generator() -> AffirmationGenerator:
    return generator


def _language(code):
    return code if code in LANGUAGES else DEFAULT_LANGUAGE


@router.post("/onboarding", response_model=AffirmationResponse)
async def onboarding_affirmation(
    data: OnboardingAffirmationInput,
    gen: AffirmationGenerator = Depends(get_generator)
):
    return AffirmationResponse(
        affirmation=gen.onboarding(data),
        language=_language(data.preferred_language),
        reveal_after_ms=settings.affirmation_reveal_delay_ms,
    )


@router.post("/fitness", response_model=AffirmationResponse)
async def fitness_affirmation(
    data: FitnessAffirmationInput,
    gen: AffirmationGenerator = Depends(get_generator)
):
    return AffirmationResponse(
        affirmation=gen.fitness(data),
        language=_language(data.preferred_language),
        reveal_after_ms=settings.affirmation_reveal_delay_ms,
    )


@router.post("/dietary", response_model=AffirmationResponse)
async def dietary_affirmation(
    data: DietaryAffirmationInput,
    gen: AffirmationGenerator = Depends(get_generator)
):
    return AffirmationResponse(
        affirmation=gen.dietary(data),
        language=_language(data.preferred_language),
        reveal_after_ms=settings.affirmation_reveal_delay_ms,
    )


@router.post("/completion", response_model=AffirmationResponse)
async def completion_message(
    data: CompletionMessageInput,
    gen: AffirmationGenerator = Depends(get_generator)
):
    return AffirmationResponse(
        affirmation=gen.completion(data),
        language=_language(data.preferred_language),
    )


@router.get("/inference/status", response_model=InferenceStatus)
async def inference_status(client: HuggingFaceClient = Depends(get_inference_client)):
    """Whether the remote text generation API answers right now"""
    return InferenceStatus(available=client.is_available(), model=client.model)


@router.post("/inference/generate", response_model=TextGenerationResponse)
async def generate_text(
    request: TextGenerationRequest,
    client: HuggingFaceClient = Depends(get_inference_client)
):
    try:
        text = client.generate(request.prompt, request.max_new_tokens)
    except InferenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return TextGenerationResponse(text=text, model=client.model)
