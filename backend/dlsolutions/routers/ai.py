"""AI assistant endpoints."""

from fastapi import APIRouter, Depends

from dlsolutions.core.auth import get_current_user
from dlsolutions.schemas.ai import (
    AnalyzeRequest,
    EmailTemplateRequest,
    GenerationRequest,
    GenerationResponse,
    TextResponse,
)
from dlsolutions.services.ai_service import AIService, get_ai_service

router = APIRouter(dependencies=[Depends(get_current_user)])

UPSTREAM = {502: {"description": "Completion API unavailable"}}


@router.post(
    "/generate", response_model=GenerationResponse, summary="Generate text", responses=UPSTREAM
)
async def generate(
    data: GenerationRequest,
    service: AIService = Depends(get_ai_service),
) -> GenerationResponse:
    """Generate a response; identical requests are served from the cache."""
    return await service.generate_with_cache(data)


@router.post(
    "/email-template",
    response_model=TextResponse,
    summary="Draft an email",
    responses=UPSTREAM,
)
async def email_template(
    data: EmailTemplateRequest,
    service: AIService = Depends(get_ai_service),
) -> TextResponse:
    return TextResponse(text=await service.email_template(data.subject, data.tone, data.points))


@router.post("/analyze", response_model=TextResponse, summary="Analyze data", responses=UPSTREAM)
async def analyze(
    data: AnalyzeRequest,
    service: AIService = Depends(get_ai_service),
) -> TextResponse:
    return TextResponse(text=await service.analyze(data.data))
