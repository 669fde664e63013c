"""Pydantic schemas for the AI assistant endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class GenerationSettings(BaseModel):
    tone: Literal["professional", "friendly", "formal", "casual"] = "professional"
    language: Literal["fr", "en", "es"] = "fr"
    format: Literal["structured", "conversational", "step-by-step", "technical"] = "structured"
    length: str = "medium"
    expertise: Literal["beginner", "intermediate", "technical", "expert"] = "intermediate"
    response_length: int = Field(default=50, ge=1, le=100)


class GenerationRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    context: str | None = None
    settings: GenerationSettings = Field(default_factory=GenerationSettings)


class GenerationUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class GenerationMetadata(BaseModel):
    generation_time_ms: int
    model: str


class GenerationResponse(BaseModel):
    text: str
    usage: GenerationUsage
    metadata: GenerationMetadata


class EmailTemplateRequest(BaseModel):
    subject: str = Field(..., min_length=1)
    tone: Literal["formal", "casual", "friendly"] = "formal"
    points: list[str] = Field(..., min_length=1)


class AnalyzeRequest(BaseModel):
    data: str = Field(..., min_length=1)


class TextResponse(BaseModel):
    text: str
