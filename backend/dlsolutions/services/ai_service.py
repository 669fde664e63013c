"""AI assistant: prompt building, completion calls and response caching."""

import json
import logging
import time
from functools import lru_cache

from dlsolutions.core.cache import ResponseCache
from dlsolutions.core.config import settings
from dlsolutions.schemas.ai import (
    GenerationMetadata,
    GenerationRequest,
    GenerationResponse,
    GenerationSettings,
    GenerationUsage,
)
from dlsolutions.services.completion_client import CompletionClient

logger = logging.getLogger(__name__)

FALLBACK_TEXT = "Désolé, je n'ai pas pu générer une réponse."

TONES = {
    "professional": "Répondez de manière professionnelle et formelle",
    "friendly": "Répondez de manière amicale et décontractée",
    "formal": "Répondez de manière très formelle et académique",
    "casual": "Répondez de manière décontractée et conversationnelle",
}

FORMATS = {
    "structured": "Structurez votre réponse avec des points clairs et des sous-sections",
    "conversational": "Répondez de manière conversationnelle et engageante",
    "step-by-step": "Présentez votre réponse étape par étape",
    "technical": "Utilisez un langage technique précis avec des termes spécialisés",
}

EXPERTISE = {
    "beginner": "Utilisez un langage simple et expliquez les concepts de base",
    "intermediate": "Utilisez un langage technique modéré avec quelques explications",
    "technical": "Utilisez un langage technique avancé",
    "expert": "Utilisez un langage technique très avancé sans explications de base",
}

LANGUAGES = {"fr": "français", "en": "anglais", "es": "espagnol"}


def build_system_prompt(options: GenerationSettings) -> str:
    return (
        f"Vous êtes un assistant IA expert. {TONES[options.tone]}. "
        f"{FORMATS[options.format]}. {EXPERTISE[options.expertise]}. "
        f"Répondez en {LANGUAGES[options.language]}."
    )


def build_user_prompt(request: GenerationRequest) -> str:
    if request.context:
        return f"{request.prompt}\n\nContexte supplémentaire: {request.context}"
    return request.prompt


def cache_key(request: GenerationRequest) -> str:
    return json.dumps(request.model_dump(mode="json"), sort_keys=True, ensure_ascii=False)


class AIService:
    def __init__(
        self,
        client: CompletionClient,
        cache: ResponseCache[GenerationResponse] | None = None,
        model: str | None = None,
        chat_model: str | None = None,
    ):
        self.client = client
        self.cache = cache if cache is not None else ResponseCache(settings.AI_CACHE_SIZE)
        self.model = model or settings.AI_MODEL
        self.chat_model = chat_model or settings.AI_CHAT_MODEL

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        started = time.monotonic()
        response = await self.client.chat(
            model=self.model,
            messages=[
                {"role": "system", "content": build_system_prompt(request.settings)},
                {"role": "user", "content": build_user_prompt(request)},
            ],
            temperature=0.7,
            max_tokens=request.settings.response_length * 4,
            presence_penalty=0.6,
            frequency_penalty=0.3,
        )
        elapsed_ms = int((time.monotonic() - started) * 1000)

        return GenerationResponse(
            text=self.client.extract_content(response) or FALLBACK_TEXT,
            usage=GenerationUsage(**self.client.extract_usage(response)),
            metadata=GenerationMetadata(
                generation_time_ms=elapsed_ms,
                model=str(response.get("model") or self.model),
            ),
        )

    async def generate_with_cache(self, request: GenerationRequest) -> GenerationResponse:
        """Serve identical requests from the cache; otherwise generate and store."""
        key = cache_key(request)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("AI response cache hit")
            return cached

        result = await self.generate(request)
        self.cache.set(key, result)
        return result

    async def _complete(self, system: str, prompt: str) -> str:
        response = await self.client.chat(
            model=self.chat_model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=0.7,
            max_tokens=1000,
        )
        return self.client.extract_content(response)

    async def email_template(self, subject: str, tone: str, points: list[str]) -> str:
        bullet_list = "\n".join(f"- {point}" for point in points)
        prompt = (
            "Write a professional email with the following details:\n"
            f"Subject: {subject}\n"
            f"Tone: {tone}\n"
            "Key points to include:\n"
            f"{bullet_list}\n\n"
            "Please format the email appropriately and make it sound natural."
        )
        return await self._complete("You are a professional email writing assistant.", prompt)

    async def analyze(self, data: str) -> str:
        prompt = (
            "Please analyze the following data and provide insights:\n"
            f"{data}\n\n"
            "Please provide:\n"
            "1. Key findings\n"
            "2. Trends\n"
            "3. Recommendations"
        )
        return await self._complete("You are a data analysis expert.", prompt)


@lru_cache(maxsize=1)
def get_ai_service() -> AIService:
    """Process-wide AI service so the response cache is shared across requests."""
    return AIService(CompletionClient())
