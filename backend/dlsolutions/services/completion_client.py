"""Async client for an OpenAI-compatible chat completions API."""

import logging
from typing import Any

import httpx

from dlsolutions.core.config import settings
from dlsolutions.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class CompletionClient:
    """Thin wrapper around ``POST /chat/completions``.

    The underlying ``httpx.AsyncClient`` is created on first use and
    reused until ``close()``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 60.0,
    ):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.base_url = base_url or settings.OPENAI_BASE_URL
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def chat(
        self,
        model: str,
        messages: list[dict[str, str]],
        **params: Any,
    ) -> dict[str, Any]:
        """Send a chat completion request and return the decoded JSON body."""
        if not self.api_key:
            raise UpstreamError("Completion API key is not configured")

        payload: dict[str, Any] = {"model": model, "messages": messages, **params}
        client = await self._get_client()
        try:
            response = await client.post("/chat/completions", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Completion API returned %s: %s", e.response.status_code, e.response.text
            )
            raise UpstreamError(
                f"Completion API error: {e.response.text}", e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.error("Completion API request failed: %s", e)
            raise UpstreamError(f"Request failed: {e}") from e
        return response.json()  # type: ignore[no-any-return]

    @staticmethod
    def extract_content(response: dict[str, Any]) -> str:
        choices = response.get("choices") or []
        if not choices:
            return ""
        return (choices[0].get("message") or {}).get("content") or ""

    @staticmethod
    def extract_usage(response: dict[str, Any]) -> dict[str, int]:
        usage = response.get("usage") or {}
        return {
            "prompt_tokens": int(usage.get("prompt_tokens") or 0),
            "completion_tokens": int(usage.get("completion_tokens") or 0),
            "total_tokens": int(usage.get("total_tokens") or 0),
        }
