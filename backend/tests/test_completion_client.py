"""Tests for the chat completions client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from dlsolutions.core.errors import UpstreamError
from dlsolutions.services.completion_client import CompletionClient


def _mock_http_client(response=None, side_effect=None):
    mock_http_client = MagicMock()
    mock_http_client.is_closed = False
    mock_http_client.post = AsyncMock(return_value=response, side_effect=side_effect)
    return mock_http_client


class TestUpstreamError:
    def test_error_with_status_code(self):
        error = UpstreamError("API error", 429)
        assert str(error) == "API error"
        assert error.upstream_status == 429
        assert error.status_code == 502

    def test_error_without_status_code(self):
        assert UpstreamError("boom").upstream_status is None


class TestCompletionClient:
    @pytest.fixture
    def client(self):
        return CompletionClient(api_key="test-key", base_url="https://llm.test/v1")

    def test_init_with_api_key(self):
        client = CompletionClient(api_key="my-key")
        assert client.api_key == "my-key"
        assert client._client is None

    def test_init_without_api_key_uses_settings(self):
        with patch("dlsolutions.services.completion_client.settings") as mock_settings:
            mock_settings.OPENAI_API_KEY = "settings-key"
            mock_settings.OPENAI_BASE_URL = "https://api.example.com/v1"
            client = CompletionClient()
        assert client.api_key == "settings-key"
        assert client.base_url == "https://api.example.com/v1"

    @pytest.mark.asyncio
    async def test_get_client_reuses_existing_client(self, client):
        http_client1 = await client._get_client()
        http_client2 = await client._get_client()

        assert http_client1 is http_client2
        assert http_client1.headers["Authorization"] == "Bearer test-key"

        await client.close()

    @pytest.mark.asyncio
    async def test_get_client_recreates_if_closed(self, client):
        http_client1 = await client._get_client()
        await client.close()

        http_client2 = await client._get_client()
        assert http_client1 is not http_client2

        await client.close()

    @pytest.mark.asyncio
    async def test_close_when_no_client(self, client):
        await client.close()
        assert client._client is None

    @pytest.mark.asyncio
    async def test_chat_success(self, client):
        mock_response = {
            "model": "gpt-4",
            "choices": [{"message": {"content": "Bonjour!"}}],
            "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
        }
        mock_http_response = MagicMock()
        mock_http_response.json.return_value = mock_response
        mock_http_response.raise_for_status = MagicMock()
        client._client = _mock_http_client(response=mock_http_response)

        result = await client.chat(
            model="gpt-4",
            messages=[{"role": "user", "content": "Salut"}],
            temperature=0.7,
        )

        assert result == mock_response
        call_args = client._client.post.call_args
        assert call_args[0][0] == "/chat/completions"
        payload = call_args[1]["json"]
        assert payload == {
            "model": "gpt-4",
            "messages": [{"role": "user", "content": "Salut"}],
            "temperature": 0.7,
        }

    @pytest.mark.asyncio
    async def test_chat_without_api_key(self):
        client = CompletionClient(api_key="")
        with pytest.raises(UpstreamError) as exc_info:
            await client.chat(model="gpt-4", messages=[])
        assert "not configured" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_chat_http_error(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 429
        mock_response.text = "Rate limited"
        error = httpx.HTTPStatusError("Error", request=MagicMock(), response=mock_response)
        client._client = _mock_http_client(side_effect=error)

        with pytest.raises(UpstreamError) as exc_info:
            await client.chat(model="gpt-4", messages=[])

        assert exc_info.value.upstream_status == 429
        assert "Rate limited" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_chat_request_error(self, client):
        client._client = _mock_http_client(
            side_effect=httpx.RequestError("Connection failed", request=MagicMock())
        )

        with pytest.raises(UpstreamError) as exc_info:
            await client.chat(model="gpt-4", messages=[])

        assert "Request failed" in str(exc_info.value)
        assert exc_info.value.upstream_status is None


class TestExtractors:
    def test_extract_content(self):
        response = {"choices": [{"message": {"content": "Hello"}}]}
        assert CompletionClient.extract_content(response) == "Hello"

    def test_extract_content_no_choices(self):
        assert CompletionClient.extract_content({"choices": []}) == ""
        assert CompletionClient.extract_content({}) == ""

    def test_extract_content_null(self):
        assert CompletionClient.extract_content({"choices": [{"message": {"content": None}}]}) == ""

    def test_extract_usage(self):
        usage = CompletionClient.extract_usage(
            {"usage": {"prompt_tokens": 3, "completion_tokens": 4, "total_tokens": 7}}
        )
        assert usage == {"prompt_tokens": 3, "completion_tokens": 4, "total_tokens": 7}

    def test_extract_usage_missing(self):
        assert CompletionClient.extract_usage({}) == {
            "prompt_tokens": 0,
            "completion_tokens": 0,
            "total_tokens": 0,
        }
