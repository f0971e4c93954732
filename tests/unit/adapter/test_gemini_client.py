"""Unit tests for the Gemini client."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from google.genai import errors

from autoblog.adapter.gemini import RealGeminiClient
from autoblog.domain.error import GenerationError, GenerationErrorKind
from autoblog.domain.model import PhotoPayload
from autoblog.domain.service.generation_service import (
    BLOG_RESPONSE_SCHEMA,
    GenerationRequest,
)
from tests.conftest import PHOTO_DATA


def make_client(**kwargs) -> RealGeminiClient:
    client = RealGeminiClient(api_key="test-key", model="gemini-2.5-flash-lite", **kwargs)
    client.client = MagicMock()
    return client


def make_request(photos: int = 0) -> GenerationRequest:
    return GenerationRequest(
        instructions="블로그를 작성하세요",
        response_schema=BLOG_RESPONSE_SCHEMA,
        images=[PhotoPayload(data=PHOTO_DATA) for _ in range(photos)],
    )


class TestBuildConfig:
    def test_structured_output(self):
        config = make_client(temperature=0.5)._build_config(make_request())

        assert config.response_mime_type == "application/json"
        assert config.response_schema is not None
        assert config.temperature == 0.5
        assert not config.tools

    def test_search_grounding_drops_schema(self):
        config = make_client(use_search_grounding=True)._build_config(make_request())

        assert config.response_schema is None
        assert len(config.tools) == 1


class TestGenerate:
    @pytest.mark.asyncio
    async def test_returns_response_text(self):
        client = make_client()
        client.client.aio.models.generate_content = AsyncMock(
            return_value=MagicMock(text='{"title": "제목"}')
        )

        text = await client.generate(make_request(photos=2))

        assert text == '{"title": "제목"}'
        call = client.client.aio.models.generate_content.call_args
        assert call.kwargs["model"] == "gemini-2.5-flash-lite"
        # Instruction followed by one part per photo
        assert len(call.kwargs["contents"]) == 3

    @pytest.mark.asyncio
    async def test_api_error_is_provider_kind(self):
        client = make_client()
        client.client.aio.models.generate_content = AsyncMock(
            side_effect=errors.ClientError(
                429,
                {
                    "error": {
                        "code": 429,
                        "message": "quota exceeded",
                        "status": "RESOURCE_EXHAUSTED",
                    }
                },
            )
        )

        with pytest.raises(GenerationError) as exc_info:
            await client.generate(make_request())

        assert exc_info.value.kind == GenerationErrorKind.PROVIDER

    @pytest.mark.asyncio
    async def test_transport_error_is_network_kind(self):
        client = make_client()
        client.client.aio.models.generate_content = AsyncMock(
            side_effect=httpx.ConnectError("connection reset")
        )

        with pytest.raises(GenerationError) as exc_info:
            await client.generate(make_request())

        assert exc_info.value.kind == GenerationErrorKind.NETWORK
