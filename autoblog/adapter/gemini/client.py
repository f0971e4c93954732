"""Gemini client for blog generation."""

import asyncio
import json
from typing import Any, Optional, Union

import httpx
import logfire
from google import genai
from google.genai import errors, types

from autoblog.domain.error import GenerationError, GenerationErrorKind
from autoblog.domain.service.generation_service import (
    GenerationApiClient,
    GenerationRequest,
)
from autoblog.domain.value import SectionType


class GeminiClient(GenerationApiClient):
    """Base class for Gemini clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGeminiClient(GeminiClient):
    """Calls ``generate_content`` with structured JSON output."""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.8,
        use_search_grounding: bool = False,
    ) -> None:
        """Initialize Gemini client.

        Args:
            api_key: Gemini API key
            model: Model name (e.g. gemini-2.5-flash-lite)
            temperature: Sampling temperature
            use_search_grounding: Attach the Google Search tool
        """
        self.client = genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature
        self.use_search_grounding = use_search_grounding

    def _build_config(self, request: GenerationRequest) -> types.GenerateContentConfig:
        if self.use_search_grounding:
            # The search tool cannot be combined with a response schema;
            # the prompt still pins the JSON shape and the caller validates it.
            return types.GenerateContentConfig(
                temperature=self.temperature,
                tools=[types.Tool(google_search=types.GoogleSearch())],
            )
        return types.GenerateContentConfig(
            temperature=self.temperature,
            response_mime_type="application/json",
            response_schema=request.response_schema,
        )

    def _build_contents(self, request: GenerationRequest) -> list[Any]:
        parts: list[Any] = [request.instructions]
        for photo in request.images:
            try:
                data = photo.decode()
            except ValueError as e:
                raise GenerationError(GenerationErrorKind.PROVIDER, str(e)) from e
            parts.append(types.Part.from_bytes(data=data, mime_type=photo.mime_type))
        return parts

    async def generate(self, request: GenerationRequest) -> str:
        """Run one generation call.

        Raises:
            GenerationError: ``network`` for transport failures, ``provider``
                for errors reported by the API
        """
        with logfire.span(
            "gemini.generate", model=self.model, images=len(request.images)
        ):
            contents = self._build_contents(request)
            try:
                response = await self.client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=self._build_config(request),
                )
            except errors.APIError as e:
                logfire.error(
                    "Gemini API error", code=e.code, status=e.status, error=str(e)
                )
                raise GenerationError(
                    GenerationErrorKind.PROVIDER, f"Gemini API error: {e.code}"
                ) from e
            except (httpx.HTTPError, asyncio.TimeoutError, OSError) as e:
                logfire.error("Gemini request failed", error=str(e))
                raise GenerationError(
                    GenerationErrorKind.NETWORK, f"Gemini request failed: {e}"
                ) from e

            text = response.text or ""
            logfire.info("Gemini response received", characters=len(text))
            return text


def _sample_blog(image_count: int) -> dict[str, Any]:
    sections: list[dict[str, Any]] = [
        {"type": SectionType.SUBTITLE.value, "content": "첫인상"},
        {"type": SectionType.TEXT.value, "content": "오늘은 특별한 곳을 다녀왔어요 😊"},
    ]
    for index in range(image_count):
        sections.append(
            {
                "type": SectionType.IMAGE.value,
                "content": f"{index + 1}번째 사진이에요.",
                "imageIndex": index,
            }
        )
    sections.append({"type": SectionType.SUMMARY.value, "content": "다음에 또 올게요!"})
    return {
        "title": "모의 블로그 포스팅",
        "sections": sections,
        "tags": ["맛집", "일상", "리뷰", "추천", "블로그"],
    }


class MockGeminiClient(GeminiClient):
    """Mock Gemini client for testing.

    Returns a well-formed blog for the request by default. Tests can queue
    raw responses or failures, and inspect the requests that were made.
    """

    def __init__(self) -> None:
        self.requests: list[GenerationRequest] = []
        self._scripted: list[Union[str, dict[str, Any], GenerationError]] = []
        self.release: Optional[asyncio.Event] = None

    def respond_with(self, raw: Union[str, dict[str, Any]]) -> None:
        """Queue a raw response for the next call."""
        self._scripted.append(raw)

    def fail_with(self, kind: GenerationErrorKind, message: str = "mock failure") -> None:
        """Queue a failure for the next call."""
        self._scripted.append(GenerationError(kind, message))

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if self.release is not None:
            await self.release.wait()

        if not self._scripted:
            return json.dumps(_sample_blog(len(request.images)), ensure_ascii=False)

        scripted = self._scripted.pop(0)
        if isinstance(scripted, GenerationError):
            raise scripted
        if isinstance(scripted, dict):
            return json.dumps(scripted, ensure_ascii=False)
        return scripted
