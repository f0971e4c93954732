"""Blog generation domain service.

Builds the Korean instruction for the model, sends it together with the
structured-output schema and the photos, and validates whatever comes back
into a ``GeneratedBlog``.
"""

import json
from typing import Any

import logfire
import pydantic
from pydantic import Field

from autoblog.domain.error import GenerationError, GenerationErrorKind
from autoblog.domain.model import (
    ContentBrief,
    GeneratedBlog,
    PhotoPayload,
    RestaurantBrief,
)
from autoblog.domain.value import SectionType
from autoblog.domain.value.common import ValueObject

from .base import Service

# Structured-output contract sent to the model
BLOG_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "sections": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "type": {
                        "type": "STRING",
                        "enum": [t.value for t in SectionType],
                    },
                    "content": {"type": "STRING"},
                    "imageIndex": {"type": "INTEGER"},
                },
                "required": ["type", "content"],
            },
        },
        "tags": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["title", "sections", "tags"],
}

_blog_adapter = pydantic.TypeAdapter(GeneratedBlog)


class GenerationRequest(ValueObject):
    """Everything the model needs for one call."""

    instructions: str
    response_schema: dict[str, Any]
    images: list[PhotoPayload] = Field(default_factory=list)


class GenerationApiClient:
    """Generic client interface for generative model APIs."""

    async def generate(self, request: GenerationRequest) -> str:
        """Run one generation call.

        Args:
            request: Instructions, output schema and images

        Returns:
            Raw JSON text produced by the model

        Raises:
            GenerationError: ``network`` or ``provider`` kind on failure
        """
        raise NotImplementedError


def build_instructions(brief: ContentBrief, photo_count: int) -> str:
    """Build the Korean instruction for a brief.

    Args:
        brief: Restaurant or general brief
        photo_count: Number of photos sent along with the instruction

    Returns:
        Prompt text
    """
    if isinstance(brief, RestaurantBrief):
        persona = "대한민국 최고의 맛집 전문 블로거"
        context = (
            f"식당 정보(이름: {brief.name}, 위치: {brief.location}, "
            f"메뉴: {brief.menu or '미정'})"
        )
    else:
        persona = f"대한민국 최고의 파워 블로거 (분야: {brief.category or '일상/리뷰'})"
        context = f"주제 정보(제목/주제: {brief.subject}, 카테고리: {brief.category})"

    lines = [
        f"당신은 {persona}입니다.",
        f"제공된 사진 {photo_count}장과 {context}, 분위기: {brief.mood or '자유'}, "
        f"참고사항: {brief.notes or '없음'}, 평점: {brief.rating}/5 를 바탕으로 "
        "네이버 블로그 스타일의 정성스러운 포스팅을 작성하세요.",
        "",
        "[작성 가이드라인]",
        "1. 말투: 친근하면서도 전문성이 느껴지는 해요체와 적절한 이모지 사용.",
        "2. 구성: 매력적인 제목(title), 소제목(subtitle), 생생한 경험담(text), "
        "사진에 대한 상세 설명(image), 총평(summary).",
    ]
    if photo_count:
        lines.append(
            "3. 사진 설명: 각 사진(image) 섹션의 imageIndex는 제공된 사진 순서"
            f"(0부터 {photo_count - 1}까지)와 일치해야 합니다. "
            "image가 아닌 섹션에는 imageIndex를 넣지 마세요."
        )
    else:
        lines.append("3. 사진이 없으므로 image 섹션을 만들지 마세요.")
    lines += [
        "4. 금지 사항: 마크다운 기호(#, *, - 등) 사용 금지. 순수 텍스트로만 작성.",
        "5. 태그: 관련 해시태그 5~10개 생성.",
    ]

    if brief.style_sample and brief.style_sample.strip():
        lines += [
            "",
            "[문체 참고]",
            "아래 글의 말투와 문체를 최대한 따라 하세요. 내용은 참고하지 마세요.",
            brief.style_sample.strip(),
        ]

    lines += [
        "",
        "반드시 JSON 형식으로만 응답하며, 모든 섹션의 type은 "
        "'text', 'image', 'subtitle', 'summary' 중 하나여야 합니다.",
    ]
    return "\n".join(lines)


def parse_generated_blog(raw: str | bytes | dict[str, Any], photo_count: int) -> GeneratedBlog:
    """Validate a raw model response.

    Args:
        raw: JSON text or already decoded object
        photo_count: Number of photos supplied with the request

    Returns:
        Validated blog

    Raises:
        GenerationError: ``schema_violation`` if the payload is not a valid blog
    """
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except json.JSONDecodeError as e:
        raise GenerationError(
            GenerationErrorKind.SCHEMA_VIOLATION, f"Response is not JSON: {e}"
        ) from e

    try:
        blog = _blog_adapter.validate_python(data)
    except pydantic.ValidationError as e:
        raise GenerationError(
            GenerationErrorKind.SCHEMA_VIOLATION,
            f"Response does not match the blog schema: {e.error_count()} errors",
        ) from e

    out_of_range = blog.out_of_range_images(photo_count)
    if out_of_range:
        raise GenerationError(
            GenerationErrorKind.SCHEMA_VIOLATION,
            f"Image indexes {out_of_range} do not match {photo_count} photos",
        )

    return blog


class GenerationService(Service):
    """Domain service producing blogs from briefs."""

    def __init__(self, client: GenerationApiClient) -> None:
        self.client = client

    async def generate(
        self, brief: ContentBrief, photos: list[PhotoPayload]
    ) -> GeneratedBlog:
        """Generate and validate a blog.

        The model is called exactly once.

        Args:
            brief: Content brief
            photos: Photos in display order

        Returns:
            Validated blog

        Raises:
            GenerationError: With the kind of failure
        """
        with logfire.span(
            "generation_service.generate", blog_type=brief.type, photos=len(photos)
        ):
            request = GenerationRequest(
                instructions=build_instructions(brief, len(photos)),
                response_schema=BLOG_RESPONSE_SCHEMA,
                images=photos,
            )

            raw = await self.client.generate(request)

            try:
                blog = parse_generated_blog(raw, len(photos))
            except GenerationError as e:
                logfire.warn("Model response rejected", error=str(e))
                raise

            logfire.info(
                "Blog generated",
                blog_type=brief.type,
                sections=len(blog.sections),
                tags=len(blog.tags),
            )
            return blog
