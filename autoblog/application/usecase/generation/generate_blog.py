"""Generate blog use case.

A generation attempt is a short saga:

1. validate the brief and photos (no ledger interaction on failure)
2. debit the generation cost
3. call the model once
4. on any failure, give back exactly what the debit took and report whether
   that landed
"""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from autoblog.application.usecase.base import BaseUseCase
from autoblog.config import Settings
from autoblog.domain.error import (
    GenerationError,
    GenerationErrorKind,
    GenerationFailedError,
    InsufficientCreditError,
    ValidationError,
)
from autoblog.domain.model import ContentBrief, GeneratedBlog, PhotoPayload
from autoblog.domain.service import (
    CreditLedger,
    DebitReceipt,
    GenerationGuard,
    GenerationService,
    ProfileService,
)
from autoblog.domain.value import SessionContext


class GenerateBlogRequest(BaseModel):
    """Generate blog request."""

    session: SessionContext
    brief: ContentBrief
    photos: list[PhotoPayload] = Field(default_factory=list)
    wizard_session_id: Optional[str] = Field(default=None, max_length=128)


class GenerateBlogResponse(BaseModel):
    """Generate blog response."""

    blog: GeneratedBlog
    credit_balance: int
    unlimited: bool


class GenerateBlogUseCase(BaseUseCase):
    """Use case for a credit-gated blog generation."""

    def __init__(
        self,
        credit_ledger: CreditLedger,
        generation_service: GenerationService,
        generation_guard: GenerationGuard,
        profile_service: ProfileService,
        settings: Settings,
    ) -> None:
        """Initialize generate blog use case.

        Args:
            credit_ledger: Credit ledger
            generation_service: Prompt building and response validation
            generation_guard: Single-flight guard per wizard session
            profile_service: Profile service
            settings: Application settings
        """
        self.credit_ledger = credit_ledger
        self.generation_service = generation_service
        self.generation_guard = generation_guard
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: GenerateBlogRequest) -> GenerateBlogResponse:
        """Execute a generation attempt.

        Raises:
            ValidationError: If the brief or photos are incomplete or invalid
            GenerationInProgressError: If the wizard session has an attempt running
            InsufficientCreditError: If the balance does not cover the cost
            GenerationFailedError: If the model call failed; the debit has
                been refunded unless ``refunded`` is False
        """
        self._validate(request)

        user_id = request.session.user_id
        cost = self.settings.generation.cost

        with logfire.span(
            "generate_blog",
            user_id=user_id,
            blog_type=request.brief.type,
            photos=len(request.photos),
        ):
            with self.generation_guard.hold(request.wizard_session_id):
                receipt = await self.credit_ledger.reserve(user_id, cost)
                if receipt is None:
                    raise InsufficientCreditError(user_id, cost)

                try:
                    blog = await self.generation_service.generate(
                        request.brief, request.photos
                    )
                except GenerationError as e:
                    refunded = await self._refund(receipt, str(e))
                    raise GenerationFailedError(e.kind, refunded, str(e)) from e
                except Exception as e:
                    logfire.exception(
                        "Unexpected error from generation client", user_id=user_id
                    )
                    refunded = await self._refund(receipt, str(e))
                    raise GenerationFailedError(
                        GenerationErrorKind.PROVIDER, refunded, str(e)
                    ) from e

            profile = await self.profile_service.get(user_id)
            logfire.info(
                "Generation completed", user_id=user_id, balance=profile.credit_balance
            )

            return GenerateBlogResponse(
                blog=blog,
                credit_balance=profile.credit_balance,
                unlimited=profile.unlimited,
            )

    def _validate(self, request: GenerateBlogRequest) -> None:
        missing = request.brief.missing_fields()
        if missing:
            raise ValidationError(
                f"Missing required fields for {request.brief.type}: {', '.join(missing)}"
            )

        max_photos = self.settings.generation.max_photos
        if len(request.photos) > max_photos:
            raise ValidationError(
                f"At most {max_photos} photos are allowed, got {len(request.photos)}"
            )

        for index, photo in enumerate(request.photos):
            if not photo.mime_type.startswith("image/"):
                raise ValidationError(
                    f"Photo {index} has unsupported type {photo.mime_type}"
                )
            try:
                photo.decode()
            except ValueError as e:
                raise ValidationError(f"Photo {index} is not valid: {e}") from e

    async def _refund(self, receipt: DebitReceipt, cause: str) -> bool:
        """Compensate a failed attempt.

        Only what the debit took is given back; an attempt that charged
        nothing has nothing to refund.

        Returns:
            True if the balance is back where it was before the attempt
        """
        try:
            await self.credit_ledger.release(receipt)
        except Exception as e:
            logfire.error(
                "Refund failed after generation failure",
                user_id=receipt.user_id,
                cost=receipt.charged,
                cause=cause,
                error=str(e),
            )
            return False

        logfire.info(
            "Generation failed, credit refunded",
            user_id=receipt.user_id,
            charged=receipt.charged,
            cause=cause,
        )
        return True

