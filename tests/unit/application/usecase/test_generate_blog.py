"""Unit tests for GenerateBlogUseCase (debit, generate, refund on failure)."""

import asyncio

import pytest

from autoblog.adapter.gemini import GeminiClient
from autoblog.application.usecase.generation import (
    GenerateBlogRequest,
    GenerateBlogUseCase,
)
from autoblog.domain.error import (
    GenerationError,
    GenerationErrorKind,
    GenerationFailedError,
    GenerationInProgressError,
    InsufficientCreditError,
    ValidationError,
)
from autoblog.domain.model import GeneralBrief, PhotoPayload, RestaurantBrief
from autoblog.domain.repository import ProfileRepository
from autoblog.domain.service import CreditLedger
from tests.conftest import PHOTO_DATA, make_session, seed_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

USER = "naver:user1"


def make_request(
    photos: int = 1, wizard_session_id: str | None = None, **brief
) -> GenerateBlogRequest:
    data = {"name": "을지로 골뱅이", "location": "서울 중구"}
    data.update(brief)
    return GenerateBlogRequest(
        session=make_session(USER),
        brief=RestaurantBrief(**data),
        photos=[PhotoPayload(data=PHOTO_DATA) for _ in range(photos)],
        wizard_session_id=wizard_session_id,
    )


async def balance_of(unit_env) -> int:
    ledger = await unit_env.get(CreditLedger)
    return await ledger.get_balance(USER)


class TestGenerateBlogSuccess:
    """Successful attempts."""

    @pytest.mark.asyncio
    async def test_success_costs_exactly_one_credit(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=3)

        response = await use_case.execute(make_request(photos=2))

        assert response.credit_balance == 2
        assert response.unlimited is False
        assert response.blog.title
        assert await balance_of(unit_env) == 2

    @pytest.mark.asyncio
    async def test_general_brief(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=1)

        await use_case.execute(
            GenerateBlogRequest(
                session=make_session(USER),
                brief=GeneralBrief(subject="봄 캠핑", category="캠핑"),
            )
        )

        assert "봄 캠핑" in gemini.requests[0].instructions
        assert await balance_of(unit_env) == 0


class TestGenerateBlogFailures:
    """Failed attempts and their refunds."""

    @pytest.mark.asyncio
    async def test_network_failure_refunds(self, unit_env):
        """Scenario A: balance 1, network error, balance back to 1."""
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=1)
        gemini.fail_with(GenerationErrorKind.NETWORK, "connection reset")

        with pytest.raises(GenerationFailedError) as exc_info:
            await use_case.execute(make_request())

        assert exc_info.value.kind == GenerationErrorKind.NETWORK
        assert exc_info.value.refunded is True
        assert await balance_of(unit_env) == 1

    @pytest.mark.asyncio
    async def test_insufficient_credit_skips_model_call(self, unit_env):
        """Scenario B: balance 0, no external call, InsufficientCredit."""
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=0)

        with pytest.raises(InsufficientCreditError):
            await use_case.execute(make_request())

        assert gemini.requests == []
        assert await balance_of(unit_env) == 0

    @pytest.mark.asyncio
    async def test_schema_violation_refunds(self, unit_env):
        """Scenario C: response without tags is rejected, balance back to 5."""
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=5)
        gemini.respond_with(
            {"title": "제목", "sections": [{"type": "text", "content": "본문"}]}
        )

        with pytest.raises(GenerationFailedError) as exc_info:
            await use_case.execute(make_request())

        assert exc_info.value.kind == GenerationErrorKind.SCHEMA_VIOLATION
        assert exc_info.value.refunded is True
        assert await balance_of(unit_env) == 5

    @pytest.mark.asyncio
    async def test_unexpected_client_error_is_reported_as_refunded_failure(
        self, unit_env
    ):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=2)

        async def explode(request):
            raise ValueError("sdk could not parse response")

        use_case.generation_service.client.generate = explode

        with pytest.raises(GenerationFailedError) as exc_info:
            await use_case.execute(make_request())

        assert exc_info.value.kind == GenerationErrorKind.PROVIDER
        assert exc_info.value.refunded is True
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert await balance_of(unit_env) == 2

    @pytest.mark.asyncio
    async def test_failed_refund_is_reported(self, unit_env):
        """The failure still surfaces when the refund cannot be written."""
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=1)
        gemini.fail_with(GenerationErrorKind.PROVIDER, "quota exceeded")

        async def broken_release(receipt):
            raise ConnectionError("database went away")

        use_case.credit_ledger.release = broken_release

        with pytest.raises(GenerationFailedError) as exc_info:
            await use_case.execute(make_request())

        assert exc_info.value.kind == GenerationErrorKind.PROVIDER
        assert exc_info.value.refunded is False
        assert await balance_of(unit_env) == 0


class TestGenerateBlogUnlimited:
    """Scenario D: unlimited profiles never change balance."""

    @pytest.mark.asyncio
    async def test_success_keeps_zero_balance(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=0, unlimited=True)

        response = await use_case.execute(make_request())

        assert response.credit_balance == 0
        assert response.unlimited is True

    @pytest.mark.asyncio
    async def test_failure_keeps_zero_balance(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=0, unlimited=True)
        gemini.fail_with(GenerationErrorKind.NETWORK)

        with pytest.raises(GenerationFailedError):
            await use_case.execute(make_request())

        assert await balance_of(unit_env) == 0

    @pytest.mark.asyncio
    async def test_unlimited_turned_off_mid_call_gets_no_credit(self, unit_env):
        """Nothing was charged, so a failure must not add a credit."""
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        ledger = await unit_env.get(CreditLedger)
        await seed_profile(profile_repo, USER, credits=0, unlimited=True)

        async def revoke_then_fail(request):
            await ledger.set_unlimited(USER, False)
            raise GenerationError(GenerationErrorKind.NETWORK, "connection reset")

        use_case.generation_service.client.generate = revoke_then_fail

        with pytest.raises(GenerationFailedError) as exc_info:
            await use_case.execute(make_request())

        assert exc_info.value.refunded is True
        assert await balance_of(unit_env) == 0

    @pytest.mark.asyncio
    async def test_unlimited_turned_on_mid_call_still_gets_credit_back(
        self, unit_env
    ):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        ledger = await unit_env.get(CreditLedger)
        await seed_profile(profile_repo, USER, credits=1)

        async def grant_then_fail(request):
            await ledger.set_unlimited(USER, True)
            raise GenerationError(GenerationErrorKind.NETWORK, "connection reset")

        use_case.generation_service.client.generate = grant_then_fail

        with pytest.raises(GenerationFailedError):
            await use_case.execute(make_request())

        assert await balance_of(unit_env) == 1


class TestGenerateBlogValidation:
    """Requests rejected before any credit is taken."""

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=1)

        with pytest.raises(ValidationError, match="location"):
            await use_case.execute(make_request(location="  "))

        assert await balance_of(unit_env) == 1

    @pytest.mark.asyncio
    async def test_invalid_photo(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=1)
        request = make_request(photos=0)
        request.photos.append(PhotoPayload(data="%%%not-base64%%%"))

        with pytest.raises(ValidationError):
            await use_case.execute(request)

        assert await balance_of(unit_env) == 1

    @pytest.mark.asyncio
    async def test_non_image_mime_type(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=1)
        request = make_request(photos=0)
        request.photos.append(
            PhotoPayload(data=f"data:application/pdf;base64,{PHOTO_DATA}")
        )

        with pytest.raises(ValidationError, match="unsupported type"):
            await use_case.execute(request)


class TestGenerateBlogInFlight:
    """One attempt per wizard session."""

    @pytest.mark.asyncio
    async def test_second_attempt_while_running_is_rejected(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        gemini = await unit_env.get(GeminiClient)
        await seed_profile(profile_repo, USER, credits=5)
        gemini.release = asyncio.Event()

        first = asyncio.create_task(
            use_case.execute(make_request(wizard_session_id="wizard-1"))
        )
        while not gemini.requests:
            await asyncio.sleep(0)

        with pytest.raises(GenerationInProgressError):
            await use_case.execute(make_request(wizard_session_id="wizard-1"))

        gemini.release.set()
        response = await first

        # Only the first attempt was charged
        assert response.credit_balance == 4

    @pytest.mark.asyncio
    async def test_without_session_id_attempts_may_race(self, unit_env):
        """Two tabs without a wizard session both succeed if credit allows."""
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GenerateBlogUseCase)
        await seed_profile(profile_repo, USER, credits=2)

        await asyncio.gather(
            use_case.execute(make_request()), use_case.execute(make_request())
        )

        assert await balance_of(unit_env) == 0
