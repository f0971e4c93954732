"""Unit tests for the profile use cases."""

import pytest

from autoblog.application.usecase.profile import (
    ClaimEmailRewardRequest,
    ClaimEmailRewardUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    SaveWritingStylesRequest,
    SaveWritingStylesUseCase,
)
from autoblog.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from autoblog.domain.model import WritingStyle
from autoblog.domain.repository import ProfileRepository
from tests.conftest import make_session, seed_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetProfile:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_returns_own_profile(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GetProfileUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=4)

        response = await use_case.execute(GetProfileRequest(session=make_session()))

        assert response.user_id == "naver:user1"
        assert response.credit_balance == 4
        assert response.writing_styles == []

    @pytest.mark.asyncio
    async def test_missing_profile(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileRequest(session=make_session()))


class TestSaveWritingStyles:
    """Tests for SaveWritingStylesUseCase."""

    @pytest.mark.asyncio
    async def test_replaces_styles_without_touching_balance(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(SaveWritingStylesUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=4)
        styles = [
            WritingStyle(id="s1", title="다정하게", content="오늘도 좋은 하루 보내세요~"),
            WritingStyle(id="s2", title="담백하게", content="맛있었다."),
        ]

        response = await use_case.execute(
            SaveWritingStylesRequest(session=make_session(), styles=styles)
        )
        response = await use_case.execute(
            SaveWritingStylesRequest(session=make_session(), styles=styles[1:])
        )

        assert [s.id for s in response.writing_styles] == ["s2"]
        assert response.credit_balance == 4

    @pytest.mark.asyncio
    async def test_duplicate_ids_are_rejected(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(SaveWritingStylesUseCase)
        await seed_profile(profile_repo, "naver:user1")
        style = WritingStyle(id="s1", title="a", content="b")

        with pytest.raises(ValidationError):
            await use_case.execute(
                SaveWritingStylesRequest(session=make_session(), styles=[style, style])
            )


class TestClaimEmailReward:
    """Tests for ClaimEmailRewardUseCase."""

    @pytest.mark.asyncio
    async def test_reward_is_paid_once(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(ClaimEmailRewardUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=5)
        request = ClaimEmailRewardRequest(session=make_session())

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.credit_balance == 6
        assert first.email_verified_reward_granted is True
        assert second.credit_balance == 6

    @pytest.mark.asyncio
    async def test_unverified_email_is_refused(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(ClaimEmailRewardUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=5)
        session = make_session().model_copy(update={"email_verified": False})

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(ClaimEmailRewardRequest(session=session))

        assert (await profile_repo.find_by_id("naver:user1")).credit_balance == 5
