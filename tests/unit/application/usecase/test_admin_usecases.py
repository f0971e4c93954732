"""Unit tests for the admin use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from autoblog.application.usecase.admin import (
    GrantCreditsRequest,
    GrantCreditsUseCase,
    ListProfilesRequest,
    ListProfilesUseCase,
    SetUnlimitedRequest,
    SetUnlimitedUseCase,
)
from autoblog.domain.error import NotAuthorizedError, NotFoundError
from autoblog.domain.model import UserProfile
from autoblog.domain.repository import ProfileRepository
from autoblog.domain.value import UserId
from tests.conftest import ADMIN_EMAIL, make_session, seed_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = make_session("naver:admin", ADMIN_EMAIL, is_admin=True)


class TestAdminAccess:
    """Every admin use case refuses regular sessions."""

    @pytest.mark.asyncio
    async def test_regular_user_cannot_grant(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GrantCreditsUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=1)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GrantCreditsRequest(session=make_session(), user_id="naver:user1", amount=5)
            )

        assert (await profile_repo.find_by_id("naver:user1")).credit_balance == 1

    @pytest.mark.asyncio
    async def test_regular_user_cannot_list_profiles(self, unit_env):
        use_case = await unit_env.get(ListProfilesUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ListProfilesRequest(session=make_session()))


class TestAdminOperations:
    """Admin top-ups and unlimited mode."""

    @pytest.mark.asyncio
    async def test_grant_credits(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(GrantCreditsUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=1)

        response = await use_case.execute(
            GrantCreditsRequest(session=ADMIN, user_id="naver:user1", amount=10)
        )

        assert response.credit_balance == 11

    @pytest.mark.asyncio
    async def test_grant_to_unknown_profile(self, unit_env):
        use_case = await unit_env.get(GrantCreditsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GrantCreditsRequest(session=ADMIN, user_id="naver:ghost", amount=1)
            )

    @pytest.mark.asyncio
    async def test_set_unlimited_preserves_balance(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(SetUnlimitedUseCase)
        await seed_profile(profile_repo, "naver:user1", credits=3)

        response = await use_case.execute(
            SetUnlimitedRequest(session=ADMIN, user_id="naver:user1", unlimited=True)
        )

        assert response.unlimited is True
        profile = await profile_repo.find_by_id("naver:user1")
        assert profile.unlimited is True
        assert profile.credit_balance == 3

    @pytest.mark.asyncio
    async def test_list_profiles_newest_first(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        use_case = await unit_env.get(ListProfilesUseCase)
        now = datetime.now(timezone.utc)
        for user_id, age in (("naver:first", 2), ("naver:second", 1)):
            await profile_repo.create(
                UserProfile(
                    id=UserId(user_id),
                    email=f"{age}@naver.com",
                    created_at=now - timedelta(minutes=age),
                )
            )

        response = await use_case.execute(ListProfilesRequest(session=ADMIN))

        assert [p.user_id for p in response.profiles] == ["naver:second", "naver:first"]
