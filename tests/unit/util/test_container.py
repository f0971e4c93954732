"""Unit tests for the lifetime of process-wide state in the container."""

import pytest

from autoblog.application.usecase.generation import GenerateBlogUseCase
from autoblog.domain.error import GenerationInProgressError
from autoblog.domain.event import ProfileChangeFeed
from autoblog.domain.service import CredentialRegistry, GenerationGuard, JWTService
from autoblog.domain.value import AuthProvider, ExternalIdentityClaim, UserId
from autoblog.util.jwt import JWTError
from tests.di import build_test_container


class TestProcessWideState:
    """Replay and in-flight tracking must outlive a single request."""

    @pytest.mark.asyncio
    async def test_state_is_shared_across_requests(self):
        container = build_test_container()
        try:
            async with container() as first, container() as second:
                for dependency in (CredentialRegistry, GenerationGuard, ProfileChangeFeed):
                    assert await first.get(dependency) is await second.get(dependency)
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_credential_redeemed_in_one_request_is_spent_in_the_next(self):
        container = build_test_container()
        try:
            async with container() as first:
                jwt_service = await first.get(JWTService)
                credential = jwt_service.mint_exchange_credential(
                    ExternalIdentityClaim(
                        provider=AuthProvider.NAVER,
                        external_uid="user1",
                        identity_key=UserId("naver:user1"),
                        email="user1@naver.com",
                    )
                )
                jwt_service.redeem_exchange_credential(credential)

            async with container() as second:
                jwt_service = await second.get(JWTService)
                with pytest.raises(JWTError, match="already been used"):
                    jwt_service.redeem_exchange_credential(credential)
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_wizard_session_held_in_one_request_blocks_another(self):
        container = build_test_container()
        try:
            async with container() as first, container() as second:
                guard = await first.get(GenerationGuard)
                use_case = await second.get(GenerateBlogUseCase)

                with guard.hold("wizard-1"):
                    assert use_case.generation_guard.is_running("wizard-1")
                    with pytest.raises(GenerationInProgressError):
                        with use_case.generation_guard.hold("wizard-1"):
                            pass
        finally:
            await container.close()
