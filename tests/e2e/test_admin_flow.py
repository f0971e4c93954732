"""End-to-end tests for support messages and the admin console."""

import pytest

from autoblog.adapter.naver import MockNaverClient, NaverClient
from tests.conftest import ADMIN_EMAIL
from tests.harness import create_api_env_fixture

# E2E test fixture
api_env = create_api_env_fixture()

USER = "naver:mocknaver123"
ADMIN_TOKEN = "admin-naver-token"


async def enter(client, token: str, signup: bool = True) -> None:
    path = "/auth/naver/signup" if signup else "/auth/naver/login"
    response = await client.post(path, json={"access_token": token})
    assert response.status_code == 200
    await client.post(
        "/auth/exchange", json={"credential": response.json()["credential"]}
    )


async def register_admin(api_env) -> None:
    naver = await api_env.container.get(NaverClient)
    naver.register(ADMIN_TOKEN, provider_user_id="admin1", email=ADMIN_EMAIL)


class TestAdminAccess:
    @pytest.mark.asyncio
    async def test_regular_user_is_forbidden(self, api_env):
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)

        response = await api_env.client.get("/admin/profiles")

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    @pytest.mark.asyncio
    async def test_admin_lists_profiles(self, api_env):
        await register_admin(api_env)
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)
        await enter(api_env.client, ADMIN_TOKEN)

        response = await api_env.client.get("/admin/profiles")

        assert response.status_code == 200
        user_ids = {p["user_id"] for p in response.json()["profiles"]}
        assert user_ids == {USER, "naver:admin1"}

    @pytest.mark.asyncio
    async def test_admin_grants_credits(self, api_env):
        await register_admin(api_env)
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)
        await enter(api_env.client, ADMIN_TOKEN)

        response = await api_env.client.post(
            f"/admin/profiles/{USER}/credits", json={"amount": 10}
        )

        assert response.status_code == 200
        assert response.json()["credit_balance"] == 15

    @pytest.mark.asyncio
    async def test_grant_rejects_non_positive_amount(self, api_env):
        await register_admin(api_env)
        await enter(api_env.client, ADMIN_TOKEN)

        response = await api_env.client.post(
            f"/admin/profiles/{USER}/credits", json={"amount": 0}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_grant_to_unknown_user(self, api_env):
        await register_admin(api_env)
        await enter(api_env.client, ADMIN_TOKEN)

        response = await api_env.client.post(
            "/admin/profiles/naver:nobody/credits", json={"amount": 1}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_admin_sets_unlimited(self, api_env):
        await register_admin(api_env)
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)
        await enter(api_env.client, ADMIN_TOKEN)

        response = await api_env.client.put(
            f"/admin/profiles/{USER}/unlimited", json={"unlimited": True}
        )

        assert response.status_code == 200
        assert response.json()["unlimited"] is True


class TestSupportMessages:
    @pytest.mark.asyncio
    async def test_message_reply_and_read(self, api_env):
        await register_admin(api_env)
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)

        sent = await api_env.client.post(
            "/messages", json={"subject": "크레딧 문의", "content": "충전은 어떻게 하나요?"}
        )
        assert sent.status_code == 201
        message_id = sent.json()["id"]
        assert sent.json()["status"] == "pending"

        await enter(api_env.client, ADMIN_TOKEN)
        inbox = await api_env.client.get("/admin/messages")
        assert inbox.status_code == 200
        assert inbox.json()["unread_count"] == 1

        reply = await api_env.client.post(
            f"/admin/messages/{message_id}/reply",
            json={"reply_content": "관리자에게 문의해 주세요."},
        )
        assert reply.status_code == 200
        assert reply.json()["status"] == "replied"

        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN, signup=False)
        mine = await api_env.client.get("/messages")
        assert mine.json()["unread_count"] == 1

        read = await api_env.client.post(f"/messages/{message_id}/read")
        assert read.status_code == 200
        assert read.json()["user_read"] is True

        mine = await api_env.client.get("/messages")
        assert mine.json()["unread_count"] == 0

    @pytest.mark.asyncio
    async def test_blank_subject_is_rejected(self, api_env):
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)

        response = await api_env.client.post(
            "/messages", json={"subject": "", "content": "내용"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation"

    @pytest.mark.asyncio
    async def test_regular_user_cannot_reply(self, api_env):
        await enter(api_env.client, MockNaverClient.DEFAULT_TOKEN)
        sent = await api_env.client.post(
            "/messages", json={"subject": "문의", "content": "내용"}
        )

        response = await api_env.client.post(
            f"/admin/messages/{sent.json()['id']}/reply",
            json={"reply_content": "셀프 답변"},
        )

        assert response.status_code == 403
