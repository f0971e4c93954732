"""End-to-end tests for the live profile event stream.

httpx's ASGI transport buffers the whole body, which never ends for a
server-sent-events stream, so the app is driven directly here.
"""

import asyncio
import json

import pytest

from autoblog.adapter.naver import MockNaverClient
from autoblog.domain.event import ProfileChangeFeed
from autoblog.domain.service import CreditLedger
from autoblog.domain.value import UserId
from autoblog.interface.api.session import AUTH_COOKIE
from tests.harness import create_api_env_fixture

# E2E test fixture
api_env = create_api_env_fixture()

USER = UserId("naver:mocknaver123")
TIMEOUT = 5.0


class EventStream:
    """One open GET request against the ASGI app."""

    def __init__(self, app, path: str, cookie: str | None) -> None:
        headers = [(b"host", b"testserver")]
        if cookie:
            headers.append((b"cookie", f"{AUTH_COOKIE}={cookie}".encode()))
        self.scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": "GET",
            "scheme": "http",
            "path": path,
            "raw_path": path.encode(),
            "root_path": "",
            "query_string": b"",
            "headers": headers,
            "client": ("127.0.0.1", 50000),
            "server": ("testserver", 80),
        }
        self.app = app
        self.messages: asyncio.Queue[dict] = asyncio.Queue()
        self.disconnected = asyncio.Event()
        self._request_sent = False
        self.task: asyncio.Task | None = None

    async def _receive(self) -> dict:
        if not self._request_sent:
            self._request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        await self.disconnected.wait()
        return {"type": "http.disconnect"}

    async def _send(self, message: dict) -> None:
        await self.messages.put(message)

    async def open(self) -> dict:
        """Start the request and return the response start message."""
        self.task = asyncio.create_task(self.app(self.scope, self._receive, self._send))
        return await asyncio.wait_for(self.messages.get(), TIMEOUT)

    async def next_event(self) -> dict[str, str]:
        """Read body chunks until one carries an event."""
        while True:
            message = await asyncio.wait_for(self.messages.get(), TIMEOUT)
            chunk = message.get("body", b"").decode()
            if chunk.startswith("id:"):
                return parse_event(chunk)

    async def close(self) -> None:
        self.disconnected.set()
        if self.task is not None:
            await asyncio.wait_for(self.task, TIMEOUT)


def parse_event(chunk: str) -> dict[str, str]:
    fields = {}
    for line in chunk.strip().splitlines():
        name, _, value = line.partition(": ")
        fields[name] = value
    return fields


async def sign_in(client) -> str:
    response = await client.post(
        "/auth/naver/signup", json={"access_token": MockNaverClient.DEFAULT_TOKEN}
    )
    response = await client.post(
        "/auth/exchange", json={"credential": response.json()["credential"]}
    )
    return response.cookies[AUTH_COOKIE]


class TestProfileEvents:
    @pytest.mark.asyncio
    async def test_stream_sends_current_state_then_changes(self, api_env):
        token = await sign_in(api_env.client)
        current = (await api_env.client.get("/profiles/me")).json()

        stream = EventStream(api_env.app, "/profiles/me/events", token)
        start = await stream.open()
        assert start["status"] == 200
        assert (b"content-type", b"text/event-stream; charset=utf-8") in start["headers"]

        first = await stream.next_event()
        assert first["event"] == "profile"
        assert int(first["id"]) == current["revision"]
        assert json.loads(first["data"])["credit_balance"] == current["credit_balance"]

        async with api_env.container() as request_container:
            ledger = await request_container.get(CreditLedger)
            await ledger.grant(USER, 3)

        second = await stream.next_event()
        assert int(second["id"]) > int(first["id"])
        assert json.loads(second["data"])["credit_balance"] == current["credit_balance"] + 3

        await stream.close()

        feed = await api_env.container.get(ProfileChangeFeed)
        assert feed.subscriber_count(USER) == 0

    @pytest.mark.asyncio
    async def test_stream_requires_session(self, api_env):
        response = await api_env.client.get("/profiles/me/events")

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"
