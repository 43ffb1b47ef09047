"""Root conftest — shared test configuration and a controllable fake engine.

Invariants:
    - Environment fixed before any agent_gateway import (get_settings is cached)
    - FakeEngine records every call and raises configured errors verbatim
"""

import os
from datetime import datetime, timedelta, timezone

# Ensure tests don't accidentally use real secrets or a real engine
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("MULTI_AGENT_ENDPOINT", "http://engine.test")

import jwt
import pytest

from agent_gateway.config import get_settings


class FakeEngine:
    """Stand-in for the multi-agent engine. Configure attributes per test."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.direct_result: object = {"status": "ok"}
        self.direct_error: Exception | None = None
        self.reply = "Here is your answer."
        self.nl_error: Exception | None = None
        self.agents: list[dict] = []
        self.agents_error: Exception | None = None
        self.closed = False

    async def execute_direct_action(self, agent_key, action, params):
        self.calls.append(("execute_direct_action", agent_key, action, params))
        if self.direct_error:
            raise self.direct_error
        return self.direct_result

    async def process_user_request(self, message, user_id, context):
        self.calls.append(("process_user_request", message, user_id, context))
        if self.nl_error:
            raise self.nl_error
        return self.reply

    async def get_available_agents(self):
        self.calls.append(("get_available_agents",))
        if self.agents_error:
            raise self.agents_error
        return self.agents

    async def aclose(self):
        self.closed = True


@pytest.fixture
def engine():
    return FakeEngine()


def make_session_token(user_id: str | None = "user-123", **claims) -> str:
    payload = {"exp": datetime.now(timezone.utc) + timedelta(hours=1), **claims}
    if user_id is not None:
        payload["sub"] = user_id
    return jwt.encode(payload, get_settings().session_secret, algorithm="HS256")


@pytest.fixture
def token_factory():
    return make_session_token


@pytest.fixture
def session_token():
    return make_session_token()


@pytest.fixture
def auth_headers(session_token):
    return {"Authorization": f"Bearer {session_token}"}
