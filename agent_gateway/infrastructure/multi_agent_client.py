"""Multi-Agent Service Client — httpx binding of the engine contract.

Invariants:
    - Every failure raised as MultiAgentServiceError (core/errors.py)
    - Non-2xx responses keep the engine's own error text verbatim, so the
      dispatcher's "not found"/"not available" classification sees it unchanged
    - No retries: a failed call is surfaced once
    - Construction reads settings; build_multi_agent_service is only called on demand

Design Decisions:
    - Thin wrapper over httpx.AsyncClient: isolates wire format from the dispatcher
    - transport parameter exists for httpx.MockTransport in tests
"""

import logging
from typing import Any

import httpx

from agent_gateway.config import Settings, get_settings
from agent_gateway.core.errors import MultiAgentServiceError

logger = logging.getLogger(__name__)

EXECUTE_PATH = "/actions/execute"
REQUESTS_PATH = "/requests"
AGENTS_PATH = "/agents"


class MultiAgentService:
    """Async client for the multi-agent execution engine."""

    def __init__(
        self,
        endpoint: str,
        api_key: str = "",
        timeout_seconds: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"api-key": api_key} if api_key else {}
        self.client = httpx.AsyncClient(
            base_url=endpoint,
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "MultiAgentService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def execute_direct_action(
        self, agent_key: str, action: str, params: dict[str, Any],
    ) -> Any:
        """Run one named action on one named agent."""
        body = await self._request(
            "POST", EXECUTE_PATH,
            json={"agentKey": agent_key, "action": action, "params": params},
        )
        if not isinstance(body, dict) or "result" not in body:
            raise MultiAgentServiceError(
                "Malformed direct action response", "malformed_response",
            )
        return body["result"]

    async def process_user_request(
        self, message: str, user_id: str, context: Any,
    ) -> str:
        """Hand a free-text instruction to the engine; returns its reply text."""
        body = await self._request(
            "POST", REQUESTS_PATH,
            json={"message": message, "userId": user_id, "context": context},
        )
        reply = body.get("message") if isinstance(body, dict) else None
        if not isinstance(reply, str):
            raise MultiAgentServiceError(
                "Malformed natural language response", "malformed_response",
            )
        return reply

    async def get_available_agents(self) -> list[dict[str, Any]]:
        body = await self._request("GET", AGENTS_PATH)
        agents = body.get("agents") if isinstance(body, dict) else None
        if not isinstance(agents, list):
            raise MultiAgentServiceError(
                "Malformed agent catalog response", "malformed_response",
            )
        return agents

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            raise MultiAgentServiceError(
                "Multi-agent service timed out", "timeout",
            )
        except httpx.HTTPError as e:
            raise MultiAgentServiceError(
                f"Multi-agent service request failed: {e}", "connection_error",
            )

        if response.is_error:
            message = _extract_error_message(response)
            logger.warning(
                f"Multi-agent service error on {method} {path}: {message}",
                extra={
                    "status_code": response.status_code,
                    "api_error_type": "engine_error",
                },
            )
            raise MultiAgentServiceError(
                message, "engine_error", status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            raise MultiAgentServiceError(
                f"Malformed response from multi-agent service on {path}",
                "malformed_response",
                status_code=response.status_code,
            )


def _extract_error_message(response: httpx.Response) -> str:
    """Engine error text: JSON error/message field or JSON string, else raw body, else status."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    if isinstance(body, str) and body:
        return body
    text = response.text.strip()
    if text and body is None:
        return text
    return f"Multi-agent service returned HTTP {response.status_code}"


def build_multi_agent_service(settings: Settings | None = None) -> MultiAgentService:
    """Build an engine client from settings. Raises if no endpoint is configured."""
    settings = settings or get_settings()
    if not settings.multi_agent_endpoint:
        raise MultiAgentServiceError(
            "Multi-agent service endpoint is not configured", "configuration",
        )
    return MultiAgentService(
        settings.multi_agent_endpoint,
        api_key=settings.multi_agent_api_key,
        timeout_seconds=settings.multi_agent_timeout_seconds,
    )
