"""Boundary Protocols — contract between the dispatcher and the multi-agent engine.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Engine failures surface as exceptions whose text carries the engine's vocabulary

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Any, Protocol


class MultiAgentEngine(Protocol):
    """Contract for the multi-agent execution engine, implemented by shell."""
    async def execute_direct_action(
        self, agent_key: str, action: str, params: dict[str, Any],
    ) -> Any: ...
    async def process_user_request(
        self, message: str, user_id: str, context: Any,
    ) -> str: ...
    async def get_available_agents(self) -> list[dict[str, Any]]: ...
    async def aclose(self) -> None: ...
