"""Agent Listing — builds a fresh engine client and summarizes its catalog.

Invariants:
    - Never touches the shared ServiceHandle: one client per call, closed afterwards
    - No caching; counts come only from the returned catalog
    - Any failure (build, engine call, malformed catalog) becomes AgentListingError
"""

import logging
from collections.abc import Callable

from agent_gateway.core.engine_protocols import MultiAgentEngine
from agent_gateway.core.errors import AgentListingError
from agent_gateway.core.summarize_agents import summarize_agents
from agent_gateway.infrastructure.multi_agent_client import build_multi_agent_service
from agent_gateway.schemas.agents import AgentSummary

logger = logging.getLogger(__name__)


async def list_agents(factory: Callable[[], MultiAgentEngine]) -> AgentSummary:
    """Fetch the agent catalog with a dedicated client."""
    try:
        engine = factory()
        try:
            agents = await engine.get_available_agents()
        finally:
            await engine.aclose()
        return AgentSummary(**summarize_agents(agents))
    except Exception as e:
        logger.error(f"Get agents error: {e}", exc_info=True)
        raise AgentListingError() from e


def get_listing_factory() -> Callable[[], MultiAgentEngine]:
    """FastAPI dependency: how the listing path builds its client."""
    return build_multi_agent_service
