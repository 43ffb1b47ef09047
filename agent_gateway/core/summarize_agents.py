"""Agent Summary — pure capability counts over an agent catalog.

Invariants:
    - total_agents == len(agents); capabilities == sum of each agent's action count
    - Agent entries and their order passed through untouched
    - Raises on a malformed catalog (caller maps to AgentListingError)
"""

from collections.abc import Mapping, Sequence
from typing import Any


def summarize_agents(agents: Sequence[Mapping[str, Any]]) -> dict:
    """Compute listing counts from the engine's catalog. Pure, no IO."""
    return {
        "agents": [dict(agent) for agent in agents],
        "total_agents": len(agents),
        "capabilities": sum(_action_count(agent) for agent in agents),
    }


def _action_count(agent: Mapping[str, Any]) -> int:
    actions = agent["actions"]
    if not isinstance(actions, list):
        raise TypeError(f"agent actions must be a list, got {type(actions).__name__}")
    return len(actions)
