"""Agent Schemas — request body, success envelopes and catalog summary.

Invariants:
    - AgentRequest accepts any combination of fields; emptiness rules are enforced by
      core.validate_request so the error messages stay fixed
    - Envelopes serialize by alias: type, agentKey, action, result, message, timestamp
    - AgentSummary passes catalog entries through verbatim

Design Decisions:
    - directAction kept untyped: a missing agentKey must surface as
      MISSING_ACTION_FIELDS and a falsy value ("", false, 0) as MISSING_PAYLOAD,
      not as a Pydantic validation error
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AgentRequest(_CamelModel):
    """POST body: a free-text message and/or a direct action."""
    message: str | None = None
    context: Any = None
    direct_action: Any = None


class DirectActionResult(_CamelModel):
    type: Literal["direct_action"] = "direct_action"
    agent_key: str
    action: str
    result: Any = None
    timestamp: str


class NaturalLanguageResult(_CamelModel):
    type: Literal["natural_language"] = "natural_language"
    message: str
    timestamp: str


class ErrorResult(BaseModel):
    """Error envelope. details only for generic failures."""
    error: str
    details: str | None = None


class AgentSummary(_CamelModel):
    agents: list[dict[str, Any]]
    total_agents: int
    capabilities: int
