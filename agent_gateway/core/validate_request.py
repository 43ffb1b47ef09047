"""Request Validator — resolves an agent request body into a tagged variant.

Invariants:
    - Runs before any engine call; raises GatewayError subclasses only
    - Direct action wins when both message and directAction are present
    - An empty directAction object counts as present (then fails on missing fields)
    - A falsy non-object directAction ("", false, 0) counts as absent
    - context and params pass through untouched

Design Decisions:
    - Tagged variant (DirectActionRequest | NaturalLanguageRequest) over field-presence
      checks inside the router (ADR: router never re-validates)
    - Operates on the raw directAction mapping: field names are the wire names
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from agent_gateway.core.errors import (
    InvalidRequestFormatError,
    MissingActionFieldsError,
    MissingPayloadError,
)


@dataclass(frozen=True)
class DirectActionRequest:
    agent_key: str
    action: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NaturalLanguageRequest:
    message: str
    context: Any = None


ValidatedRequest = Union[DirectActionRequest, NaturalLanguageRequest]


def validate_request(
    message: str | None,
    context: Any,
    direct_action: Any,
) -> ValidatedRequest:
    """Validate request fields. Raises MissingPayload/MissingActionFields/InvalidFormat."""
    if direct_action is not None and not isinstance(direct_action, Mapping):
        if direct_action:
            raise InvalidRequestFormatError()
        direct_action = None
    if not message and direct_action is None:
        raise MissingPayloadError()
    if direct_action is not None:
        return _validate_direct_action(direct_action)
    return NaturalLanguageRequest(message=message, context=context)


def _validate_direct_action(direct_action: Mapping[str, Any]) -> DirectActionRequest:
    agent_key = direct_action.get("agentKey")
    action = direct_action.get("action")
    if not agent_key or not action:
        raise MissingActionFieldsError()
    if not isinstance(agent_key, str) or not isinstance(action, str):
        raise InvalidRequestFormatError()

    params = direct_action.get("params")
    if params is None:
        params = {}
    elif not isinstance(params, Mapping):
        raise InvalidRequestFormatError()
    return DirectActionRequest(
        agent_key=agent_key, action=action, params=dict(params),
    )
