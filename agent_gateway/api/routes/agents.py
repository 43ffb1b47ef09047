"""Agents Routes — direct actions / natural-language requests and the agent catalog.

Invariants:
    - POST: identity resolved first, then body parsed, then validated, then dispatched
    - POST uses the shared ServiceHandle; GET builds its own client and needs no identity
    - Response bodies are the envelopes from schemas/agents.py, serialized by alias
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from agent_gateway.api.dependencies import require_identity
from agent_gateway.core.domain_types import AuthenticatedIdentity
from agent_gateway.core.errors import InvalidRequestFormatError
from agent_gateway.core.validate_request import validate_request
from agent_gateway.infrastructure.service_handle import ServiceHandle, get_service_handle
from agent_gateway.schemas.agents import (
    AgentRequest, AgentSummary, DirectActionResult, ErrorResult,
    NaturalLanguageResult,
)
from agent_gateway.services.agent_listing import get_listing_factory, list_agents
from agent_gateway.services.dispatch import process_agent_request

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/ai/agents", tags=["agents"])


async def _parse_body(request: Request) -> AgentRequest:
    """Read the body only after authentication has passed."""
    try:
        return AgentRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Malformed agent request body: {e.errors()}")
        raise InvalidRequestFormatError()


@router.post(
    "",
    response_model=DirectActionResult | NaturalLanguageResult,
    responses={
        400: {"model": ErrorResult},
        401: {"model": ErrorResult},
        404: {"model": ErrorResult},
        500: {"model": ErrorResult},
    },
)
async def handle_agent_request(
    request: Request,
    identity: AuthenticatedIdentity = Depends(require_identity),
    handle: ServiceHandle = Depends(get_service_handle),
):
    """Execute a direct action or process a natural-language message."""
    body = await _parse_body(request)
    validated = validate_request(body.message, body.context, body.direct_action)
    return await process_agent_request(handle, validated, identity)


@router.get("", response_model=AgentSummary, responses={500: {"model": ErrorResult}})
async def get_agents(factory=Depends(get_listing_factory)):
    """List available agents with total agent and capability counts."""
    return await list_agents(factory)
