"""Action Router — sends a validated request to the engine and shapes the envelope.

Invariants:
    - Direct action is checked before natural language; a failed direct action never
      falls through to natural language
    - Merged params always carry the authenticated userId (caller value overwritten)
    - Direct-action envelopes echo the caller's agentKey/action, not the engine's
    - Only direct-action failures are classified; everything else is a generic failure
    - process_agent_request converts every non-GatewayError into RequestProcessingError

Design Decisions:
    - Classification raises typed GatewayErrors; unclassified errors are re-raised
      unchanged so the outer processor owns the 500 conversion in one place
    - The engine is fetched from the handle inside the try block: a failed build is a
      generic failure with details, like any other engine failure
"""

import logging

from agent_gateway.core.classify_errors import classify_engine_error, error_message
from agent_gateway.core.domain_types import (
    AuthenticatedIdentity, EnvelopeType, OutcomeCategory, utc_timestamp,
)
from agent_gateway.core.engine_protocols import MultiAgentEngine
from agent_gateway.core.errors import (
    ActionNotAvailableError,
    AgentNotFoundError,
    ErrorContext,
    GatewayError,
    InvalidRequestFormatError,
    RequestProcessingError,
)
from agent_gateway.core.validate_request import (
    DirectActionRequest, NaturalLanguageRequest, ValidatedRequest,
)
from agent_gateway.infrastructure.service_handle import ServiceHandle
from agent_gateway.schemas.agents import DirectActionResult, NaturalLanguageResult

logger = logging.getLogger(__name__)


async def process_agent_request(
    handle: ServiceHandle,
    request: ValidatedRequest,
    identity: AuthenticatedIdentity,
) -> DirectActionResult | NaturalLanguageResult:
    """Serve one validated request; unclassified failures become RequestProcessingError."""
    try:
        engine = handle.get()
        return await dispatch_request(engine, request, identity)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(
            f"AI agents API error: {e}",
            exc_info=True,
            extra={"user_id": identity.user_id, "error_code": "GENERIC_FAILURE"},
        )
        raise RequestProcessingError(
            error_message(e), ErrorContext(user_id=identity.user_id),
        ) from e


async def dispatch_request(
    engine: MultiAgentEngine,
    request: ValidatedRequest,
    identity: AuthenticatedIdentity,
) -> DirectActionResult | NaturalLanguageResult:
    """Route a validated request to the matching engine operation."""
    if isinstance(request, DirectActionRequest):
        return await _execute_direct_action(engine, request, identity)
    if isinstance(request, NaturalLanguageRequest):
        return await _process_natural_language(engine, request, identity)
    raise InvalidRequestFormatError(ErrorContext(user_id=identity.user_id))


async def _execute_direct_action(
    engine: MultiAgentEngine,
    request: DirectActionRequest,
    identity: AuthenticatedIdentity,
) -> DirectActionResult:
    params = {**request.params, "userId": identity.user_id}
    logger.info(
        "Executing direct action",
        extra={
            "user_id": identity.user_id,
            "agent_key": request.agent_key,
            "action": request.action,
            "request_type": EnvelopeType.DIRECT_ACTION.value,
        },
    )
    try:
        result = await engine.execute_direct_action(
            request.agent_key, request.action, params,
        )
    except Exception as e:
        _raise_classified(e, request, identity)
        raise

    return DirectActionResult(
        agent_key=request.agent_key,
        action=request.action,
        result=result,
        timestamp=utc_timestamp(),
    )


def _raise_classified(
    error: Exception,
    request: DirectActionRequest,
    identity: AuthenticatedIdentity,
) -> None:
    """Raise the typed error for a classified failure; return if unclassified."""
    category, message = classify_engine_error(error)
    if category is OutcomeCategory.GENERIC_FAILURE:
        return
    context = ErrorContext(
        user_id=identity.user_id,
        agent_key=request.agent_key,
        action=request.action,
    )
    logger.warning(
        f"Direct action failed ({category.value}): {message}",
        extra={
            "user_id": identity.user_id,
            "agent_key": request.agent_key,
            "action": request.action,
        },
    )
    if category is OutcomeCategory.NOT_FOUND:
        raise AgentNotFoundError(message, context) from error
    raise ActionNotAvailableError(message, context) from error


async def _process_natural_language(
    engine: MultiAgentEngine,
    request: NaturalLanguageRequest,
    identity: AuthenticatedIdentity,
) -> NaturalLanguageResult:
    logger.info(
        "Processing natural language request",
        extra={
            "user_id": identity.user_id,
            "request_type": EnvelopeType.NATURAL_LANGUAGE.value,
        },
    )
    reply = await engine.process_user_request(
        request.message, identity.user_id, request.context,
    )
    return NaturalLanguageResult(message=reply, timestamp=utc_timestamp())
