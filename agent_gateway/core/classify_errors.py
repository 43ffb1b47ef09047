"""Error Classifier — maps a failed direct action to an outcome category.

Invariants:
    - Case-sensitive substring match on str(error), "not found" checked before "not available"
    - Applies to direct-action failures only; natural-language failures are never inspected
    - Pure: never raises, never logs

Design Decisions:
    - Free-text tokens are the engine's error vocabulary today; a structured error code
      from the engine would replace this function, not its callers
"""

from agent_gateway.core.domain_types import OutcomeCategory

NOT_FOUND_TOKEN = "not found"
NOT_AVAILABLE_TOKEN = "not available"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


def error_message(error: BaseException) -> str:
    """Textual message of an error, 'Unknown error' when it has none."""
    return str(error) or UNKNOWN_ERROR_MESSAGE


def classify_engine_error(error: BaseException) -> tuple[OutcomeCategory, str]:
    """Classify a direct-action failure by the tokens in its message."""
    message = error_message(error)
    if NOT_FOUND_TOKEN in message:
        return OutcomeCategory.NOT_FOUND, message
    if NOT_AVAILABLE_TOKEN in message:
        return OutcomeCategory.NOT_AVAILABLE, message
    return OutcomeCategory.GENERIC_FAILURE, message
