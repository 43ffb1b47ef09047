"""Error Classifier — token priority and case sensitivity."""

from agent_gateway.core.classify_errors import classify_engine_error
from agent_gateway.core.domain_types import OutcomeCategory
from agent_gateway.core.errors import MultiAgentServiceError


def test_not_found_token():
    category, message = classify_engine_error(
        MultiAgentServiceError("Agent calendar not found"),
    )
    assert category is OutcomeCategory.NOT_FOUND
    assert message == "Agent calendar not found"


def test_not_available_token():
    category, _ = classify_engine_error(ValueError("Action is not available"))
    assert category is OutcomeCategory.NOT_AVAILABLE


def test_not_found_checked_first():
    category, _ = classify_engine_error(
        RuntimeError("not available because agent not found"),
    )
    assert category is OutcomeCategory.NOT_FOUND


def test_match_is_case_sensitive():
    category, _ = classify_engine_error(RuntimeError("Agent Not Found"))
    assert category is OutcomeCategory.GENERIC_FAILURE


def test_other_messages_are_generic():
    category, message = classify_engine_error(RuntimeError("timeout"))
    assert category is OutcomeCategory.GENERIC_FAILURE
    assert message == "timeout"


def test_empty_message_becomes_unknown_error():
    category, message = classify_engine_error(RuntimeError())
    assert category is OutcomeCategory.GENERIC_FAILURE
    assert message == "Unknown error"
