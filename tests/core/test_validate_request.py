"""Request Validator — payload presence, action fields, branch priority."""

import pytest

from agent_gateway.core.errors import (
    InvalidRequestFormatError, MissingActionFieldsError, MissingPayloadError,
)
from agent_gateway.core.validate_request import (
    DirectActionRequest, NaturalLanguageRequest, validate_request,
)


@pytest.mark.parametrize("context", [None, {}, {"a": 1}, "text", [1, 2]])
def test_no_message_and_no_direct_action_is_missing_payload(context):
    with pytest.raises(MissingPayloadError):
        validate_request(None, context, None)


def test_empty_message_counts_as_absent():
    with pytest.raises(MissingPayloadError):
        validate_request("", None, None)


def test_message_only_yields_natural_language_request():
    result = validate_request("summarize my inbox", {"folder": "work"}, None)
    assert result == NaturalLanguageRequest(
        message="summarize my inbox", context={"folder": "work"},
    )


def test_empty_direct_action_object_is_present_but_missing_fields():
    with pytest.raises(MissingActionFieldsError):
        validate_request(None, None, {})


@pytest.mark.parametrize("direct_action", [
    {"agentKey": "mail"},
    {"action": "send"},
    {"agentKey": "", "action": "send"},
    {"agentKey": "mail", "action": ""},
    {"agentKey": None, "action": "send"},
])
def test_missing_action_fields_even_with_message(direct_action):
    with pytest.raises(MissingActionFieldsError):
        validate_request("hello", None, direct_action)


def test_direct_action_takes_priority_over_message():
    result = validate_request(
        "hello", None, {"agentKey": "mail", "action": "send"},
    )
    assert isinstance(result, DirectActionRequest)


def test_params_pass_through_as_copy():
    params = {"to": "a@example.com", "nested": {"x": 1}}
    result = validate_request(
        None, None, {"agentKey": "mail", "action": "send", "params": params},
    )
    assert result.params == params
    assert result.params is not params


def test_missing_params_default_to_empty_dict():
    result = validate_request(None, None, {"agentKey": "mail", "action": "send"})
    assert result.params == {}


@pytest.mark.parametrize("direct_action", [
    {"agentKey": 7, "action": "send"},
    {"agentKey": "mail", "action": ["send"]},
    {"agentKey": "mail", "action": "send", "params": "to=a"},
    {"agentKey": "mail", "action": "send", "params": [1, 2]},
])
def test_wrong_types_are_invalid_format(direct_action):
    with pytest.raises(InvalidRequestFormatError):
        validate_request(None, None, direct_action)


@pytest.mark.parametrize("direct_action", ["", False, 0, []])
def test_falsy_non_object_direct_action_counts_as_absent(direct_action):
    with pytest.raises(MissingPayloadError):
        validate_request(None, None, direct_action)
    result = validate_request("hello", None, direct_action)
    assert result == NaturalLanguageRequest(message="hello")


@pytest.mark.parametrize("direct_action", ["calendar.list", True, 1, ["a"]])
def test_truthy_non_object_direct_action_is_invalid_format(direct_action):
    with pytest.raises(InvalidRequestFormatError):
        validate_request("hello", None, direct_action)
