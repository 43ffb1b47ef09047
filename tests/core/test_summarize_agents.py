"""Tests for summarize_agents — pure counts from the agent catalog, no IO."""

import pytest

from agent_gateway.core.summarize_agents import summarize_agents


def test_counts_agents_and_actions():
    summary = summarize_agents([{"actions": ["a", "b"]}, {"actions": ["c"]}])
    assert summary["total_agents"] == 2
    assert summary["capabilities"] == 3


def test_empty_catalog_returns_zero_counts():
    assert summarize_agents([]) == {
        "agents": [], "total_agents": 0, "capabilities": 0,
    }


def test_agents_pass_through_in_order_with_extra_fields():
    agents = [
        {"agentKey": "b", "actions": [], "label": "Beta"},
        {"agentKey": "a", "actions": ["x"]},
    ]
    assert summarize_agents(agents)["agents"] == agents


def test_agent_without_actions_raises():
    with pytest.raises(KeyError):
        summarize_agents([{"agentKey": "a"}])


def test_non_list_actions_raises():
    with pytest.raises(TypeError):
        summarize_agents([{"agentKey": "a", "actions": "abc"}])
