"""Pydantic Schemas — wire shapes for the agents API.

Invariants:
    - Wire names are camelCase (directAction, agentKey, totalAgents); Python names snake_case
    - Schemas validate JSON shape only; request semantics live in core/validate_request
"""
