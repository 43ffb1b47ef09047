"""Agent Gateway — authenticated front door to the multi-agent execution engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
