"""Core Layer — pure request validation, classification and summaries. No IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Functions are pure and deterministic (timestamps take an optional clock value)
"""
