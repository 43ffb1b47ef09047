"""Infrastructure Layer — engine client, session verification, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Engine failures mapped to MultiAgentServiceError (core/errors.py)
"""
