"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the opaque identifier from the session collaborator
    - Envelope types and outcome categories encoded as Enums, no raw string matching
    - Every timestamp leaving the gateway is UTC, millisecond precision, 'Z' suffix

Design Decisions:
    - NewType over dataclass wrappers for identifiers: zero runtime cost
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Caller identity resolved from the session. Never persisted."""
    user_id: UserId


# ─── Enums ───────────────────────────────────────────────────────

class EnvelopeType(str, Enum):
    """Discriminator for the two success envelopes."""
    DIRECT_ACTION = "direct_action"
    NATURAL_LANGUAGE = "natural_language"


class OutcomeCategory(str, Enum):
    """Classification of a failed direct action."""
    NOT_FOUND = "not_found"
    NOT_AVAILABLE = "not_available"
    GENERIC_FAILURE = "generic_failure"


# ─── Timestamps ──────────────────────────────────────────────────

def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC instant, e.g. 2026-10-19T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(
        timespec="milliseconds",
    ).replace("+00:00", "Z")
