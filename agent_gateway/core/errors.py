"""Error Hierarchy — typed, categorized exceptions for all gateway failure modes.

Invariants:
    - Every GatewayError has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat REST envelope: {"error": ...} plus "details" when set
    - Only RequestProcessingError carries details; auth and validation messages are fixed
    - MultiAgentServiceError is NOT a GatewayError: it is classified or converted, never rendered

Design Decisions:
    - Single hierarchy with GatewayError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Engine errors keep the engine's own text as str(exc): the classifier matches on it
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    NOT_AVAILABLE = "not_available"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    user_id: str | None = None
    agent_key: str | None = None
    action: str | None = None


class GatewayError(Exception):
    """Base exception for all errors rendered to gateway clients."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class AuthenticationRequiredError(GatewayError):
    """No verified session identity on the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MissingPayloadError(GatewayError):
    """Neither a message nor a direct action was supplied."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Message or direct action is required",
            "MISSING_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingActionFieldsError(GatewayError):
    """Direct action without agentKey or action."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Agent key and action are required for direct action",
            "MISSING_ACTION_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidRequestFormatError(GatewayError):
    """Request body is not a well-formed agent request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request format",
            "INVALID_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class AgentNotFoundError(GatewayError):
    """Engine reported the agent or action does not exist. Message is the engine's."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class ActionNotAvailableError(GatewayError):
    """Engine reported the action is not available. Message is the engine's."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_AVAILABLE", ErrorCategory.NOT_AVAILABLE,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class RequestProcessingError(GatewayError):
    """Unclassified failure while serving an agent request."""
    def __init__(self, details: str, context: ErrorContext | None = None):
        super().__init__(
            "Failed to process request",
            "GENERIC_FAILURE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500, details,
        )


class AgentListingError(GatewayError):
    """Agent catalog could not be fetched or summarized."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to get agents",
            "AGENT_LISTING_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── Engine Errors ──────────────────────────────────────────────

class MultiAgentServiceError(Exception):
    """Multi-agent engine call failed. str(exc) is the engine's error text."""

    def __init__(
        self,
        message: str,
        api_error_type: str = "engine_error",
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.api_error_type = api_error_type
        self.status_code = status_code
