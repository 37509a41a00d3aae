"""
Custom exceptions for the AIVocal assistant backend.
Every exception carries an error code and HTTP status for the error envelope.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Request errors
    MESSAGE_REQUIRED = "MESSAGE_REQUIRED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Upstream AI gateway errors
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    AI_GATEWAY_ERROR = "AI_GATEWAY_ERROR"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class AssistantException(Exception):
    """
    Base exception for the assistant backend.

    ``language`` and ``fallback_response`` are copied into the error body
    when set, so clients can keep showing a reply in the visitor's language.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        language: Optional[str] = None,
        fallback_response: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.language = language
        self.fallback_response = fallback_response

    def with_context(
        self,
        language: Optional[str] = None,
        fallback_response: Optional[str] = None,
    ) -> "AssistantException":
        """Attach reply context and return self for re-raising."""
        if language is not None:
            self.language = language
        if fallback_response is not None:
            self.fallback_response = fallback_response
        return self


class MessageRequiredError(AssistantException):
    """Raised when a request has no usable message text."""

    def __init__(self):
        super().__init__(
            message="Message is required",
            error_code=ErrorCode.MESSAGE_REQUIRED,
            status_code=400
        )


class ConfigurationError(AssistantException):
    """Raised when a required setting is missing."""

    def __init__(self, setting_name: str):
        super().__init__(
            message=f"{setting_name} is not configured",
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details={"setting": setting_name},
            status_code=500
        )


class AIGatewayError(AssistantException):
    """Raised when the AI gateway call fails."""

    def __init__(
        self,
        message: str = "AI gateway error",
        upstream_status: Optional[int] = None,
        status_code: int = 500,
        error_code: ErrorCode = ErrorCode.AI_GATEWAY_ERROR,
    ):
        details = {"upstream_status": upstream_status} if upstream_status else {}
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=status_code
        )
        self.upstream_status = upstream_status


class GatewayRateLimitError(AIGatewayError):
    """Raised when the AI gateway answers 429."""

    def __init__(self, message: str = "Too many requests. Please try again in a moment."):
        super().__init__(
            message=message,
            upstream_status=429,
            status_code=429,
            error_code=ErrorCode.RATE_LIMIT_EXCEEDED
        )


class GatewayPaymentRequiredError(AIGatewayError):
    """Raised when the AI gateway answers 402 (workspace out of credits)."""

    def __init__(self, message: str = "Service temporarily unavailable."):
        super().__init__(
            message=message,
            upstream_status=402,
            status_code=402,
            error_code=ErrorCode.PAYMENT_REQUIRED
        )
