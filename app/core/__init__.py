"""
Core infrastructure for the AIVocal assistant backend:
exceptions, error handlers, logging and dependency injection.
"""

from .exceptions import (
    AssistantException,
    ErrorCode,
    MessageRequiredError,
    ConfigurationError,
    AIGatewayError,
    GatewayRateLimitError,
    GatewayPaymentRequiredError,
)

__all__ = [
    "AssistantException",
    "ErrorCode",
    "MessageRequiredError",
    "ConfigurationError",
    "AIGatewayError",
    "GatewayRateLimitError",
    "GatewayPaymentRequiredError",
]
