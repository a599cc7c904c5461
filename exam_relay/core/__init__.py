"""
Core module
Settings, constants and exceptions
"""
from exam_relay.core.settings import BaseConfig, get_settings, validate_required_settings
from exam_relay.core.constants import (
    ErrorCodes,
    ErrorMessages,
    QuestionLimits,
    HTTPHeaders,
    Timeouts,
    Gemini,
)
from exam_relay.core.exceptions import (
    AppException,
    ConfigurationError,
    ValidationError,
    NotFoundError,
    UpstreamTimeoutError,
    UpstreamAuthError,
    RateLimitError,
    GenerationError,
    UnknownUpstreamError,
    EmptyCompletionError,
)

__all__ = [
    # Settings
    "BaseConfig",
    "get_settings",
    "validate_required_settings",

    # Constants
    "ErrorCodes",
    "ErrorMessages",
    "QuestionLimits",
    "HTTPHeaders",
    "Timeouts",
    "Gemini",

    # Exceptions
    "AppException",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "UpstreamTimeoutError",
    "UpstreamAuthError",
    "RateLimitError",
    "GenerationError",
    "UnknownUpstreamError",
    "EmptyCompletionError",
]
