"""
Custom exceptions
Exception hierarchy for consistent error responses
"""
from typing import Any, Dict, Optional
from fastapi import status

from exam_relay.core.constants import ErrorCodes, ErrorMessages


class AppException(Exception):
    """
    Base application exception
    Every custom exception derives from this one. ``message`` is shown to the
    caller; ``details`` only ever goes to the logs.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Response body for this exception"""
        return {"error": self.message}


# ===========================================
# Configuration
# ===========================================

class ConfigurationError(AppException):
    """Provider credential is not configured"""

    def __init__(self, message: str = ErrorMessages.API_CONFIGURATION, missing: Optional[list] = None):
        super().__init__(
            code=ErrorCodes.CONFIGURATION_ERROR,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"missing": missing or ["GEMINI_API_KEY"]}
        )


# ===========================================
# Validation
# ===========================================

class ValidationError(AppException):
    """Bad caller input"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            code=ErrorCodes.VALIDATION_FAILED,
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class NotFoundError(AppException):
    """Unknown route or method"""

    def __init__(self, method: str = "", path: str = ""):
        super().__init__(
            code=ErrorCodes.NOT_FOUND,
            message=ErrorMessages.NOT_FOUND,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"method": method, "path": path}
        )


# ===========================================
# Upstream (provider) errors
# ===========================================

class UpstreamTimeoutError(AppException):
    """Provider did not answer within the timeout"""

    def __init__(
        self,
        message: str = ErrorMessages.REQUEST_TIMEOUT,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if original_error:
            details["original_error"] = repr(original_error)

        super().__init__(
            code=ErrorCodes.UPSTREAM_TIMEOUT,
            message=message,
            status_code=status.HTTP_408_REQUEST_TIMEOUT,
            details=details
        )


class UpstreamAuthError(AppException):
    """Provider rejected the API key"""

    def __init__(
        self,
        message: str = ErrorMessages.AUTH_FAILED,
        upstream_status: Optional[int] = None
    ):
        details = {}
        if upstream_status:
            details["upstream_status"] = upstream_status

        super().__init__(
            code=ErrorCodes.UPSTREAM_AUTH_FAILED,
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details
        )


class RateLimitError(AppException):
    """Provider is throttling us"""

    def __init__(
        self,
        message: str = ErrorMessages.RATE_LIMITED,
        retry_after: Optional[int] = None
    ):
        details = {}
        if retry_after:
            details["retry_after"] = retry_after

        super().__init__(
            code=ErrorCodes.RATE_LIMIT_EXCEEDED,
            message=message,
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            details=details
        )


class GenerationError(AppException):
    """Provider answered but produced no usable text"""

    def __init__(
        self,
        message: str = ErrorMessages.EXAM_FAILED,
        reason: Optional[str] = None,
        finish_reason: Optional[str] = None
    ):
        details = {}
        if reason:
            details["reason"] = reason
        if finish_reason:
            details["finish_reason"] = finish_reason

        super().__init__(
            code=ErrorCodes.GENERATION_FAILED,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )


class UnknownUpstreamError(AppException):
    """Any other provider or transport failure"""

    def __init__(
        self,
        message: str = ErrorMessages.EXAM_FAILED,
        upstream_status: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if upstream_status:
            details["upstream_status"] = upstream_status
        if original_error:
            details["original_error"] = repr(original_error)

        super().__init__(
            code=ErrorCodes.UPSTREAM_ERROR,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )


class EmptyCompletionError(Exception):
    """Raised by response extraction when no text was generated

    ``finish_reason`` is the provider's reason for stopping (e.g. SAFETY), if any.
    """

    def __init__(self, message: str = ErrorMessages.NO_CONTENT, finish_reason: Optional[str] = None):
        super().__init__(message)
        self.finish_reason = finish_reason
