# exam_relay/services/error_mapping.py
"""
Provider failure -> application error

The only place that knows about httpx exceptions and provider HTTP status
codes. Order of checks matters: timeout, auth, rate limit, everything else.
"""
from __future__ import annotations

import asyncio

import httpx
from fastapi import status

from exam_relay.core.exceptions import (
    AppException,
    EmptyCompletionError,
    GenerationError,
    RateLimitError,
    UnknownUpstreamError,
    UpstreamAuthError,
    UpstreamTimeoutError,
)

AUTH_STATUSES = {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def _retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("Retry-After")
    if value and value.strip().isdigit():
        return int(value.strip())
    return None


def map_provider_error(exc: BaseException, failure_message: str) -> AppException:
    """
    Translate an exception raised while calling the provider.

    Args:
        exc: whatever the client or the extraction step raised
        failure_message: generic caller-facing message for this operation

    Returns:
        the AppException to raise at the request boundary
    """
    if isinstance(exc, AppException):
        return exc

    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        return UpstreamTimeoutError(original_error=exc)

    if isinstance(exc, httpx.HTTPStatusError):
        upstream_status = exc.response.status_code
        if upstream_status in AUTH_STATUSES:
            return UpstreamAuthError(upstream_status=upstream_status)
        if upstream_status == status.HTTP_429_TOO_MANY_REQUESTS:
            return RateLimitError(retry_after=_retry_after(exc.response))
        return UnknownUpstreamError(failure_message, upstream_status=upstream_status, original_error=exc)

    if isinstance(exc, EmptyCompletionError):
        return GenerationError(failure_message, reason=str(exc), finish_reason=exc.finish_reason)

    return UnknownUpstreamError(failure_message, original_error=exc)
