"""FastAPI dependency injection for settings, the Gemini client and the relay."""

import json
from typing import Annotated, Any, Dict

from fastapi import Depends, Request

from exam_relay.core.constants import ErrorMessages
from exam_relay.core.exceptions import ValidationError
from exam_relay.core.settings import BaseConfig
from exam_relay.services.completion_relay import CompletionRelay
from exam_relay.services.gemini_client import GeminiClient


def get_app_settings(request: Request) -> BaseConfig:
    """Settings built at startup (see main.create_app)."""
    return request.app.state.settings


def get_gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini_client


def get_relay(
    settings: Annotated[BaseConfig, Depends(get_app_settings)],
    client: Annotated[GeminiClient, Depends(get_gemini_client)],
) -> CompletionRelay:
    """Relay for this request.

    Raises:
        ConfigurationError: no API key, checked before the body is even read
    """
    relay = CompletionRelay(settings, client)
    relay.ensure_configured()
    return relay


# Type alias for cleaner route signatures
Relay = Annotated[CompletionRelay, Depends(get_relay)]


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Request body as a dict. Empty or non-object bodies count as {}."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise ValidationError(ErrorMessages.INVALID_JSON)
    return payload if isinstance(payload, dict) else {}
