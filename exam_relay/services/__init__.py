"""
Service layer
Validation, prompt building and the Gemini relay
"""
from exam_relay.services.completion_relay import CompletionRelay, extract_text
from exam_relay.services.error_mapping import map_provider_error
from exam_relay.services.gemini_client import GeminiClient
from exam_relay.services.prompts import build_answer_key_prompt, build_exam_prompt
from exam_relay.services.validators import (
    coerce_question_count,
    validate_answer_key_request,
    validate_exam_request,
)

__all__ = [
    # Relay
    "CompletionRelay",
    "extract_text",
    "map_provider_error",

    # HTTP client
    "GeminiClient",

    # Prompts
    "build_answer_key_prompt",
    "build_exam_prompt",

    # Validation
    "coerce_question_count",
    "validate_answer_key_request",
    "validate_exam_request",
]
