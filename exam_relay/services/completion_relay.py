"""
Completion relay
Validated request -> prompt -> one Gemini call -> text -> response payload
"""
import logging
from typing import Optional

from exam_relay.core.constants import ErrorMessages
from exam_relay.core.exceptions import ConfigurationError, EmptyCompletionError
from exam_relay.core.logging import utc_timestamp
from exam_relay.core.settings import BaseConfig, validate_required_settings
from exam_relay.schemas.exam import (
    AnswerKeyRequest,
    AnswerKeyResponse,
    ExamGenerationRequest,
    ExamResponse,
)
from exam_relay.schemas.provider import GenerateContentResponse
from exam_relay.services.error_mapping import map_provider_error
from exam_relay.services.gemini_client import GeminiClient
from exam_relay.services.prompts import build_answer_key_prompt, build_exam_prompt

logger = logging.getLogger(__name__)


def extract_text(response: GenerateContentResponse) -> str:
    """
    Text of the first candidate.

    A single text part is used as-is; otherwise the text of every part that has
    any is joined with newlines in order. Empty results raise
    EmptyCompletionError carrying the candidate's finish reason.
    """
    if not response.candidates:
        raise EmptyCompletionError()
    candidate = response.candidates[0]
    if candidate.content is None:
        raise EmptyCompletionError(finish_reason=candidate.finish_reason)

    parts = candidate.content.parts
    if len(parts) == 1 and parts[0].text:
        text = parts[0].text
    else:
        text = "\n".join(p.text for p in parts if p.text)

    text = text.strip()
    if not text:
        raise EmptyCompletionError(finish_reason=candidate.finish_reason)
    return text


class CompletionRelay:
    """
    Relays exam and answer-key requests to Gemini.

    Settings are injected, never read from the environment here.
    """

    def __init__(self, settings: BaseConfig, client: GeminiClient):
        self.settings = settings
        self.client = client

    @property
    def model_id(self) -> str:
        return self.settings.GEMINI_MODEL_ID

    def ensure_configured(self) -> None:
        if not self.settings.has_api_key:
            raise ConfigurationError(missing=validate_required_settings(self.settings))

    async def complete(self, prompt: str, failure_message: str, operation: str, trace_id: Optional[str] = None) -> str:
        """One provider call; every failure comes out as an AppException."""
        try:
            response = await self.client.generate_content(prompt)
            return extract_text(response)
        except Exception as e:
            error = map_provider_error(e, failure_message)
            logger.debug(
                "relay_failed",
                extra={
                    "trace_id": trace_id,
                    "operation": operation,
                    "error_type": type(e).__name__,
                    "error_code": error.code,
                    "details": error.details,
                },
            )
            if error is e:
                raise
            raise error from e

    async def generate_exam(self, request: ExamGenerationRequest, trace_id: Optional[str] = None) -> ExamResponse:
        prompt = build_exam_prompt(request.topic, request.question_count)
        exam = await self.complete(prompt, ErrorMessages.EXAM_FAILED, "generate_exam", trace_id)
        logger.info(
            "exam_generated",
            extra={"trace_id": trace_id, "topic": request.topic, "question_count": request.question_count},
        )
        return ExamResponse(
            exam=exam,
            topic=request.topic,
            question_count=request.question_count,
            generated_at=utc_timestamp(),
            model=self.model_id,
        )

    async def generate_answer_key(self, request: AnswerKeyRequest, trace_id: Optional[str] = None) -> AnswerKeyResponse:
        prompt = build_answer_key_prompt(request.exam_questions, request.topic)
        answer_key = await self.complete(prompt, ErrorMessages.ANSWER_KEY_FAILED, "generate_answer_key", trace_id)
        logger.info("answer_key_generated", extra={"trace_id": trace_id, "topic": request.topic})
        return AnswerKeyResponse(
            answer_key=answer_key,
            generated_at=utc_timestamp(),
            model=self.model_id,
        )
