# exam_relay/services/validators.py
"""
Request validation
Turns raw JSON bodies into typed requests or raises ValidationError with the
exact message for the violated constraint. Never touches the network.
"""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from exam_relay.core.constants import ErrorMessages, QuestionLimits
from exam_relay.core.exceptions import ValidationError
from exam_relay.schemas.exam import AnswerKeyRequest, ExamGenerationRequest


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def coerce_question_count(value: Any) -> Optional[int]:
    """
    Integer value of questionCount, or None when it is missing or not a whole number.

    Accepts ints, integral floats and numeric strings ("5", " 7 ", "5.0").
    Booleans, blanks, NaN/inf and fractions are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def validate_exam_request(payload: Mapping[str, Any]) -> ExamGenerationRequest:
    topic = _as_text(payload.get("topic"))
    count = coerce_question_count(payload.get("questionCount"))

    if not topic or count is None:
        raise ValidationError(
            ErrorMessages.EXAM_FIELDS_REQUIRED,
            details={"topic": bool(topic), "questionCount": payload.get("questionCount")},
        )
    if count < QuestionLimits.MIN or count > QuestionLimits.MAX:
        raise ValidationError(
            ErrorMessages.QUESTION_COUNT_RANGE,
            details={"questionCount": count},
        )

    return ExamGenerationRequest(topic=topic, question_count=count)


def validate_answer_key_request(payload: Mapping[str, Any]) -> AnswerKeyRequest:
    exam_questions = _as_text(payload.get("examQuestions"))
    if not exam_questions:
        raise ValidationError(ErrorMessages.EXAM_QUESTIONS_REQUIRED)

    topic = _as_text(payload.get("topic"))
    return AnswerKeyRequest(exam_questions=exam_questions, topic=topic or None)
