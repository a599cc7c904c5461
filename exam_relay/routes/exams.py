# exam_relay/routes/exams.py
import logging

from fastapi import APIRouter, Request

from exam_relay.dependencies import Relay, read_json_object
from exam_relay.middleware.request_context import get_trace_id
from exam_relay.schemas.error import ErrorResponse
from exam_relay.schemas.exam import AnswerKeyResponse, ExamResponse
from exam_relay.services.validators import validate_answer_key_request, validate_exam_request

router = APIRouter(tags=["Exams"])
log = logging.getLogger("exam_relay.exams")

ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (400, 403, 408, 429, 500)
}


# legacy paths kept so old clients don't 404
@router.post("/api/exams/generate", response_model=ExamResponse, responses=ERROR_RESPONSES)
@router.post("/generate-exam", response_model=ExamResponse, responses=ERROR_RESPONSES, deprecated=True)
async def generate_exam(request: Request, relay: Relay):
    """Generate a primary school math exam for a topic."""
    trace_id = get_trace_id(request)
    payload = await read_json_object(request)
    exam_request = validate_exam_request(payload)

    log.info(
        "route_generate_exam_start",
        extra={"trace_id": trace_id, "topic": exam_request.topic, "question_count": exam_request.question_count},
    )
    return await relay.generate_exam(exam_request, trace_id=trace_id)


@router.post("/api/exams/answer-key", response_model=AnswerKeyResponse, responses=ERROR_RESPONSES)
@router.post("/generate-answer-key", response_model=AnswerKeyResponse, responses=ERROR_RESPONSES, deprecated=True)
async def generate_answer_key(request: Request, relay: Relay):
    """Generate an answer key with brief explanations for exam text."""
    trace_id = get_trace_id(request)
    payload = await read_json_object(request)
    answer_key_request = validate_answer_key_request(payload)

    log.info("route_answer_key_start", extra={"trace_id": trace_id, "topic": answer_key_request.topic})
    return await relay.generate_answer_key(answer_key_request, trace_id=trace_id)
