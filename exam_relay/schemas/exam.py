# schemas/exam.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExamGenerationRequest(BaseModel):
    """Validated exam request. Build through services.validators."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    topic: str = Field(min_length=1)
    question_count: int = Field(alias="questionCount", ge=1, le=20)


class AnswerKeyRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    exam_questions: str = Field(alias="examQuestions", min_length=1)
    topic: Optional[str] = None


class ExamResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exam: str
    topic: str
    question_count: int = Field(alias="questionCount")
    generated_at: str = Field(alias="generatedAt")
    model: str


class AnswerKeyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer_key: str = Field(alias="answerKey")
    generated_at: str = Field(alias="generatedAt")
    model: str


class HealthResponse(BaseModel):
    status: str
