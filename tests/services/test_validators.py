"""
Request validator tests
"""
import pytest

from exam_relay.core.exceptions import ValidationError
from exam_relay.services.validators import (
    coerce_question_count,
    validate_answer_key_request,
    validate_exam_request,
)

REQUIRED = "Both topic and questionCount are required."
RANGE = "questionCount must be between 1 and 20."


class TestCoerceQuestionCount:
    """questionCount coercion"""

    @pytest.mark.parametrize("value,expected", [
        (5, 5),
        (5.0, 5),
        ("5", 5),
        (" 7 ", 7),
        ("5.0", 5),
        (0, 0),
        (-1, -1),
        ("21", 21),
    ])
    def test_whole_numbers(self, value, expected):
        assert coerce_question_count(value) == expected

    @pytest.mark.parametrize("value", [
        None, "", "   ", "abc", "5 apples", True, False,
        float("nan"), float("inf"), "Infinity", 2.5, "2.5", [5], {"n": 5},
    ])
    def test_not_a_count(self, value):
        assert coerce_question_count(value) is None


class TestValidateExamRequest:
    """Exam request validation"""

    def test_valid(self):
        request = validate_exam_request({"topic": "  Fractions ", "questionCount": "12"})

        assert request.topic == "Fractions"
        assert request.question_count == 12

    @pytest.mark.parametrize("count", [1, 20])
    def test_bounds_inclusive(self, count):
        assert validate_exam_request({"topic": "x", "questionCount": count}).question_count == count

    @pytest.mark.parametrize("count", [0, 21, -1, "0", 1000])
    def test_out_of_range(self, count):
        with pytest.raises(ValidationError) as exc_info:
            validate_exam_request({"topic": "Addition", "questionCount": count})

        assert exc_info.value.message == RANGE
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("payload", [
        {},
        {"topic": "Addition"},
        {"questionCount": 5},
        {"topic": "  ", "questionCount": 5},
        {"topic": None, "questionCount": 5},
        {"topic": "Addition", "questionCount": "many"},
        # missing topic wins over a bad count
        {"questionCount": 50},
    ])
    def test_required(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            validate_exam_request(payload)

        assert exc_info.value.message == REQUIRED

    def test_numeric_topic_stringified(self):
        assert validate_exam_request({"topic": 10, "questionCount": 3}).topic == "10"


class TestValidateAnswerKeyRequest:
    """Answer key request validation"""

    def test_valid_with_topic(self):
        request = validate_answer_key_request({"examQuestions": " 1. 2 + 2 \n", "topic": " Addition "})

        assert request.exam_questions == "1. 2 + 2"
        assert request.topic == "Addition"

    @pytest.mark.parametrize("topic", [None, "", "   "])
    def test_topic_optional(self, topic):
        request = validate_answer_key_request({"examQuestions": "1. 2 + 2", "topic": topic})

        assert request.topic is None

    @pytest.mark.parametrize("exam_questions", [None, "", " \n\t"])
    def test_exam_questions_required(self, exam_questions):
        with pytest.raises(ValidationError) as exc_info:
            validate_answer_key_request({"examQuestions": exam_questions, "topic": "Addition"})

        assert exc_info.value.message == "examQuestions is required to generate an answer key."
