"""
Constants module
Constants shared across routes and services, kept here instead of as magic strings
"""


class ErrorCodes:
    """Error codes (log-only; response bodies carry the message)"""
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_AUTH_FAILED = "UPSTREAM_AUTH_FAILED"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    GENERATION_FAILED = "GENERATION_FAILED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorMessages:
    """User-facing error messages"""
    API_CONFIGURATION = "API configuration error. Set GEMINI_API_KEY."
    EXAM_FIELDS_REQUIRED = "Both topic and questionCount are required."
    QUESTION_COUNT_RANGE = "questionCount must be between 1 and 20."
    EXAM_QUESTIONS_REQUIRED = "examQuestions is required to generate an answer key."
    INVALID_JSON = "Request body must be valid JSON."
    REQUEST_TIMEOUT = "Request timeout. Try again."
    AUTH_FAILED = "API key authentication failed."
    RATE_LIMITED = "Rate limited. Try later."
    EXAM_FAILED = "Failed to generate exam. Please try again later."
    ANSWER_KEY_FAILED = "Failed to generate answer key. Please try again."
    NO_CONTENT = "No content generated from AI model"
    NOT_FOUND = "Not found"
    INTERNAL_ERROR = "Internal server error."


class QuestionLimits:
    """Bounds for questionCount (inclusive)"""
    MIN = 1
    MAX = 20


class HTTPHeaders:
    """HTTP header constants"""
    CONTENT_TYPE = "Content-Type"
    JSON_CONTENT = "application/json"
    GOOG_API_KEY = "x-goog-api-key"
    REQUEST_ID = "X-Request-Id"


class Timeouts:
    """Timeouts (seconds)"""
    LLM_API = 30


class Gemini:
    """Gemini generateContent defaults"""
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    DEFAULT_MODEL = "gemini-1.5-flash"
    USER_ROLE = "user"
