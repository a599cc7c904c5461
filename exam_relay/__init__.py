"""Math exam relay: FastAPI front for Gemini exam and answer-key generation."""

__version__ = "1.0.0"
