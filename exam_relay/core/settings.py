"""
Settings module
Per-environment configuration, validated once at startup
"""
import os
from typing import Optional, List

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from exam_relay.core.constants import Gemini, Timeouts


class BaseConfig(BaseSettings):
    """
    Base settings
    Shared by every environment. Instances are frozen: build one at startup
    and pass it around instead of reading the environment per request.
    """
    # ===========================================
    # Application
    # ===========================================
    SERVICE_NAME: str = Field(default="math-exam-relay")
    ENV: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)

    # ===========================================
    # Network
    # ===========================================
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)
    REQUEST_TIMEOUT_S: float = Field(default=Timeouts.LLM_API)

    # ===========================================
    # Gemini
    # ===========================================
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL_ID: str = Field(default=Gemini.DEFAULT_MODEL)
    GEMINI_BASE_URL: str = Field(default=Gemini.BASE_URL)

    # ===========================================
    # CORS
    # ===========================================
    CORS_ORIGINS: str = Field(default="*")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
        frozen = True

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v_upper

    @field_validator("GEMINI_API_KEY")
    @classmethod
    def blank_key_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("REQUEST_TIMEOUT_S")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT_S must be positive")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins as a list"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def has_api_key(self) -> bool:
        return bool(self.GEMINI_API_KEY)


class DevelopmentConfig(BaseConfig):
    """Development"""
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="DEBUG")


class StagingConfig(BaseConfig):
    """Staging"""
    ENV: str = Field(default="staging")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")


class ProductionConfig(BaseConfig):
    """Production"""
    ENV: str = Field(default="production")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="WARNING")


class TestConfig(BaseConfig):
    """Test"""
    ENV: str = Field(default="test")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="DEBUG")


def get_settings() -> BaseConfig:
    """
    Build the settings object for the current environment

    The ENV environment variable picks the config class.
    """
    env = os.getenv("ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "dev": DevelopmentConfig,
        "local": DevelopmentConfig,
        "staging": StagingConfig,
        "stage": StagingConfig,
        "production": ProductionConfig,
        "prod": ProductionConfig,
        "test": TestConfig,
        "testing": TestConfig,
    }

    config_class = config_map.get(env, DevelopmentConfig)
    return config_class()


# ===========================================
# Validation helpers
# ===========================================

def validate_required_settings(settings: BaseConfig) -> List[str]:
    """
    Check that required settings are present

    Returns:
        names of missing settings
    """
    missing = []
    if not settings.has_api_key:
        missing.append("GEMINI_API_KEY")
    if not settings.GEMINI_MODEL_ID.strip():
        missing.append("GEMINI_MODEL_ID")
    return missing


def settings_summary(settings: BaseConfig) -> dict:
    """Settings summary for startup logs (no secrets)"""
    return {
        "service": settings.SERVICE_NAME,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "log_level": settings.LOG_LEVEL,
        "port": settings.PORT,
        "model": settings.GEMINI_MODEL_ID,
        "api_key_configured": settings.has_api_key,
        "cors_origins": settings.cors_origins_list,
    }
