# exam_relay/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exam_relay.core.settings import BaseConfig, get_settings, settings_summary, validate_required_settings
from exam_relay.core.logging import configure_logging
from exam_relay.middleware.error_handler import setup_exception_handlers
from exam_relay.middleware.request_context import AccessLogMiddleware, RequestContextMiddleware
from exam_relay.routes.exams import router as exams_router
from exam_relay.schemas.exam import HealthResponse
from exam_relay.services.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log settings and endpoints. Shutdown: close the Gemini client."""
    settings: BaseConfig = app.state.settings
    logger.info("startup", extra={"settings": settings_summary(settings)})

    missing = validate_required_settings(settings)
    if missing:
        logger.warning("missing_settings", extra={"missing": missing})

    base = f"http://localhost:{settings.PORT}"
    logger.info(f"Server running on port {settings.PORT}")
    logger.info(f"Health check available at: {base}/health")
    logger.info(f"Exam endpoint: POST {base}/api/exams/generate")
    logger.info(f"Answer key endpoint: POST {base}/api/exams/answer-key")

    yield

    await app.state.gemini_client.close()


def create_app(
    settings: Optional[BaseConfig] = None,
    gemini_client: Optional[GeminiClient] = None,
) -> FastAPI:
    """
    Build the application

    Args:
        settings: frozen settings; defaults to the current environment's
        gemini_client: outbound client; defaults to one built from settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Math Exam Relay API",
        description="Generates primary school math exams and answer keys through Gemini.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gemini_client = gemini_client or GeminiClient.from_settings(settings)

    # ---------- middleware (last added runs first) ----------
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )
    app.add_middleware(RequestContextMiddleware)

    setup_exception_handlers(app)

    # ---------- routers ----------
    app.include_router(exams_router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Liveness probe."""
        return {"status": "Server is running!"}

    return app


settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = create_app(settings)
