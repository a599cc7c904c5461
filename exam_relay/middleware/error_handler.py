"""
Global error handlers
Every failure leaves the service as {"error": "<message>"}
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exam_relay.core.constants import ErrorCodes, ErrorMessages
from exam_relay.core.exceptions import AppException, NotFoundError
from exam_relay.middleware.request_context import get_trace_id

logger = logging.getLogger(__name__)

# unknown path and known path with the wrong method look the same to callers
NOT_FOUND_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


def create_error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        # 4xx is a warning, 5xx an error
        log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
        logger.log(
            log_level,
            exc.code,
            extra={
                "trace_id": get_trace_id(request),
                "error_message": exc.message,
                "status_code": exc.status_code,
                "details": exc.details,
                "path": str(request.url.path),
                "method": request.method,
            }
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in NOT_FOUND_STATUSES:
            not_found = NotFoundError(method=request.method, path=request.url.path)
            logger.error(
                "not_found",
                extra={
                    "trace_id": get_trace_id(request),
                    "method": request.method,
                    "path": request.url.path,
                },
            )
            return JSONResponse(status_code=not_found.status_code, content=not_found.to_dict())
        return create_error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            extra={
                "trace_id": get_trace_id(request),
                "error_code": ErrorCodes.INTERNAL_ERROR,
                "error_type": type(exc).__name__,
                "error_message": str(exc),
                "path": str(request.url.path),
                "method": request.method,
            },
            exc_info=True
        )
        return create_error_response(ErrorMessages.INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
