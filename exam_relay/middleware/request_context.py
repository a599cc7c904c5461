# exam_relay/middleware/request_context.py
import logging
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from exam_relay.core.constants import HTTPHeaders

HDR_IN_LOWER = "x-request-id"
HDR_OUT = HTTPHeaders.REQUEST_ID

access_logger = logging.getLogger("access")


def _get_req_id_from_headers(request: Request) -> Optional[str]:
    # Starlette headers are case-insensitive
    return request.headers.get(HDR_IN_LOWER) or None


def get_trace_id(request: Request) -> Optional[str]:
    return getattr(request.state, "trace_id", None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to every request and echoes it in X-Request-Id"""

    async def dispatch(self, request: Request, call_next):
        trace_id = _get_req_id_from_headers(request) or str(uuid.uuid4())
        request.state.trace_id = trace_id

        response = await call_next(request)

        response.headers[HDR_OUT] = trace_id

        # let browsers read it (merge with existing value)
        expose = response.headers.get("Access-Control-Expose-Headers")
        if expose:
            items = {h.strip() for h in expose.split(",")}
            items.add(HDR_OUT)
            response.headers["Access-Control-Expose-Headers"] = ", ".join(sorted(items))
        else:
            response.headers["Access-Control-Expose-Headers"] = HDR_OUT
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One request_done line per request. Must sit inside RequestContextMiddleware."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            access_logger.info(
                "request_done",
                extra={
                    "trace_id": get_trace_id(request),
                    "method": request.method,
                    "path": request.url.path,
                    "status": getattr(response, "status_code", 500),
                    "latency_ms": elapsed_ms,
                },
            )
