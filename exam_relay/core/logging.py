# exam_relay/core/logging.py
import logging
import json
import sys
import re
from datetime import datetime, timezone
from typing import Any, Dict

# API keys must never reach the logs
REDACT_PATTERNS = [
    re.compile(r"([?&]key=)[^&\s\"']+", re.IGNORECASE),
    re.compile(r"(x-goog-api-key[\"']?\s*[:=]\s*[\"']?)[A-Za-z0-9\-_]+", re.IGNORECASE),
]


def _redact(text: str) -> str:
    if not isinstance(text, str):
        return text
    out = text
    for pat in REDACT_PATTERNS:
        out = pat.sub(r"\1***REDACTED***", out)
    return out


SAFE_ATTR_BLOCKLIST = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}


def utc_timestamp() -> str:
    """ISO 8601 UTC with milliseconds and a trailing Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line:
    {
      "ts": "2025-10-24T01:23:45.678Z",
      "ts_ms": 1698101025678,
      "level": "INFO",
      "logger": "access",
      "msg": "request_done",
      "req_id": "...",
      "method": "POST",
      "path": "/api/exams/generate",
      "status": 200,
      "latency_ms": 812,
      ... (extra)
    }
    """
    def format(self, record: logging.LogRecord) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "ts": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "ts_ms": int(now.timestamp() * 1000),
            "level": record.levelname,
            "logger": record.name,
        }

        payload["msg"] = _redact(record.getMessage())

        for k, v in record.__dict__.items():
            if k in SAFE_ATTR_BLOCKLIST:
                continue
            if k == "trace_id" and "req_id" not in payload:
                payload["req_id"] = v
            else:
                payload[k] = _redact(v)

        if record.exc_info:
            payload["exc_info"] = _redact(self.formatException(record.exc_info))

        try:
            return json.dumps(payload, ensure_ascii=False, default=str)
        except TypeError:
            safe = {k: (str(v) if not isinstance(v, (str, int, float, bool, type(None), dict, list)) else v)
                    for k, v in payload.items()}
            return json.dumps(safe, ensure_ascii=False)


def configure_logging(level: str = "INFO") -> None:
    """
    - Replace root and uvicorn handlers with one JSON handler
    - Write to stdout
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.addHandler(handler)
        lg.propagate = False
        lg.setLevel(level.upper())

    # httpx logs full request URLs at INFO
    logging.getLogger("httpx").setLevel(max(logging.WARNING, root.level))

