import json
import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "x-request-id"

_CONTEXT_FIELDS = {
    "request_id": "request_id",
    "method": "method",
    "path": "path",
    "status_code": "status",
    "duration_ms": "duration_ms",
}


class RequestContextFilter(logging.Filter):
    """Give every record a request_id so formatters can rely on it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


class JsonRequestLogFormatter(logging.Formatter):
    """Single-line JSON log records, with request context when present."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr, key in _CONTEXT_FIELDS.items():
            if hasattr(record, attr):
                base[key] = getattr(record, attr)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


class RequestIdAndTimingMiddleware(BaseHTTPMiddleware):
    """Assign a request id, time the request and emit one access log line."""

    def __init__(self, app, logger_name: str = "access"):
        super().__init__(app)
        self.access_logger = logging.getLogger(f"state_law_guidance.{logger_name}")
        if not any(isinstance(f, RequestContextFilter) for f in self.access_logger.filters):
            self.access_logger.addFilter(RequestContextFilter())

    async def dispatch(self, request: Request, call_next: Callable):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            self._emit_log(
                level=logging.ERROR,
                message=f"Unhandled error: {exc}",
                request=request,
                status_code=500,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        self._emit_log(
            level=logging.INFO,
            message="request_completed",
            request=request,
            status_code=response.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        return response

    def _emit_log(
        self, level: int, message: str, request: Request, status_code: int, duration_ms: int
    ) -> None:
        extra = {
            "request_id": getattr(request.state, "request_id", "-"),
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        }
        self.access_logger.log(level, message, extra=extra)
