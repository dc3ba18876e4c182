"""Request ids, response timing and per-status request counters."""
import time
import uuid
from collections import Counter
from contextvars import ContextVar
from typing import Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from config import logger

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# "2xx" / "4xx" / "5xx" -> count, since process start
_status_counts: Counter = Counter()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id so that the logs of concurrent fact-checks
    can be told apart. The id is taken from the client's X-Request-ID header
    when present and echoed back along with the handling time.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request_id_var.set(request_id)
        start_time = time.perf_counter()

        logger.debug(
            "Request started",
            extra={"request_id": request_id, "method": request.method, "path": request.url.path},
        )

        try:
            response = await call_next(request)
        except Exception:
            _status_counts["5xx"] += 1
            logger.exception("Request failed", extra={"request_id": request_id, "path": request.url.path})
            raise

        duration = time.perf_counter() - start_time
        _status_counts[f"{response.status_code // 100}xx"] += 1

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} in {duration * 1000:.1f}ms",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
            },
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = f"{duration:.3f}s"
        return response


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def request_counts() -> Dict[str, int]:
    """Requests served so far, grouped by status class."""
    return dict(_status_counts)
