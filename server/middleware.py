"""HTTP middleware for the config writer."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

SLOW_REQUEST_THRESHOLD_MS = 1000
API_PREFIX = "/api/"
LOOPBACK_HOSTS = frozenset({"127.0.0.1", "::1", "localhost", "testclient"})
RESPONSE_TIME_HEADER = "X-Response-Time"


def is_loopback(host: str | None) -> bool:
    return host is None or host in LOOPBACK_HOSTS or host.startswith("127.")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and duration.

    API calls log at INFO and UI asset requests at DEBUG. Slow requests and
    4xx responses log at WARNING, 5xx at ERROR. Requests from other machines
    are flagged once per request, since the writer edits files in the
    user's home directory.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        client_host = request.client.host if request.client else None
        if not is_loopback(client_host):
            logger.warning(
                "Request from non-local client %s: %s %s",
                client_host, request.method, request.url.path,
            )

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.1f}ms"
        self._log_response(request, response.status_code, duration_ms)
        return response

    def _log_response(self, request: Request, status: int, duration_ms: float) -> None:
        path = request.url.path
        if status >= 500:
            level = logging.ERROR
        elif status >= 400 or duration_ms > SLOW_REQUEST_THRESHOLD_MS:
            level = logging.WARNING
        elif path.startswith(API_PREFIX) and request.method != "OPTIONS":
            level = logging.INFO
        else:
            level = logging.DEBUG

        slow = " SLOW" if duration_ms > SLOW_REQUEST_THRESHOLD_MS else ""
        logger.log(level, "%s %s -> %d (%.1fms)%s", request.method, path, status, duration_ms, slow)
