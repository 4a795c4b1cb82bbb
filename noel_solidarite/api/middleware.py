"""FastAPI middleware for request tracing and latency metrics"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from noel_solidarite.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


def _inbound_request_id(request: Request) -> str | None:
    value = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if not value or len(value) > MAX_REQUEST_ID_LENGTH or not value.isprintable():
        return None
    return value


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id for log correlation.

    A well-formed X-Request-ID sent by a proxy is kept so the donation pages
    and the intake call they make can be followed across hops.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _inbound_request_id(request) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Observe request latency per route template"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)

        # Route template, not the raw path: one series for every donation id
        route = request.scope.get("route")
        request_duration_histogram.labels(
            method=request.method,
            endpoint=getattr(route, "path", "unmatched"),
            status=response.status_code,
        ).observe(time.perf_counter() - started)

        return response
