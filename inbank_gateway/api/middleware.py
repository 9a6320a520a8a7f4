"""Request context middleware: request ID propagation and latency metrics"""

import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from inbank_gateway.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"


def route_label(request: Request) -> str:
    """Route template for metric labels, raw path when no route matched"""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag every request with an ID and record its latency.

    An incoming X-Request-ID (e.g. set by the frontend or a proxy) is kept,
    otherwise a new one is generated. The ID is echoed in the response.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        response = await call_next(request)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=route_label(request),
            status=response.status_code,
        ).observe(time.perf_counter() - start_time)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
