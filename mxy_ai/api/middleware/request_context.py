# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Request context middleware.

Every request gets a request id, taken from the X-Request-ID header when
the caller supplies one and generated otherwise. The id is bound into the
structlog context for the duration of the request and echoed back in the
response headers. Request counts and latencies are recorded in the
application's Prometheus registry.

Example:
    GET /health
    X-Request-ID: 4bf92f3577b34da6

    HTTP/1.1 200 OK
    X-Request-ID: 4bf92f3577b34da6
"""

import time
from uuid import uuid4

from fastapi import Request, Response
from prometheus_client import CollectorRegistry, Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from mxy_ai.utils.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Path label for requests that matched no route, keeps label cardinality bounded
UNMATCHED_PATH = "<unmatched>"


class RequestMetrics:
    """HTTP request metrics registered in one collector registry.

    Attributes:
        requests: Counter of requests by method, route and status code.
        latency: Histogram of request durations by method and route.
    """

    def __init__(self, registry: CollectorRegistry) -> None:
        self.requests = Counter(
            "http_requests",
            "Total HTTP requests handled",
            ["method", "path", "status"],
            registry=registry,
        )
        self.latency = Histogram(
            "http_request_duration_seconds",
            "HTTP request processing time",
            ["method", "path"],
            registry=registry,
        )

    def observe(self, method: str, path: str, status: int, duration: float) -> None:
        """Record one finished request."""
        self.requests.labels(method=method, path=path, status=str(status)).inc()
        self.latency.labels(method=method, path=path).observe(duration)


def route_path(request: Request) -> str:
    """Get the route template a request matched, e.g. ``/items/{id}``."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_PATH)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware binding a request id and recording request metrics.

    Attributes:
        _metrics: Metrics the middleware records into.
    """

    def __init__(self, app: ASGIApp, metrics: RequestMetrics) -> None:
        """Initialize request context middleware.

        Args:
            app: The ASGI application.
            metrics: Metrics the middleware records into.
        """
        super().__init__(app)
        self._metrics = metrics

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        bind_context(request_id=request_id)

        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            duration = time.perf_counter() - start
            self._metrics.observe(request.method, route_path(request), status, duration)
            logger.debug(
                "Request handled",
                method=request.method,
                path=request.url.path,
                status=status,
                duration_ms=round(duration * 1000, 2),
            )
            clear_context()
