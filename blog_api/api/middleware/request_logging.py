"""
Request Logging Middleware

Runs every request inside request_log_context, so each log line written
while handling it carries the request id, method and path.

The id is taken from the X-Request-ID header when the caller sends one,
otherwise generated, and echoed back on the response.

Usage:
======
    from blog_api.api.middleware.request_logging import setup_request_logging

    app = FastAPI()
    setup_request_logging(app)
"""

import time

from fastapi import FastAPI, Request

from blog_api.shared.core.logging import logger, new_request_id, request_log_context

REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_logging(app: FastAPI) -> None:
    """Register the request logging middleware on the app."""

    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        with request_log_context(request_id, method=request.method, path=request.url.path):
            started = time.perf_counter()
            response = await call_next(request)
            logger.info(
                "Request handled",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
