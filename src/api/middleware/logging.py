"""
Request/Response logging middleware.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response

from src.config.logging import get_logger
from src.infrastructure.monitoring.metrics import record_api_request

logger = get_logger(__name__)


class LoggingMiddleware:
    """Request/Response logging middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        """Add request/response logging middleware."""

        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
            start_time = time.time()

            # Bound for every log line emitted while serving this request
            structlog.contextvars.bind_contextvars(request_id=request_id)
            request.state.request_id = request_id

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=str(request.query_params),
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                process_time = time.time() - start_time
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                    process_time=f"{process_time:.4f}s",
                )
                raise
            finally:
                structlog.contextvars.unbind_contextvars("request_id")

            process_time = time.time() - start_time
            route = request.scope.get("route")
            endpoint = getattr(route, "path", request.url.path)
            record_api_request(
                request.method, endpoint, response.status_code, process_time
            )

            logger.info(
                "Request completed",
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                process_time=f"{process_time:.4f}s",
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"
            return response
