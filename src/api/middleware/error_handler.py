"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.config.logging import get_logger
from src.domain.exceptions.assignment_error import (
    AssignmentConflictError,
    AssignmentStoreError,
    JobStatusError,
)
from src.domain.exceptions.validation_error import (
    JobNotFoundError,
    TechnicianNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """Registers domain exception handlers on a FastAPI app."""

    def __init__(self, app: FastAPI):
        self.app = app
        add_error_handlers(app)


def _error(status_code: int, error: str, message: str, type_: str, **extra) -> JSONResponse:
    content = {"error": error, "message": message, "type": type_}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        if isinstance(exc, (JobNotFoundError, TechnicianNotFoundError)):
            logger.info("Resource not found", error=str(exc), path=request.url.path)
            return _error(404, "Not Found", str(exc), "not_found")
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return _error(400, "Validation Error", str(exc), "validation_error")

    @app.exception_handler(AssignmentConflictError)
    async def conflict_error_handler(request: Request, exc: AssignmentConflictError):
        logger.warning(
            "Assignment conflict",
            job_ids=exc.job_ids,
            reason=exc.reason,
            path=request.url.path,
        )
        return _error(
            409,
            "Assignment Conflict",
            str(exc),
            "assignment_conflict",
            job_ids=exc.job_ids,
        )

    @app.exception_handler(AssignmentStoreError)
    async def store_error_handler(request: Request, exc: AssignmentStoreError):
        logger.error("Assignment store error", error=str(exc), path=request.url.path)
        return _error(
            503,
            "Store Error",
            "The job store failed; no jobs were assigned",
            "store_error",
        )

    @app.exception_handler(JobStatusError)
    async def job_status_error_handler(request: Request, exc: JobStatusError):
        logger.warning("Job status error", error=str(exc), path=request.url.path)
        return _error(422, "Job Status Error", str(exc), "job_status_error")

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        return _error(500, "Database Error", "A database error occurred", "database_error")

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _error(exc.status_code, "HTTP Error", exc.detail, "http_error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return _error(
            500, "Internal Server Error", "An unexpected error occurred", "internal_error"
        )
