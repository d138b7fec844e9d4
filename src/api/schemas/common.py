"""
Common API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response produced by the error handlers."""

    error: str
    message: str
    type: str
    job_ids: Optional[List[str]] = None


class TimestampMixin(BaseModel):
    created_at: datetime
    updated_at: datetime
