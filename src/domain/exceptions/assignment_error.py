"""
Assignment-related domain exceptions.
"""

from typing import Iterable


class AssignmentError(Exception):
    """Base exception for route plan commit failures."""

    pass


class AssignmentConflictError(AssignmentError):
    """Raised when plan jobs are no longer free to assign.

    Nothing has been written when this is raised; callers are expected to
    reload the job pool and regenerate the plan.
    """

    def __init__(self, job_ids: Iterable, reason: str = "no longer unassigned"):
        self.job_ids = [str(job_id) for job_id in job_ids]
        self.reason = reason
        super().__init__(
            f"Assignment conflict, {len(self.job_ids)} job(s) {reason}: "
            f"{', '.join(self.job_ids)}"
        )


class AssignmentStoreError(AssignmentError):
    """Raised when the job store fails mid-commit (after rollback)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Job store failure during commit: {message}")


class JobStatusError(Exception):
    """Raised when a job status transition is not allowed."""

    def __init__(self, current_status: str, requested_status: str):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot move job from '{current_status}' to '{requested_status}'"
        )
