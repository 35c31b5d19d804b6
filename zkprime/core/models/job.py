# ============================================================================
# CONFIDENTIAL JOB MODELS
# ============================================================================
# STATUS: Core model - Job definitions, records and submissions
# PURPOSE: Track one submitted confidential job
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: JobDefinition, JobRecord, JobSubmission
# DEPENDENCIES: pydantic
# ============================================================================
"""
Confidential Job Models

A JobDefinition is registered job-type metadata. A JobRecord tracks one
submission on the offline (mock) path; when a coordinator is configured the
SDK keeps no record and the coordinator owns status.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from zkprime.core.contracts import JobStatus


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JobDefinition(BaseModel):
    """Registered job-type metadata, keyed by name."""

    name: str = Field(..., description="Unique job type name")
    version: Optional[str] = None
    description: Optional[str] = None
    input_schema: Optional[Dict[str, Any]] = None
    output_schema: Optional[Dict[str, Any]] = None


class JobRecord(BaseModel):
    """
    One confidential job held in the in-memory mock store.

    Lifecycle:
        1. Created with status=PENDING by submit_job (no coordinator)
        2. Completed with an attached result by set_mock_result
        RUNNING and FAILED are coordinator-only statuses; the mock path
        never enters them
    """

    id: str = Field(..., max_length=64, description="Derived job id (32 hex chars)")
    owner: str
    job_type: str
    commitment: str
    status: JobStatus = Field(default=JobStatus.PENDING)
    created_at: datetime = Field(default_factory=_utc_now)
    completed_at: Optional[datetime] = None

    # Base64 JSON of the encrypted result envelope
    result_ref: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        """Check if job is in a terminal state."""
        return self.status.is_terminal()

    def can_transition_to(self, new_status: JobStatus) -> bool:
        """
        Validate if a status transition is allowed.

        Valid transitions:
            PENDING -> RUNNING, COMPLETED
            RUNNING -> COMPLETED, FAILED
            COMPLETED, FAILED -> (none, terminal)

        PENDING -> COMPLETED covers the mock path, where nothing ever
        reports RUNNING.
        """
        if self.status == new_status:
            return True

        allowed = {
            JobStatus.PENDING: {JobStatus.RUNNING, JobStatus.COMPLETED},
            JobStatus.RUNNING: {JobStatus.COMPLETED, JobStatus.FAILED},
            JobStatus.COMPLETED: set(),
            JobStatus.FAILED: set(),
        }

        return new_status in allowed.get(self.status, set())

    def mark_completed(self, result_ref: Optional[str] = None) -> None:
        """Mark job as completed, attaching the result reference."""
        if not self.can_transition_to(JobStatus.COMPLETED):
            raise ValueError(f"Cannot transition from {self.status} to COMPLETED")
        self.status = JobStatus.COMPLETED
        self.completed_at = _utc_now()
        if result_ref:
            self.result_ref = result_ref


class JobSubmission(BaseModel):
    """
    Outcome of submit_job.

    coordinator_notified is None when no coordinator is configured,
    True when the coordinator accepted the payload, and False when the
    best-effort notification failed (coordinator_error says why).
    """

    job_id: str
    tx_sig: Optional[str] = None
    coordinator_notified: Optional[bool] = None
    coordinator_error: Optional[str] = None


__all__ = ["JobDefinition", "JobRecord", "JobSubmission"]
