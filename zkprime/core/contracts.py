# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Core enums shared across the SDK
# PURPOSE: Status, field type and chain operation enums
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: JobStatus, FieldType, ChainOp, ENVELOPE_ALGORITHM
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the zkprime SDK.

These values cross three boundaries and must stay stable:
- Coordinator HTTP API (job status strings)
- On-chain instruction payloads (op names)
- Python (internal processing)
"""

from enum import Enum


# Only algorithm tag produced or accepted by the envelope codec
ENVELOPE_ALGORITHM = "AES-GCM"


# ============================================================================
# STATUS ENUMS
# ============================================================================

class JobStatus(str, Enum):
    """
    Confidential job lifecycle states.

    State transitions:
        PENDING -> RUNNING -> COMPLETED
                           -> FAILED

    Values are uppercase because the coordinator reports them that way.
    """
    PENDING = "PENDING"          # Submitted, not yet picked up
    RUNNING = "RUNNING"          # Coordinator is executing
    COMPLETED = "COMPLETED"      # Result available
    FAILED = "FAILED"            # Coordinator gave up

    def is_terminal(self) -> bool:
        """Check if this is a terminal state (no further transitions)."""
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


class FieldType(str, Enum):
    """Type tags allowed on private schema fields."""
    U64 = "u64"
    STRING = "string"
    BYTES = "bytes"
    BOOLEAN = "boolean"


class ChainOp(str, Enum):
    """Operation names carried in on-chain instruction data."""
    CREATE = "create"
    UPDATE = "update"
    SUBMIT_JOB = "submit_job"
    SUBMIT_PROOF = "submit_proof"


__all__ = ["JobStatus", "FieldType", "ChainOp", "ENVELOPE_ALGORITHM"]
