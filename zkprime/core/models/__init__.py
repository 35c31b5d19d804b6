# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

All Pydantic models for the zkprime SDK.
"""

from zkprime.core.models.schema import SchemaField, PrivateSchema
from zkprime.core.models.envelope import EncryptedPayload
from zkprime.core.models.state import StateHandle, StateResult, ProofObject
from zkprime.core.models.job import JobDefinition, JobRecord, JobSubmission

__all__ = [
    # Schema
    "SchemaField",
    "PrivateSchema",
    # Envelope
    "EncryptedPayload",
    # State
    "StateHandle",
    "StateResult",
    "ProofObject",
    # Jobs
    "JobDefinition",
    "JobRecord",
    "JobSubmission",
]
