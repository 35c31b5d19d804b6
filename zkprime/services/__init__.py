# ============================================================================
# SERVICES MODULE
# ============================================================================
# STATUS: Core - Business logic layer
# PURPOSE: Private state and confidential compute lifecycles
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Business logic between callers and infrastructure:
- PrivateStateService: schemas, encrypted state, proofs
- ConfidentialComputeService: job types, jobs, results
"""

from .commitments import Commitment, create_commitment, verify_commitment, derive_record_id
from .schema import validate_schema, serialize_record
from .private_state_service import PrivateStateService
from .compute_service import ConfidentialComputeService

__all__ = [
    "Commitment",
    "create_commitment",
    "verify_commitment",
    "derive_record_id",
    "validate_schema",
    "serialize_record",
    "PrivateStateService",
    "ConfidentialComputeService",
]
