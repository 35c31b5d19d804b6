# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export core contracts, errors and models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from zkprime.core.contracts import JobStatus, FieldType, ChainOp, ENVELOPE_ALGORITHM
from zkprime.core.errors import (
    ZkPrimeError,
    ConfigError,
    SchemaError,
    CryptoError,
    NotFoundError,
    RPCError,
    CoordinatorError,
)
from zkprime.core.models import (
    SchemaField,
    PrivateSchema,
    EncryptedPayload,
    StateHandle,
    StateResult,
    ProofObject,
    JobDefinition,
    JobRecord,
    JobSubmission,
)

__all__ = [
    # Enums
    "JobStatus",
    "FieldType",
    "ChainOp",
    "ENVELOPE_ALGORITHM",
    # Errors
    "ZkPrimeError",
    "ConfigError",
    "SchemaError",
    "CryptoError",
    "NotFoundError",
    "RPCError",
    "CoordinatorError",
    # Models
    "SchemaField",
    "PrivateSchema",
    "EncryptedPayload",
    "StateHandle",
    "StateResult",
    "ProofObject",
    "JobDefinition",
    "JobRecord",
    "JobSubmission",
]
