# ============================================================================
# PRIVATE STATE MODELS
# ============================================================================
# STATUS: Core model - State handles and proofs
# PURPOSE: Results of create/update state and proof generation
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: StateHandle, StateResult, ProofObject
# DEPENDENCIES: pydantic
# ============================================================================
"""
Private State Models

A StateHandle is a client-side reference to a private-state record. Its id
is derived locally from (commitment, owner); it is not read from chain.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from zkprime.core.models.envelope import EncryptedPayload


class StateHandle(BaseModel):
    """Reference to a private-state record."""

    id: str = Field(..., max_length=64, description="Derived state id (32 hex chars)")
    commitment: str = Field(..., description="Hex SHA-256 of the ciphertext")
    owner: str = Field(..., description="Owner public key (base58)")

    model_config = {"frozen": True}


class StateResult(BaseModel):
    """Handle plus the envelope the caller must keep to decrypt later."""

    state: StateHandle
    encrypted: EncryptedPayload

    model_config = {"frozen": True}


class ProofObject(BaseModel):
    """Opaque proof returned by the coordinator (or the local mock)."""

    proof: str
    public_inputs: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["StateHandle", "StateResult", "ProofObject"]
