# ============================================================================
# COMMITMENTS
# ============================================================================
# STATUS: Core - Commitment creation and record id derivation
# PURPOSE: Bind payloads to public hex digests
# CREATED: 19 OCT 2026
# ============================================================================
"""
Commitments

A commitment is the hex SHA-256 of a payload (for state and jobs, the
ciphertext bytes). Record ids are derived from (commitment, owner):

    id = hex(sha256(commitment + owner))[:32]

Ids are deterministic, so resubmitting the same ciphertext for the same
owner yields the same id. They are not checked for collisions or prior
existence.
"""

from typing import NamedTuple

from zkprime.crypto.hashing import sha256, to_hex, hash_commitment

RECORD_ID_LENGTH = 32


class Commitment(NamedTuple):
    commitment: str
    raw: bytes


def create_commitment(payload: bytes) -> Commitment:
    digest = sha256(payload)
    return Commitment(commitment=to_hex(digest), raw=digest)


def verify_commitment(payload: bytes, commitment_hex: str) -> bool:
    """Recompute and compare. Not constant-time; commitments are public."""
    return create_commitment(payload).commitment == commitment_hex


def derive_record_id(commitment: str, owner: str) -> str:
    return hash_commitment(commitment + owner)[:RECORD_ID_LENGTH]


__all__ = [
    "Commitment",
    "RECORD_ID_LENGTH",
    "create_commitment",
    "verify_commitment",
    "derive_record_id",
]
