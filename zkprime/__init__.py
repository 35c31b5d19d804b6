# ============================================================================
# ZKPRIME SDK
# ============================================================================
# STATUS: Package exports
# PURPOSE: Public API of the zkprime SDK
# CREATED: 19 OCT 2026
# ============================================================================
"""
zkprime - client SDK for private state and confidential compute on Solana.

    from zkprime import ZkPrimeClient, Seed

    async with ZkPrimeClient(rpc_endpoint="https://api.devnet.solana.com") as client:
        client.confidential_compute.register_job_type({"name": "score"})
        submission = await client.confidential_compute.submit_job(
            job_type="score",
            owner="owner1",
            input={"user": "alice"},
            symmetric_key_seed=Seed(b"job-seed"),
        )
"""

from zkprime.__version__ import __version__
from zkprime.client import ZkPrimeClient
from zkprime.core import (
    JobStatus,
    FieldType,
    ChainOp,
    ZkPrimeError,
    ConfigError,
    SchemaError,
    CryptoError,
    NotFoundError,
    RPCError,
    CoordinatorError,
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
from zkprime.core.config import ZkPrimeConfig, merge_config
from zkprime.crypto import (
    Seed,
    SymmetricKey,
    sha256,
    to_hex,
    hash_commitment,
    derive_key_from_seed,
    normalize_key,
    encrypt_payload,
    decrypt_payload,
)
from zkprime.infrastructure.solana import WalletAdapter, KeypairWalletAdapter
from zkprime.services import (
    PrivateStateService,
    ConfidentialComputeService,
    create_commitment,
    verify_commitment,
)

__all__ = [
    "__version__",
    "ZkPrimeClient",
    "ZkPrimeConfig",
    "merge_config",
    # Enums
    "JobStatus",
    "FieldType",
    "ChainOp",
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
    # Crypto
    "Seed",
    "SymmetricKey",
    "sha256",
    "to_hex",
    "hash_commitment",
    "derive_key_from_seed",
    "normalize_key",
    "encrypt_payload",
    "decrypt_payload",
    # Services
    "PrivateStateService",
    "ConfidentialComputeService",
    "create_commitment",
    "verify_commitment",
    # Wallets
    "WalletAdapter",
    "KeypairWalletAdapter",
]
