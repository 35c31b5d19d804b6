# ============================================================================
# PRIVATE STATE SERVICE
# ============================================================================
# STATUS: Core - Private state lifecycle
# PURPOSE: Schemas, encrypted state records, proofs
# CREATED: 19 OCT 2026
# ============================================================================
"""
Private State Service

Manages the private-state lifecycle:
- Define schemas (local registry only)
- Create / update state: encrypt, commit to the ciphertext, optionally
  record the commitment on-chain, derive a local state id
- Generate proofs via the coordinator (or a local mock)
- Submit proofs on-chain

Per record:
    SCHEMA_DEFINED -> STATE_CREATED -> STATE_UPDATED* -> proof generated
                   -> proof submitted
"""

import logging
from typing import Any, Dict, Optional, Union

from zkprime.core.config import ZkPrimeConfig
from zkprime.core.contracts import ChainOp
from zkprime.core.errors import ConfigError, CoordinatorError
from zkprime.core.logging import log_context
from zkprime.core.models import (
    EncryptedPayload,
    PrivateSchema,
    ProofObject,
    StateHandle,
    StateResult,
)
from zkprime.crypto import KeyMaterial, decrypt_payload, encrypt_payload, normalize_key
from zkprime.infrastructure.coordinator import CoordinatorClient, is_success
from zkprime.infrastructure.solana import (
    ConnectionCache,
    WalletAdapter,
    build_and_send_transaction,
    create_signer_instruction,
)
from zkprime.repositories import ClientRegistry
from .commitments import create_commitment, derive_record_id
from .schema import serialize_record, validate_schema

logger = logging.getLogger(__name__)


class PrivateStateService:
    """Service for private-state records."""

    def __init__(
        self,
        config: ZkPrimeConfig,
        registry: ClientRegistry,
        connections: ConnectionCache,
        coordinator: Optional[CoordinatorClient] = None,
    ):
        """
        Initialize private state service.

        Args:
            config: Client configuration
            registry: Client-owned schema registry
            connections: Client-owned RPC connection cache
            coordinator: Coordinator client when a proving service is configured
        """
        self.config = config
        self.registry = registry
        self.connections = connections
        self.coordinator = coordinator

    # ------------------------------------------------------------------
    # SCHEMAS
    # ------------------------------------------------------------------

    def define_schema(self, schema: Union[PrivateSchema, Dict[str, Any]]) -> PrivateSchema:
        """
        Define a schema locally. Re-defining an id replaces it.

        Raises:
            SchemaError if the schema is malformed
        """
        validated = validate_schema(schema)
        self.registry.put_schema(validated)
        logger.info(f"Defined schema {validated.id} ({len(validated.fields)} fields)")
        return validated

    def get_schema(self, schema_id: str) -> PrivateSchema:
        """
        Raises:
            NotFoundError if schema not defined
        """
        return self.registry.get_schema_or_raise(schema_id)

    def serialize_record(self, schema_id: str, record: Dict[str, Any]) -> bytes:
        """Encode a record restricted to the schema's fields."""
        return serialize_record(self.get_schema(schema_id), record)

    # ------------------------------------------------------------------
    # STATE
    # ------------------------------------------------------------------

    async def create_state(
        self,
        *,
        schema_id: str,
        owner: str,
        data: Any,
        symmetric_key_seed: KeyMaterial,
        wallet_adapter: Optional[WalletAdapter] = None,
    ) -> StateResult:
        """
        Encrypt data, commit to the ciphertext, and optionally record it on-chain.

        Args:
            schema_id: Previously defined schema
            owner: Owner public key (base58)
            data: JSON-serializable record
            symmetric_key_seed: Seed or key for the record
            wallet_adapter: Signer; falls back to config.wallet_adapter

        Returns:
            StateResult with the handle and the envelope to keep

        Raises:
            NotFoundError if schema not defined
            CryptoError on key problems
            RPCError if the on-chain submission fails
        """
        self.get_schema(schema_id)

        encrypted = encrypt_payload(data, normalize_key(symmetric_key_seed))
        commitment = create_commitment(encrypted.ciphertext).commitment
        state_id = derive_record_id(commitment, owner)

        with log_context(state_id=state_id, schema_id=schema_id, operation="create_state"):
            await self._send_if_configured(wallet_adapter, ChainOp.CREATE, commitment=commitment)
            logger.info(f"Created state {state_id} for owner {owner}")

        handle = StateHandle(id=state_id, commitment=commitment, owner=owner)
        return StateResult(state=handle, encrypted=encrypted)

    async def update_state(
        self,
        *,
        schema_id: str,
        owner: str,
        data: Any,
        symmetric_key_seed: KeyMaterial,
        previous_commitment: str,
        state_id: Optional[str] = None,
        wallet_adapter: Optional[WalletAdapter] = None,
    ) -> StateResult:
        """
        Re-encrypt data and commit to the new ciphertext.

        previous_commitment is forwarded to the program as-is; it is not
        checked against any stored record.

        Returns:
            StateResult; the handle keeps state_id when given,
            otherwise a fresh id is derived from the new commitment
        """
        self.get_schema(schema_id)

        encrypted = encrypt_payload(data, normalize_key(symmetric_key_seed))
        new_commitment = create_commitment(encrypted.ciphertext).commitment
        resolved_id = state_id or derive_record_id(new_commitment, owner)

        with log_context(state_id=resolved_id, schema_id=schema_id, operation="update_state"):
            await self._send_if_configured(
                wallet_adapter, ChainOp.UPDATE, prev=previous_commitment, next=new_commitment
            )
            logger.info(f"Updated state {resolved_id}")

        handle = StateHandle(id=resolved_id, commitment=new_commitment, owner=owner)
        return StateResult(state=handle, encrypted=encrypted)

    async def get_state_commitment(self, state_id: str) -> Optional[Dict[str, str]]:
        """
        Fetch the on-chain commitment for a state.

        Always returns None: without a program id there is nothing to query,
        and the program-specific account lookup is not implemented. Callers
        cannot tell the two cases apart.
        """
        if not self.config.has_program:
            return None
        # TODO: derive the state account address once the program's PDA seeds are published
        logger.debug(f"On-chain lookup for state {state_id} not implemented")
        return None

    def decrypt_with_seed(self, encrypted: EncryptedPayload, seed_or_key: KeyMaterial) -> Any:
        """Decrypt a previously produced envelope."""
        return decrypt_payload(encrypted, normalize_key(seed_or_key))

    # ------------------------------------------------------------------
    # PROOFS
    # ------------------------------------------------------------------

    async def generate_proof(
        self,
        *,
        state_id: str,
        encrypted_payload: EncryptedPayload,
        circuit: str,
    ) -> ProofObject:
        """
        Generate a proof for a circuit over an encrypted state.

        With a coordinator, POSTs the base64 envelope to /generate-proof.
        Without one, returns a deterministic mock proof. Mock proofs carry no
        cryptographic meaning and must never reach a real verifier.

        Raises:
            CoordinatorError if the coordinator does not answer 2xx with a
            string proof and an object of public inputs
        """
        with log_context(state_id=state_id, operation="generate_proof"):
            if self.coordinator is None:
                logger.warning(f"No proving service configured; returning mock proof for {state_id}")
                return ProofObject(proof=f"mock-proof-for-{state_id}", public_inputs={"mock": True})

            wire = encrypted_payload.to_wire()
            body = {
                "stateId": state_id,
                "circuit": circuit,
                "ciphertext": wire["ciphertext"],
                "iv": wire["iv"],
                "tag": wire["tag"],
            }
            status, resp = await self.coordinator.generate_proof(body)
            if not is_success(status):
                raise CoordinatorError(f"prover error {status}", status_code=status)

            proof = resp.get("proof")
            public_inputs = resp.get("publicInputs") or {}
            if not isinstance(proof, str) or not proof or not isinstance(public_inputs, dict):
                raise CoordinatorError("prover returned a malformed proof response", status_code=status)

            logger.info(f"Proof generated for circuit {circuit}")
            return ProofObject(proof=proof, public_inputs=public_inputs)

    async def submit_proof(
        self,
        *,
        state_id: str,
        proof: ProofObject,
        wallet_adapter: Optional[WalletAdapter] = None,
    ) -> str:
        """
        Submit a proof to the private-state program.

        Returns:
            Transaction signature

        Raises:
            ConfigError if program id or wallet adapter is missing
            RPCError if sending fails
        """
        if not self.config.has_program:
            raise ConfigError("programId not configured for submitProof", option="program_id")
        wallet = wallet_adapter or self.config.wallet_adapter
        if wallet is None:
            raise ConfigError("walletAdapter required to submit proof", option="wallet_adapter")

        with log_context(state_id=state_id, operation="submit_proof"):
            ix = create_signer_instruction(
                self.config.program_id, wallet, ChainOp.SUBMIT_PROOF,
                stateId=state_id, proof=proof.proof,
            )
            return await build_and_send_transaction(
                self.connections.get(self.config.rpc_endpoint), wallet, [ix]
            )

    # ------------------------------------------------------------------
    # INTERNAL
    # ------------------------------------------------------------------

    async def _send_if_configured(
        self,
        wallet_adapter: Optional[WalletAdapter],
        op: ChainOp,
        **fields: Any,
    ) -> Optional[str]:
        """Send one signer instruction when program id and wallet are both present."""
        wallet = wallet_adapter or self.config.wallet_adapter
        if not self.config.has_program or wallet is None:
            return None

        ix = create_signer_instruction(self.config.program_id, wallet, op, **fields)
        return await build_and_send_transaction(
            self.connections.get(self.config.rpc_endpoint), wallet, [ix]
        )


__all__ = ["PrivateStateService"]
