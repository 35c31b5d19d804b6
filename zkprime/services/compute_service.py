# ============================================================================
# CONFIDENTIAL COMPUTE SERVICE
# ============================================================================
# STATUS: Core - Confidential job lifecycle
# PURPOSE: Register job types, submit encrypted jobs, poll, fetch results
# CREATED: 19 OCT 2026
# ============================================================================
"""
Confidential Compute Service

Manages confidential job lifecycle:
- Register job types
- Submit encrypted jobs (on-chain and/or coordinator, or mock store)
- Poll job status
- Fetch and decrypt results

Two independent submission paths:
    on-chain      when compute_program_id and a wallet adapter are present
    coordinator   when proving_service_url is set (best-effort, never raises)
    mock store    when no coordinator is set (offline dev and tests)

A job may therefore exist on-chain with no coordinator record, or the
other way round.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from zkprime.core.config import ZkPrimeConfig
from zkprime.core.contracts import ChainOp, JobStatus
from zkprime.core.errors import CryptoError, NotFoundError, SchemaError
from zkprime.core.logging import log_context
from zkprime.core.models import (
    EncryptedPayload,
    JobDefinition,
    JobRecord,
    JobSubmission,
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

logger = logging.getLogger(__name__)


class ConfidentialComputeService:
    """Service for confidential compute jobs."""

    def __init__(
        self,
        config: ZkPrimeConfig,
        registry: ClientRegistry,
        connections: ConnectionCache,
        coordinator: Optional[CoordinatorClient] = None,
    ):
        self.config = config
        self.registry = registry
        self.connections = connections
        self.coordinator = coordinator

    # ------------------------------------------------------------------
    # JOB TYPES
    # ------------------------------------------------------------------

    def register_job_type(self, definition: Union[JobDefinition, Dict[str, Any]]) -> JobDefinition:
        """
        Register (or replace) a job type.

        Raises:
            SchemaError if the definition has no name
        """
        if not isinstance(definition, JobDefinition):
            try:
                definition = JobDefinition.model_validate(definition)
            except ValidationError as e:
                raise SchemaError("job name required") from e
        if not definition.name:
            raise SchemaError("job name required")

        self.registry.put_job_type(definition)
        logger.info(f"Registered job type {definition.name} (version={definition.version})")
        return definition

    def get_job_type(self, name: str) -> JobDefinition:
        """
        Raises:
            NotFoundError if job type not registered
        """
        definition = self.registry.get_job_type(name)
        if definition is None:
            raise NotFoundError(f"job type {name} not registered", entity_id=name)
        return definition

    # ------------------------------------------------------------------
    # SUBMISSION
    # ------------------------------------------------------------------

    async def submit_job(
        self,
        *,
        job_type: str,
        owner: str,
        input: Any,
        symmetric_key_seed: KeyMaterial,
        wallet_adapter: Optional[WalletAdapter] = None,
    ) -> JobSubmission:
        """
        Encrypt and submit a job.

        Args:
            job_type: Registered job type name
            owner: Owner public key (base58)
            input: JSON-serializable job input
            symmetric_key_seed: Seed or key for input and result
            wallet_adapter: Signer; falls back to config.wallet_adapter

        Returns:
            JobSubmission; coordinator_notified reports the best-effort
            coordinator POST (None when no coordinator is configured)

        Raises:
            NotFoundError if job type not registered (before any work)
            CryptoError on key problems
            RPCError if the on-chain submission fails
        """
        self.get_job_type(job_type)

        encrypted = encrypt_payload(input, normalize_key(symmetric_key_seed))
        commitment = create_commitment(encrypted.ciphertext).commitment
        job_id = derive_record_id(commitment, owner)
        submission = JobSubmission(job_id=job_id)

        with log_context(job_id=job_id, owner=owner, operation="submit_job"):
            wallet = wallet_adapter or self.config.wallet_adapter
            if self.config.has_compute_program and wallet is not None:
                ix = create_signer_instruction(
                    self.config.compute_program_id, wallet, ChainOp.SUBMIT_JOB,
                    jobId=job_id, commitment=commitment, type=job_type,
                )
                submission.tx_sig = await build_and_send_transaction(
                    self.connections.get(self.config.rpc_endpoint), wallet, [ix]
                )

            if self.coordinator is not None:
                await self._notify_coordinator(submission, job_type, owner, encrypted)
            else:
                self.registry.save_job(JobRecord(
                    id=job_id,
                    owner=owner,
                    job_type=job_type,
                    commitment=commitment,
                    status=JobStatus.PENDING,
                ))
                logger.info(f"Recorded mock job {job_id} ({job_type})")

        return submission

    async def _notify_coordinator(
        self,
        submission: JobSubmission,
        job_type: str,
        owner: str,
        encrypted: EncryptedPayload,
    ) -> None:
        """POST the envelope to the coordinator. Never raises; outcome goes on the submission."""
        body = {
            "jobId": submission.job_id,
            "jobType": job_type,
            "owner": owner,
            **encrypted.to_wire(),
        }
        status, resp = await self.coordinator.submit_job(body)
        if is_success(status):
            submission.coordinator_notified = True
            logger.info(f"Coordinator accepted job {submission.job_id}")
            return

        detail = resp.get("error") or resp.get("detail") or ""
        submission.coordinator_notified = False
        submission.coordinator_error = f"coordinator returned {status}: {detail}".rstrip(": ")
        logger.warning(f"Coordinator notification failed for job {submission.job_id}: {submission.coordinator_error}")

    # ------------------------------------------------------------------
    # STATUS & RESULTS
    # ------------------------------------------------------------------

    async def get_job_status(self, job_id: str) -> JobStatus:
        """
        Get job status, preferring the coordinator.

        Any coordinator failure (network, non-2xx, empty or unparseable
        body, unknown status) falls back to the mock store. A 2xx object
        without a status field reads as PENDING.

        Raises:
            NotFoundError if neither the coordinator nor the mock store knows the job
        """
        if self.coordinator is not None:
            status, resp = await self.coordinator.get_job_status(job_id)
            if is_success(status) and resp:
                try:
                    return JobStatus(resp.get("status") or JobStatus.PENDING.value)
                except ValueError:
                    logger.warning(f"Coordinator reported unknown status {resp.get('status')!r} for {job_id}")
            elif is_success(status):
                logger.debug(f"Coordinator status lookup for {job_id} returned an empty body; using mock store")
            else:
                logger.debug(f"Coordinator status lookup for {job_id} returned {status}; using mock store")

        record = self.registry.get_job(job_id)
        if record is None:
            raise NotFoundError("job not found", entity_id=job_id)
        return record.status

    async def fetch_result(self, job_id: str, symmetric_key_seed: KeyMaterial) -> Any:
        """
        Fetch the encrypted result and decrypt it locally.

        Both paths resolve the key with normalize_key, matching submit_job.

        Raises:
            NotFoundError if the result is not available
            CryptoError if decryption fails
        """
        key = normalize_key(symmetric_key_seed)

        if self.coordinator is not None:
            status, resp = await self.coordinator.get_job_result(job_id)
            if not is_success(status):
                raise NotFoundError("result not found", entity_id=job_id)
            return decrypt_payload(EncryptedPayload.from_wire(resp), key)

        record = self.registry.get_job(job_id)
        if record is None or not record.result_ref:
            raise NotFoundError("result not available", entity_id=job_id)
        return decrypt_payload(_decode_result_ref(record.result_ref), key)

    def set_mock_result(self, job_id: str, encrypted_payload: EncryptedPayload) -> JobRecord:
        """
        Attach a result to a mock job and mark it COMPLETED.

        For tests and offline development only.

        Raises:
            NotFoundError if the job is not in the mock store
        """
        record = self.registry.get_job(job_id)
        if record is None:
            raise NotFoundError("job not found", entity_id=job_id)

        record.mark_completed(result_ref=_encode_result_ref(encrypted_payload))
        self.registry.save_job(record)
        logger.info(f"Mock result set for job {job_id}")
        return record


def _encode_result_ref(payload: EncryptedPayload) -> str:
    """Envelope -> base64(JSON of its wire form)."""
    return base64.b64encode(json.dumps(payload.to_wire()).encode("utf-8")).decode("ascii")


def _decode_result_ref(result_ref: str) -> EncryptedPayload:
    try:
        wire = json.loads(base64.b64decode(result_ref).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise CryptoError(f"Malformed result reference: {e}") from e
    return EncryptedPayload.from_wire(wire)


__all__ = ["ConfidentialComputeService"]
