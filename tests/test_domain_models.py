# ============================================================================
# DOMAIN MODEL TESTS
# ============================================================================
# STATUS: Tests - Enums, models, state transitions, configuration
# PURPOSE: Verify JobStatus, JobRecord, envelopes and ZkPrimeConfig
# CREATED: 19 OCT 2026
# ============================================================================
"""
Domain Model Tests

Unit tests for the model layer:
- Enums: JobStatus, FieldType, ChainOp
- Models: JobRecord transitions, EncryptedPayload wire form, StateHandle
- Config: defaults, env loading, merge_config

Run with:
    pytest tests/test_domain_models.py -v
"""

import base64
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from zkprime.core.config import DEFAULT_RPC_ENDPOINT, ZkPrimeConfig, merge_config
from zkprime.core.contracts import ChainOp, FieldType, JobStatus
from zkprime.core.errors import ConfigError, CryptoError
from zkprime.core.models import EncryptedPayload, JobRecord, StateHandle


# ============================================================================
# ENUM TESTS
# ============================================================================

class TestJobStatus:

    def test_values(self):
        assert JobStatus.PENDING.value == "PENDING"
        assert JobStatus.RUNNING.value == "RUNNING"
        assert JobStatus.COMPLETED.value == "COMPLETED"
        assert JobStatus.FAILED.value == "FAILED"

    def test_terminal(self):
        assert JobStatus.COMPLETED.is_terminal()
        assert JobStatus.FAILED.is_terminal()
        assert not JobStatus.PENDING.is_terminal()
        assert not JobStatus.RUNNING.is_terminal()


class TestFieldTypeAndChainOp:

    def test_field_types(self):
        assert {t.value for t in FieldType} == {"u64", "string", "bytes", "boolean"}

    def test_chain_ops(self):
        assert ChainOp("create") is ChainOp.CREATE
        assert ChainOp.SUBMIT_PROOF.value == "submit_proof"


# ============================================================================
# JOB RECORD TESTS
# ============================================================================

class TestJobRecord:

    def _record(self, **kwargs) -> JobRecord:
        return JobRecord(id="a" * 32, owner="ownerA", job_type="T", commitment="ab", **kwargs)

    def test_defaults(self):
        record = self._record()
        assert record.status == JobStatus.PENDING
        assert record.created_at.tzinfo is not None
        assert record.completed_at is None
        assert not record.is_terminal

    @pytest.mark.parametrize("current,target,allowed", [
        (JobStatus.PENDING, JobStatus.RUNNING, True),
        (JobStatus.PENDING, JobStatus.COMPLETED, True),
        (JobStatus.PENDING, JobStatus.FAILED, False),
        (JobStatus.RUNNING, JobStatus.COMPLETED, True),
        (JobStatus.RUNNING, JobStatus.FAILED, True),
        (JobStatus.RUNNING, JobStatus.PENDING, False),
        (JobStatus.COMPLETED, JobStatus.RUNNING, False),
        (JobStatus.FAILED, JobStatus.COMPLETED, False),
        (JobStatus.COMPLETED, JobStatus.COMPLETED, True),
    ])
    def test_transitions(self, current, target, allowed):
        assert self._record(status=current).can_transition_to(target) is allowed

    def test_mark_completed_sets_result(self):
        record = self._record()
        record.mark_completed(result_ref="cmVm")
        assert record.status == JobStatus.COMPLETED
        assert record.result_ref == "cmVm"
        assert record.completed_at is not None
        assert record.is_terminal

    def test_completing_twice_keeps_completed(self):
        record = self._record(status=JobStatus.COMPLETED)
        record.mark_completed(result_ref="cmVm")
        assert record.status == JobStatus.COMPLETED
        assert record.result_ref == "cmVm"

    def test_failed_job_cannot_complete(self):
        record = self._record(status=JobStatus.FAILED)
        with pytest.raises(ValueError):
            record.mark_completed(result_ref="cmVm")
        assert record.status == JobStatus.FAILED
        assert record.result_ref is None


# ============================================================================
# ENVELOPE / STATE MODEL TESTS
# ============================================================================

class TestEncryptedPayload:

    def test_wire_form_is_base64(self):
        envelope = EncryptedPayload(iv=b"\x01" * 12, ciphertext=b"\x02\x03", tag=b"\x04" * 16)
        wire = envelope.to_wire()
        assert set(wire) == {"iv", "tag", "ciphertext"}
        assert base64.b64decode(wire["ciphertext"]) == b"\x02\x03"
        assert EncryptedPayload.from_wire(wire) == envelope

    @pytest.mark.parametrize("wire", [
        {},
        {"iv": "AAAA", "tag": "AAAA"},
        {"iv": "AAAA", "tag": "AAAA", "ciphertext": "***"},
        {"iv": None, "tag": "AAAA", "ciphertext": "AAAA"},
    ])
    def test_malformed_wire(self, wire):
        with pytest.raises(CryptoError):
            EncryptedPayload.from_wire(wire)

    def test_frozen(self):
        envelope = EncryptedPayload(iv=b"\x01" * 12, ciphertext=b"", tag=b"\x04" * 16)
        with pytest.raises(ValidationError):
            envelope.alg = "other"

    def test_state_handle_frozen(self):
        handle = StateHandle(id="a" * 32, commitment="ab", owner="ownerA")
        with pytest.raises(ValidationError):
            handle.id = "b" * 32


# ============================================================================
# CONFIG TESTS
# ============================================================================

class TestConfig:

    def test_defaults(self):
        config = ZkPrimeConfig()
        assert config.rpc_endpoint == DEFAULT_RPC_ENDPOINT
        assert not config.has_program
        assert not config.has_compute_program
        assert not config.has_coordinator
        assert config.coordinator_timeout_seconds == 30.0

    def test_empty_rpc_endpoint_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            ZkPrimeConfig(rpc_endpoint="")
        assert exc_info.value.option == "rpc_endpoint"

    def test_coordinator_url_trailing_slash_stripped(self):
        config = ZkPrimeConfig(proving_service_url="https://prover.test/")
        assert config.proving_service_url == "https://prover.test"

    def test_merge_ignores_none(self):
        base = ZkPrimeConfig(program_id="P1")
        merged = merge_config(base, program_id=None, compute_program_id="C1")
        assert merged.program_id == "P1"
        assert merged.compute_program_id == "C1"
        assert base.compute_program_id is None

    def test_merge_rejects_unknown_option(self):
        with pytest.raises(ConfigError, match="programID"):
            merge_config(programID="P1")

    def test_from_env(self):
        env = {
            "ZKPRIME_RPC_ENDPOINT": "http://localhost:8899",
            "ZKPRIME_PROGRAM_ID": "P1",
            "ZKPRIME_COMPUTE_PROGRAM_ID": "",
            "ZKPRIME_PROVING_SERVICE_URL": "http://localhost:8080/",
            "ZKPRIME_COORDINATOR_TIMEOUT": "5",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ZkPrimeConfig.from_env()

        assert config.rpc_endpoint == "http://localhost:8899"
        assert config.program_id == "P1"
        assert config.compute_program_id is None
        assert config.proving_service_url == "http://localhost:8080"
        assert config.coordinator_timeout_seconds == 5.0

    def test_from_env_bad_timeout(self):
        with patch.dict("os.environ", {"ZKPRIME_COORDINATOR_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ConfigError):
                ZkPrimeConfig.from_env()
