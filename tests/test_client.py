# ============================================================================
# CLIENT WIRING TESTS
# ============================================================================
# STATUS: Tests - ZkPrimeClient construction and teardown
# PURPOSE: Verify config merging, service wiring and registry ownership
# CREATED: 19 OCT 2026
# ============================================================================
"""
Client Wiring Tests

Covers:
1. Overrides merged onto config
2. Coordinator client created only when a URL is set
3. Registries are per client and cleared on close
4. End-to-end job flow through a mocked coordinator

Run with:
    pytest tests/test_client.py -v
"""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from zkprime import (
    ConfigError,
    JobStatus,
    Seed,
    ZkPrimeClient,
    ZkPrimeConfig,
    encrypt_payload,
    normalize_key,
)

SCHEMA = {"id": "s1", "name": "Balance", "fields": [{"name": "balance", "type": "u64"}]}


class TestConstruction:

    def test_overrides(self):
        client = ZkPrimeClient(rpc_endpoint="http://localhost:8899", program_id="P1")
        assert client.config.rpc_endpoint == "http://localhost:8899"
        assert client.config.program_id == "P1"
        assert client.coordinator is None

    def test_overrides_on_top_of_config(self):
        base = ZkPrimeConfig(rpc_endpoint="http://localhost:8899", program_id="P1")
        client = ZkPrimeClient(base, program_id="P2")
        assert client.config.rpc_endpoint == "http://localhost:8899"
        assert client.config.program_id == "P2"

    def test_unknown_option(self):
        with pytest.raises(ConfigError):
            ZkPrimeClient(rpcEndpoint="http://localhost:8899")

    def test_coordinator_created_from_url(self):
        client = ZkPrimeClient(proving_service_url="https://prover.test/")
        assert client.coordinator is not None
        assert client.coordinator.base_url == "https://prover.test"
        assert client.private_state.coordinator is client.coordinator
        assert client.confidential_compute.coordinator is client.coordinator

    def test_from_env(self):
        env = {"ZKPRIME_RPC_ENDPOINT": "http://localhost:8899"}
        with patch.dict("os.environ", env, clear=True):
            client = ZkPrimeClient.from_env(program_id="P9")
        assert client.config.rpc_endpoint == "http://localhost:8899"
        assert client.config.program_id == "P9"


class TestRegistryOwnership:

    def test_clients_do_not_share_schemas(self):
        first = ZkPrimeClient()
        second = ZkPrimeClient()
        first.private_state.define_schema(SCHEMA)
        assert first.registry.get_schema("s1") is not None
        assert second.registry.get_schema("s1") is None

    def test_aclose_clears_and_closes(self):
        client = ZkPrimeClient()
        client.private_state.define_schema(SCHEMA)
        client.confidential_compute.register_job_type({"name": "T"})

        with patch.object(client.connections, "close", new_callable=AsyncMock) as mock_close:
            asyncio.run(client.aclose())
            asyncio.run(client.aclose())

        assert client.closed
        assert client.registry.list_schemas() == []
        assert client.registry.list_job_types() == []
        mock_close.assert_awaited_once()

    def test_async_context_manager(self):
        async def use_client():
            async with ZkPrimeClient() as client:
                client.private_state.define_schema(SCHEMA)
            return client

        client = asyncio.run(use_client())
        assert client.closed
        assert client.registry.get_schema("s1") is None


class TestEndToEnd:

    def test_offline_job_flow(self):
        seed = Seed(b"strategy-seed-1")

        async def flow():
            async with ZkPrimeClient() as client:
                compute = client.confidential_compute
                compute.register_job_type({"name": "PrivateTradingStrategy", "version": "1.0"})
                submission = await compute.submit_job(
                    job_type="PrivateTradingStrategy",
                    owner="ownerA",
                    input={"symbol": "SOL"},
                    symmetric_key_seed=seed,
                )
                before = await compute.get_job_status(submission.job_id)
                compute.set_mock_result(
                    submission.job_id, encrypt_payload({"signal": "hold"}, normalize_key(seed))
                )
                after = await compute.get_job_status(submission.job_id)
                result = await compute.fetch_result(submission.job_id, seed)
                return before, after, result

        before, after, result = asyncio.run(flow())
        assert before == JobStatus.PENDING
        assert after == JobStatus.COMPLETED
        assert result == {"signal": "hold"}

    def test_coordinator_job_flow(self):
        seed = Seed(b"strategy-seed-1")
        jobs = {}

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/submit-job":
                body = json.loads(request.content)
                jobs[body["jobId"]] = body
                return httpx.Response(200, json={"accepted": True})
            job_id = request.url.path.rsplit("/", 1)[-1]
            if request.url.path.startswith("/job-status/"):
                return httpx.Response(200, json={"status": "COMPLETED" if job_id in jobs else "PENDING"})
            # echo the submitted envelope back as the result
            job = jobs[job_id]
            return httpx.Response(200, json={k: job[k] for k in ("iv", "tag", "ciphertext")})

        async def flow():
            async with ZkPrimeClient(
                proving_service_url="https://coordinator.test",
                coordinator_transport=httpx.MockTransport(handler),
            ) as client:
                compute = client.confidential_compute
                compute.register_job_type({"name": "PrivateTradingStrategy"})
                submission = await compute.submit_job(
                    job_type="PrivateTradingStrategy",
                    owner="ownerA",
                    input={"symbol": "SOL"},
                    symmetric_key_seed=seed,
                )
                status = await compute.get_job_status(submission.job_id)
                result = await compute.fetch_result(submission.job_id, seed)
                return submission, status, result

        submission, status, result = asyncio.run(flow())
        assert submission.coordinator_notified is True
        assert status == JobStatus.COMPLETED
        assert result == {"symbol": "SOL"}
