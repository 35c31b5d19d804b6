#!/usr/bin/env python3
# ============================================================================
# CLI JOB SUBMISSION TOOL
# ============================================================================
# STATUS: Tool - Submit a confidential job and poll it
# PURPOSE: Exercise the compute flow without writing an integration
# CREATED: 19 OCT 2026
# ============================================================================
"""
Submit an encrypted confidential job.

Simulates what an integrating application does:
1. Registers the job type
2. Encrypts the input and submits it (on-chain and/or coordinator, or mock)
3. Polls status
4. Fetches and decrypts the result when available

Usage:
    # Offline (mock store): submit, complete locally, fetch result
    python tools/submit_job.py PrivateTradingStrategy '{"symbol": "SOL", "lookback": 24}' --complete-mock

    # Against a coordinator
    ZKPRIME_PROVING_SERVICE_URL=https://coordinator.example \\
        python tools/submit_job.py PrivateTradingStrategy '{"symbol": "SOL"}' --poll

    # On-chain submission with a throwaway devnet keypair
    ZKPRIME_RPC_ENDPOINT=https://api.devnet.solana.com ZKPRIME_COMPUTE_PROGRAM_ID=<id> \\
        python tools/submit_job.py PrivateTradingStrategy '{"symbol": "SOL"}' --sign

Environment:
    ZKPRIME_RPC_ENDPOINT, ZKPRIME_COMPUTE_PROGRAM_ID, ZKPRIME_PROVING_SERVICE_URL
"""

import argparse
import asyncio
import json
import os
import sys
import time

from solders.keypair import Keypair

from zkprime import (
    KeypairWalletAdapter,
    NotFoundError,
    Seed,
    ZkPrimeClient,
    encrypt_payload,
    normalize_key,
)
from zkprime.core.logging import configure_logging


async def poll_status(client: ZkPrimeClient, job_id: str, timeout: int, interval: float) -> str:
    """Poll job status until terminal or timeout."""
    print(f"\nPolling job {job_id} (timeout {timeout}s)...")
    start = time.time()
    status = None
    while time.time() - start < timeout:
        status = await client.confidential_compute.get_job_status(job_id)
        elapsed = int(time.time() - start)
        print(f"  [{elapsed:3d}s] status={status.value}")
        if status.is_terminal():
            break
        await asyncio.sleep(interval)
    return status.value if status else "UNKNOWN"


async def run(args: argparse.Namespace) -> int:
    try:
        job_input = json.loads(args.input)
    except json.JSONDecodeError as e:
        print(f"Invalid JSON input: {e}")
        return 2

    wallet = KeypairWalletAdapter(Keypair()) if args.sign else None
    owner = str(wallet.public_key) if wallet else args.owner
    seed = Seed(args.seed.encode("utf-8"))

    async with ZkPrimeClient.from_env(wallet_adapter=wallet) as client:
        client.confidential_compute.register_job_type({
            "name": args.job_type,
            "version": args.job_version,
        })

        submission = await client.confidential_compute.submit_job(
            job_type=args.job_type,
            owner=owner,
            input=job_input,
            symmetric_key_seed=seed,
        )
        print(f"Submitted job: {submission.job_id}")
        if submission.tx_sig:
            print(f"  tx: {submission.tx_sig}")
        if submission.coordinator_notified is False:
            print(f"  coordinator notification failed: {submission.coordinator_error}")

        if args.complete_mock:
            if client.config.has_coordinator:
                print("--complete-mock ignored: a coordinator is configured")
            else:
                echo = {"echo": job_input, "completed_by": "submit_job tool"}
                client.confidential_compute.set_mock_result(
                    submission.job_id, encrypt_payload(echo, normalize_key(seed))
                )

        if args.poll:
            final = await poll_status(client, submission.job_id, args.timeout, args.interval)
            print(f"Final status: {final}")
        else:
            status = await client.confidential_compute.get_job_status(submission.job_id)
            print(f"Job status: {status.value}")

        try:
            result = await client.confidential_compute.fetch_result(submission.job_id, seed)
            print("\n--- DECRYPTED RESULT ---")
            print(json.dumps(result, indent=2, default=str))
        except NotFoundError as e:
            print(f"Result not available yet: {e}")

    return 0


def main():
    parser = argparse.ArgumentParser(description="Submit a confidential compute job")
    parser.add_argument("job_type", help="Job type name (registered on the fly)")
    parser.add_argument("input", help="Job input as JSON string")
    parser.add_argument("--job-version", default="1.0", help="Job type version")
    parser.add_argument("--owner", default="cli-owner", help="Owner id when not signing")
    parser.add_argument("--seed", default="strategy-seed-1", help="Seed for the job key")
    parser.add_argument("--sign", action="store_true", help="Sign on-chain with a fresh keypair")
    parser.add_argument("--complete-mock", action="store_true", help="Complete the mock job locally")
    parser.add_argument("--poll", action="store_true", help="Poll until terminal status")
    parser.add_argument("--timeout", type=int, default=120, help="Poll timeout in seconds")
    parser.add_argument("--interval", type=float, default=3.0, help="Poll interval in seconds")
    args = parser.parse_args()

    configure_logging(level=os.environ.get("LOG_LEVEL", "WARNING"))
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
