#!/usr/bin/env python3
# ============================================================================
# PRIVATE TOKEN DEMO
# ============================================================================
# STATUS: Tool - Private balance walkthrough
# PURPOSE: Define schema, create state, generate and submit a proof
# CREATED: 19 OCT 2026
# ============================================================================
"""
Create a private token balance state, generate a proof, and submit it.

Usage:
    python tools/private_token_demo.py --balance 1000

    ZKPRIME_RPC_ENDPOINT=https://api.devnet.solana.com \\
    ZKPRIME_PROGRAM_ID=<program id> ZKPRIME_PROVING_SERVICE_URL=<prover url> \\
        python tools/private_token_demo.py --balance 1000

Without ZKPRIME_PROGRAM_ID nothing is sent on-chain; without
ZKPRIME_PROVING_SERVICE_URL a mock proof is generated.
"""

import argparse
import asyncio
import os
import sys

from solders.keypair import Keypair

from zkprime import KeypairWalletAdapter, Seed, ZkPrimeClient
from zkprime.core.logging import configure_logging

SCHEMA_ID = "private-token-balance-v1"


async def run(args: argparse.Namespace) -> int:
    wallet = KeypairWalletAdapter(Keypair())
    owner = str(wallet.public_key)
    seed = Seed(args.seed.encode("utf-8"))

    async with ZkPrimeClient.from_env() as client:
        client.private_state.define_schema({
            "id": SCHEMA_ID,
            "name": "PrivateTokenBalance",
            "fields": [{"name": "balance", "type": "u64"}],
        })

        result = await client.private_state.create_state(
            schema_id=SCHEMA_ID,
            owner=owner,
            data={"balance": args.balance},
            symmetric_key_seed=seed,
            wallet_adapter=wallet,
        )
        print(f"State created (client-side): id={result.state.id}")
        print(f"  commitment: {result.state.commitment}")

        proof = await client.private_state.generate_proof(
            state_id=result.state.id,
            encrypted_payload=result.encrypted,
            circuit=args.circuit,
        )
        print(f"Generated proof: {proof.proof}")

        if client.config.has_program:
            sig = await client.private_state.submit_proof(
                state_id=result.state.id, proof=proof, wallet_adapter=wallet
            )
            print(f"Proof submitted tx: {sig}")
        else:
            print("ZKPRIME_PROGRAM_ID not configured; skipping on-chain submission.")

        decrypted = client.private_state.decrypt_with_seed(result.encrypted, seed)
        print(f"Decrypted state: {decrypted}")

    return 0


def main():
    parser = argparse.ArgumentParser(description="Private token balance demo")
    parser.add_argument("--balance", type=int, default=1000, help="Initial balance")
    parser.add_argument("--seed", default="example-seed", help="Seed for the state key")
    parser.add_argument("--circuit", default="update_balance_v1", help="Circuit name")
    args = parser.parse_args()

    configure_logging(level=os.environ.get("LOG_LEVEL", "WARNING"))
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
