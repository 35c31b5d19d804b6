# ============================================================================
# TRANSACTION HELPERS
# ============================================================================
# STATUS: Infrastructure - Build, sign and send Solana transactions
# PURPOSE: Thin pass-through over solders / solana-py
# CREATED: 19 OCT 2026
# ============================================================================
"""
Transaction Helpers

Builds a transaction from instructions, has the wallet adapter sign it,
adds any extra signers, and sends the raw bytes. Confirmation and retry
behavior are left to the RPC node; nothing here waits for finality.

Instruction data is compact UTF-8 JSON with an "op" field first:

    {"op":"create","commitment":"ab12..."}

The account layout (a single read-only signer: the wallet) is what the
reference programs expect; other programs need their own builders.
"""

import json
import logging
from typing import Any, Optional, Sequence

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Finalized
from solana.rpc.core import RPCException
from solders.instruction import AccountMeta, Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from zkprime.core.contracts import ChainOp
from zkprime.core.errors import ConfigError, RPCError
from zkprime.infrastructure.solana.wallet import WalletAdapter

logger = logging.getLogger(__name__)

_RPC_FAILURES = (RPCException, SolanaRpcException, httpx.HTTPError)


def encode_instruction_data(op: ChainOp, **fields: Any) -> bytes:
    """Encode {"op": op, **fields} as compact UTF-8 JSON."""
    payload = {"op": ChainOp(op).value, **fields}
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def create_instruction(
    program_id: str,
    data: bytes,
    accounts: Sequence[AccountMeta],
) -> Instruction:
    """
    Create a simple program instruction.

    Raises:
        ConfigError if program_id is not a valid base58 address
    """
    try:
        program = Pubkey.from_string(program_id)
    except ValueError as e:
        raise ConfigError(f"Invalid program id {program_id!r}: {e}", option="program_id") from e
    return Instruction(program, bytes(data), list(accounts))


def create_signer_instruction(
    program_id: str,
    wallet_adapter: WalletAdapter,
    op: ChainOp,
    **fields: Any,
) -> Instruction:
    """Instruction whose only account is the wallet as read-only signer."""
    public_key = getattr(wallet_adapter, "public_key", None)
    if public_key is None:
        raise RPCError("walletAdapter with publicKey required")
    return create_instruction(
        program_id,
        encode_instruction_data(op, **fields),
        [AccountMeta(pubkey=public_key, is_signer=True, is_writable=False)],
    )


async def build_and_send_transaction(
    connection: AsyncClient,
    wallet_adapter: Optional[WalletAdapter],
    instructions: Sequence[Instruction],
    additional_signers: Sequence[Keypair] = (),
) -> str:
    """
    Build a transaction, sign with the wallet adapter, and send it.

    Args:
        connection: solana-py AsyncClient
        wallet_adapter: Signer exposing public_key and sign_transaction
        instructions: Instructions to include, in order
        additional_signers: Extra keypairs (e.g. program-derived signers)

    Returns:
        Transaction signature (base58)

    Raises:
        RPCError if the adapter cannot sign, or the RPC call fails
    """
    if wallet_adapter is None or getattr(wallet_adapter, "public_key", None) is None:
        raise RPCError("walletAdapter with publicKey required")

    sign = getattr(wallet_adapter, "sign_transaction", None)
    if sign is None:
        # Extra signers alone can never cover the fee payer
        raise RPCError("walletAdapter must provide signTransaction")

    try:
        blockhash_resp = await connection.get_latest_blockhash(Finalized)
    except _RPC_FAILURES as e:
        raise RPCError(f"Failed to fetch latest blockhash: {e}") from e
    blockhash = blockhash_resp.value.blockhash

    message = Message.new_with_blockhash(list(instructions), wallet_adapter.public_key, blockhash)
    tx = Transaction.new_unsigned(message)

    signed = await sign(tx)
    if additional_signers:
        signed.partial_sign(list(additional_signers), blockhash)

    try:
        resp = await connection.send_raw_transaction(bytes(signed))
    except _RPC_FAILURES as e:
        raise RPCError(f"Failed to send transaction: {e}") from e

    signature = str(resp.value)
    logger.info(f"Sent transaction {signature} with {len(instructions)} instruction(s)")
    return signature


__all__ = [
    "encode_instruction_data",
    "create_instruction",
    "create_signer_instruction",
    "build_and_send_transaction",
]
