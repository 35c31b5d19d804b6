# ============================================================================
# SOLANA TRANSACTION HELPER TESTS
# ============================================================================
# STATUS: Tests - Instruction encoding, signing, sending
# PURPOSE: Verify build_and_send_transaction against a mocked RPC client
# CREATED: 19 OCT 2026
# ============================================================================
"""
Solana Transaction Helper Tests

Covers:
1. Instruction data encoding
2. Program id validation
3. Wallet adapter preconditions and batch signing
4. Build / sign / send with real solders types and a mocked AsyncClient
5. RPC failure mapping
6. Connection cache reuse and teardown

Run with:
    pytest tests/test_transactions.py -v
"""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from solders.hash import Hash
from solders.instruction import AccountMeta
from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from zkprime.core.contracts import ChainOp
from zkprime.core.errors import ConfigError, RPCError
from zkprime.infrastructure.solana import (
    ConnectionCache,
    KeypairWalletAdapter,
    WalletAdapter,
    build_and_send_transaction,
    create_instruction,
    create_signer_instruction,
    encode_instruction_data,
)

PROGRAM_ID = "11111111111111111111111111111111"


def _connection(signature="5xSig") -> AsyncMock:
    connection = AsyncMock()
    connection.get_latest_blockhash.return_value = MagicMock(value=MagicMock(blockhash=Hash.default()))
    connection.send_raw_transaction.return_value = MagicMock(value=signature)
    return connection


# ============================================================================
# INSTRUCTIONS
# ============================================================================

class TestInstructions:

    def test_op_comes_first(self):
        data = encode_instruction_data(ChainOp.UPDATE, prev="aa", next="bb")
        assert data == b'{"op":"update","prev":"aa","next":"bb"}'

    def test_accepts_plain_string_op(self):
        assert json.loads(encode_instruction_data("create", commitment="ab"))["op"] == "create"

    def test_invalid_program_id(self):
        with pytest.raises(ConfigError) as exc_info:
            create_instruction("not-a-pubkey", b"{}", [])
        assert exc_info.value.option == "program_id"

    def test_signer_instruction_accounts(self):
        wallet = KeypairWalletAdapter(Keypair())
        ix = create_signer_instruction(PROGRAM_ID, wallet, ChainOp.CREATE, commitment="ab")
        assert ix.program_id == Pubkey.from_string(PROGRAM_ID)
        assert len(ix.accounts) == 1
        assert ix.accounts[0] == AccountMeta(wallet.public_key, True, False)

    def test_signer_instruction_needs_public_key(self):
        with pytest.raises(RPCError):
            create_signer_instruction(PROGRAM_ID, SimpleNamespace(public_key=None), ChainOp.CREATE)


# ============================================================================
# BUILD AND SEND
# ============================================================================

class TestBuildAndSend:

    def test_keypair_adapter_satisfies_protocol(self):
        assert isinstance(KeypairWalletAdapter(Keypair()), WalletAdapter)

    def test_signs_and_sends(self):
        connection = _connection()
        wallet = KeypairWalletAdapter(Keypair())
        ix = create_signer_instruction(PROGRAM_ID, wallet, ChainOp.CREATE, commitment="ab")

        sig = asyncio.run(build_and_send_transaction(connection, wallet, [ix]))

        assert sig == "5xSig"
        connection.get_latest_blockhash.assert_awaited_once()
        raw = connection.send_raw_transaction.call_args[0][0]
        tx = Transaction.from_bytes(raw)
        assert tx.message.account_keys[0] == wallet.public_key
        assert tx.message.recent_blockhash == Hash.default()
        assert len(tx.signatures) == 1
        assert tx.signatures[0] != Signature.default()

    def test_additional_signers(self):
        connection = _connection()
        wallet = KeypairWalletAdapter(Keypair())
        extra = Keypair()
        ix = create_instruction(
            PROGRAM_ID,
            encode_instruction_data(ChainOp.CREATE, commitment="ab"),
            [
                AccountMeta(wallet.public_key, True, False),
                AccountMeta(extra.pubkey(), True, False),
            ],
        )

        asyncio.run(build_and_send_transaction(connection, wallet, [ix], additional_signers=[extra]))

        tx = Transaction.from_bytes(connection.send_raw_transaction.call_args[0][0])
        assert len(tx.signatures) == 2
        assert all(s != Signature.default() for s in tx.signatures)

    def test_keypair_adapter_signs_batch(self):
        wallet = KeypairWalletAdapter(Keypair())
        unsigned = [
            Transaction.new_unsigned(Message.new_with_blockhash(
                [create_signer_instruction(PROGRAM_ID, wallet, ChainOp.CREATE, commitment=c)],
                wallet.public_key,
                Hash.default(),
            ))
            for c in ("ab", "cd")
        ]

        signed = asyncio.run(wallet.sign_all_transactions(unsigned))

        assert len(signed) == 2
        for tx in signed:
            assert tx.signatures[0] != Signature.default()
            tx.verify()
        assert signed[0].signatures[0] != signed[1].signatures[0]

    @pytest.mark.parametrize("wallet", [
        None,
        SimpleNamespace(public_key=None),
        SimpleNamespace(public_key=Keypair().pubkey()),
    ])
    def test_unusable_wallet(self, wallet):
        connection = _connection()
        with pytest.raises(RPCError):
            asyncio.run(build_and_send_transaction(connection, wallet, [], additional_signers=[Keypair()]))
        connection.get_latest_blockhash.assert_not_called()
        connection.send_raw_transaction.assert_not_called()

    def test_blockhash_failure(self):
        connection = _connection()
        connection.get_latest_blockhash.side_effect = httpx.ConnectError("refused")
        wallet = KeypairWalletAdapter(Keypair())
        ix = create_signer_instruction(PROGRAM_ID, wallet, ChainOp.CREATE, commitment="ab")

        with pytest.raises(RPCError, match="blockhash"):
            asyncio.run(build_and_send_transaction(connection, wallet, [ix]))
        connection.send_raw_transaction.assert_not_called()

    def test_send_failure(self):
        connection = _connection()
        connection.send_raw_transaction.side_effect = httpx.ReadTimeout("slow node")
        wallet = KeypairWalletAdapter(Keypair())
        ix = create_signer_instruction(PROGRAM_ID, wallet, ChainOp.CREATE, commitment="ab")

        with pytest.raises(RPCError, match="send transaction"):
            asyncio.run(build_and_send_transaction(connection, wallet, [ix]))


# ============================================================================
# CONNECTION CACHE
# ============================================================================

class TestConnectionCache:

    def test_reuse_and_close(self):
        with patch("zkprime.infrastructure.solana.connection.AsyncClient") as mock_client_cls:
            mock_client_cls.side_effect = lambda *args, **kwargs: MagicMock(close=AsyncMock())
            cache = ConnectionCache()

            first = cache.get("http://localhost:8899")
            assert cache.get("http://localhost:8899") is first
            second = cache.get("https://api.devnet.solana.com")
            assert len(cache) == 2

            asyncio.run(cache.close())

        first.close.assert_awaited_once()
        second.close.assert_awaited_once()
        assert len(cache) == 0
