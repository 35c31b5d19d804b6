# ============================================================================
# WALLET ADAPTERS
# ============================================================================
# STATUS: Infrastructure - Signing capability abstraction
# PURPOSE: Let callers sign transactions without handing keys to the SDK
# CREATED: 19 OCT 2026
# ============================================================================
"""
Wallet Adapters

The SDK never reads secret keys. Anything exposing a public key and an
async sign_transaction() can act as a wallet:

    class MyWallet:
        public_key = Pubkey.from_string("...")

        async def sign_transaction(self, tx: Transaction) -> Transaction:
            ...

KeypairWalletAdapter wraps a local Keypair for scripts and tests.
"""

from typing import List, Optional, Protocol, Sequence, runtime_checkable

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction


@runtime_checkable
class WalletAdapter(Protocol):
    """Minimal signing capability used by the SDK."""

    public_key: Optional[Pubkey]

    async def sign_transaction(self, tx: Transaction) -> Transaction:
        ...


class KeypairWalletAdapter:
    """Wallet adapter backed by an in-process Keypair."""

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @property
    def public_key(self) -> Pubkey:
        return self._keypair.pubkey()

    async def sign_transaction(self, tx: Transaction) -> Transaction:
        tx.partial_sign([self._keypair], tx.message.recent_blockhash)
        return tx

    async def sign_all_transactions(self, txs: Sequence[Transaction]) -> List[Transaction]:
        return [await self.sign_transaction(tx) for tx in txs]


__all__ = ["WalletAdapter", "KeypairWalletAdapter"]
