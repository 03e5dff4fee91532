"""Chain access protocol.

The client reads balances, ownership and approvals and sends approval
transactions through a ChainClient. This allows swapping between an RPC
implementation and the in-memory ledger used for tests and dry runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TransactionReceipt:
    """Outcome of a mined transaction."""

    transaction_hash: str
    status: int
    block_number: int | None = None

    @property
    def succeeded(self) -> bool:
        """True if the transaction did not revert."""
        return self.status == 1


@dataclass(frozen=True)
class ECSignature:
    """Secp256k1 signature split into its parts."""

    v: int
    r: str
    s: str


class ChainClient(Protocol):
    """Protocol for chain access.

    All token and contract addresses are lowercase 0x-prefixed strings.
    Methods that send transactions return the transaction hash without
    waiting; use wait_for_transaction to wait for the receipt.
    """

    async def get_block_timestamp(self) -> int:
        """Timestamp of the latest block."""
        ...

    async def get_proxy(self, account: str) -> str | None:
        """Exchange proxy registered for an account, if any."""
        ...

    async def register_proxy(self, account: str) -> str:
        """Send the transaction registering an exchange proxy for an account."""
        ...

    async def get_ether_balance(self, account: str) -> int:
        """Ether balance in wei."""
        ...

    async def erc20_balance_of(self, token: str, account: str) -> int:
        """ERC-20 balance in base units."""
        ...

    async def erc20_allowance(self, token: str, owner: str, spender: str) -> int:
        """ERC-20 allowance in base units."""
        ...

    async def erc20_approve(self, token: str, owner: str, spender: str, amount: int) -> str:
        """Send an ERC-20 approve transaction."""
        ...

    async def erc721_owner_of(self, token: str, token_id: int) -> str | None:
        """Owner of an ERC-721 token, None if it does not exist."""
        ...

    async def erc721_get_approved(self, token: str, token_id: int) -> str | None:
        """Address approved to transfer an ERC-721 token, if any."""
        ...

    async def erc721_approve(self, token: str, owner: str, spender: str, token_id: int) -> str:
        """Send an ERC-721 single-token approve transaction."""
        ...

    async def erc1155_balance_of(self, token: str, account: str, token_id: int) -> int:
        """ERC-1155 balance of one token id."""
        ...

    async def is_approved_for_all(self, token: str, owner: str, operator: str) -> bool | None:
        """Approval-for-all status, None if the contract does not support it."""
        ...

    async def set_approval_for_all(
        self, token: str, owner: str, operator: str, approved: bool
    ) -> str:
        """Send a setApprovalForAll transaction."""
        ...

    async def wait_for_transaction(self, transaction_hash: str) -> TransactionReceipt:
        """Wait until a transaction is mined."""
        ...

    async def sign_message(self, account: str, message_hash: str) -> ECSignature:
        """Sign a 32-byte hash with the account's key (personal-sign prefix applied)."""
        ...
