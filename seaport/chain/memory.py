"""In-memory chain for tests and dry runs.

Holds balances, ownership, allowances, approvals and proxies in plain
dictionaries. Every state-changing call is recorded in `transactions`
and mined immediately.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

import structlog
from eth_utils import keccak

from seaport.chain.base import ECSignature, TransactionReceipt
from seaport.errors import ApprovalError
from seaport.models.types import bytes_to_hex, hex_to_bytes, normalize_address

logger = structlog.get_logger()


@dataclass(frozen=True)
class RecordedTransaction:
    """A transaction sent to the in-memory chain.

    Attributes:
        hash: Transaction hash
        method: Contract method name (e.g. "setApprovalForAll")
        sender: Account that sent it
        target: Contract it was sent to
        args: Call arguments
    """

    hash: str
    method: str
    sender: str
    target: str
    args: tuple = field(default_factory=tuple)


class InMemoryChain:
    """ChainClient backed by dictionaries.

    Seed state with the mint_* / set_* helpers, run the code under test,
    then assert on the state or on `transactions`.
    """

    def __init__(self, now: int | None = None, proxy_registry: str | None = None):
        """Initialize an empty chain.

        Args:
            now: Fixed block timestamp. Uses the system clock if not provided.
            proxy_registry: Address recorded as the target of proxy registrations
        """
        self.now = now
        self.proxy_registry = normalize_address(proxy_registry or "0x" + "00" * 19 + "01")
        self.ether_balances: dict[str, int] = {}
        self.erc20_balances: dict[tuple[str, str], int] = {}
        self.erc20_allowances: dict[tuple[str, str, str], int] = {}
        self.erc721_owners: dict[tuple[str, int], str] = {}
        self.erc721_approvals: dict[tuple[str, int], str] = {}
        self.erc1155_balances: dict[tuple[str, str, int], int] = {}
        self.operator_approvals: dict[tuple[str, str, str], bool] = {}
        self.proxies: dict[str, str] = {}
        self.no_approve_all: set[str] = set()
        self.failing_contracts: set[str] = set()
        self.transactions: list[RecordedTransaction] = []
        self._receipts: dict[str, TransactionReceipt] = {}

    # Seeding helpers

    def set_ether_balance(self, account: str, amount: int) -> None:
        self.ether_balances[normalize_address(account)] = amount

    def set_erc20_balance(self, token: str, account: str, amount: int) -> None:
        self.erc20_balances[(normalize_address(token), normalize_address(account))] = amount

    def mint_erc721(self, token: str, token_id: int, owner: str) -> None:
        self.erc721_owners[(normalize_address(token), int(token_id))] = normalize_address(owner)

    def mint_erc1155(self, token: str, token_id: int, owner: str, amount: int) -> None:
        key = (normalize_address(token), normalize_address(owner), int(token_id))
        self.erc1155_balances[key] = self.erc1155_balances.get(key, 0) + amount

    def set_proxy(self, account: str, proxy: str) -> None:
        self.proxies[normalize_address(account)] = normalize_address(proxy)

    def disable_approve_all(self, token: str) -> None:
        """Make is_approved_for_all report the contract as unsupported."""
        self.no_approve_all.add(normalize_address(token))

    def fail_calls_to(self, token: str) -> None:
        """Make every read and write against the contract raise."""
        self.failing_contracts.add(normalize_address(token))

    def transactions_for(self, method: str) -> list[RecordedTransaction]:
        """Recorded transactions calling the given method."""
        return [tx for tx in self.transactions if tx.method == method]

    # Internals

    def _check(self, token: str) -> str:
        address = normalize_address(token)
        if address in self.failing_contracts:
            raise RuntimeError(f"call to {address} reverted")
        return address

    def _record(self, method: str, sender: str, target: str, *args: object) -> str:
        tx_hash = bytes_to_hex(
            keccak(f"{len(self.transactions)}:{method}:{sender}:{target}:{args}".encode())
        )
        self.transactions.append(
            RecordedTransaction(
                hash=tx_hash,
                method=method,
                sender=normalize_address(sender),
                target=normalize_address(target),
                args=tuple(args),
            )
        )
        self._receipts[tx_hash] = TransactionReceipt(
            transaction_hash=tx_hash, status=1, block_number=len(self.transactions)
        )
        logger.debug("memory_chain_transaction", method=method, tx_hash=tx_hash)
        return tx_hash

    # ChainClient

    async def get_block_timestamp(self) -> int:
        return self.now if self.now is not None else int(time.time())

    async def get_proxy(self, account: str) -> str | None:
        return self.proxies.get(normalize_address(account))

    async def register_proxy(self, account: str) -> str:
        account = normalize_address(account)
        proxy = bytes_to_hex(keccak(hex_to_bytes(account) + b"proxy")[-20:])
        self.proxies[account] = proxy
        return self._record("registerProxy", account, self.proxy_registry)

    async def get_ether_balance(self, account: str) -> int:
        return self.ether_balances.get(normalize_address(account), 0)

    async def erc20_balance_of(self, token: str, account: str) -> int:
        token = self._check(token)
        return self.erc20_balances.get((token, normalize_address(account)), 0)

    async def erc20_allowance(self, token: str, owner: str, spender: str) -> int:
        token = self._check(token)
        key = (token, normalize_address(owner), normalize_address(spender))
        return self.erc20_allowances.get(key, 0)

    async def erc20_approve(self, token: str, owner: str, spender: str, amount: int) -> str:
        token = self._check(token)
        key = (token, normalize_address(owner), normalize_address(spender))
        self.erc20_allowances[key] = amount
        return self._record("approve", owner, token, normalize_address(spender), amount)

    async def erc721_owner_of(self, token: str, token_id: int) -> str | None:
        token = self._check(token)
        return self.erc721_owners.get((token, int(token_id)))

    async def erc721_get_approved(self, token: str, token_id: int) -> str | None:
        token = self._check(token)
        return self.erc721_approvals.get((token, int(token_id)))

    async def erc721_approve(self, token: str, owner: str, spender: str, token_id: int) -> str:
        token = self._check(token)
        if self.erc721_owners.get((token, int(token_id))) != normalize_address(owner):
            raise ApprovalError(f"{owner} does not own {token}/{token_id}")
        self.erc721_approvals[(token, int(token_id))] = normalize_address(spender)
        return self._record("approve", owner, token, normalize_address(spender), int(token_id))

    async def erc1155_balance_of(self, token: str, account: str, token_id: int) -> int:
        token = self._check(token)
        return self.erc1155_balances.get((token, normalize_address(account), int(token_id)), 0)

    async def is_approved_for_all(self, token: str, owner: str, operator: str) -> bool | None:
        token = self._check(token)
        if token in self.no_approve_all:
            return None
        key = (token, normalize_address(owner), normalize_address(operator))
        return self.operator_approvals.get(key, False)

    async def set_approval_for_all(
        self, token: str, owner: str, operator: str, approved: bool
    ) -> str:
        token = self._check(token)
        if token in self.no_approve_all:
            raise ApprovalError(f"{token} does not support setApprovalForAll")
        key = (token, normalize_address(owner), normalize_address(operator))
        self.operator_approvals[key] = approved
        return self._record(
            "setApprovalForAll", owner, token, normalize_address(operator), approved
        )

    async def wait_for_transaction(self, transaction_hash: str) -> TransactionReceipt:
        try:
            return self._receipts[transaction_hash]
        except KeyError as e:
            raise ApprovalError(f"Unknown transaction {transaction_hash}") from e

    async def sign_message(self, account: str, message_hash: str) -> ECSignature:
        # Deterministic stand-in for a real signature
        seed = hex_to_bytes(normalize_address(account)) + hex_to_bytes(message_hash)
        return ECSignature(
            v=27,
            r=bytes_to_hex(keccak(seed + b"r")),
            s=bytes_to_hex(keccak(seed + b"s")),
        )
