"""JSON-RPC chain client backed by web3.py.

Transactions are sent with eth_sendTransaction from the account itself,
so the node (or a wallet provider in front of it) must manage the keys.
"""

from __future__ import annotations

from typing import Any

import structlog

from seaport.chain.base import ECSignature, TransactionReceipt
from seaport.config import SeaportConfig
from seaport.constants import NULL_ADDRESS
from seaport.models.types import bytes_to_hex, normalize_address

logger = structlog.get_logger()

# Minimal ABIs, just the functions we need
ERC20_ABI = [
    {
        "name": "balanceOf",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "name": "allowance",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "name": "approve",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "value", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
]

ERC721_ABI = [
    {
        "name": "ownerOf",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "tokenId", "type": "uint256"}],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "getApproved",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "tokenId", "type": "uint256"}],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "approve",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "name": "isApprovedForAll",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "operator", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "name": "setApprovalForAll",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "operator", "type": "address"},
            {"name": "approved", "type": "bool"},
        ],
        "outputs": [],
    },
]

ERC1155_ABI = [
    {
        "name": "balanceOf",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "account", "type": "address"},
            {"name": "id", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]

PROXY_REGISTRY_ABI = [
    {
        "name": "proxies",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "address"}],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "registerProxy",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
]


class RpcChainClient:
    """ChainClient that talks to an Ethereum node over HTTP JSON-RPC."""

    def __init__(self, config: SeaportConfig | None = None, provider_url: str | None = None):
        """Initialize the client.

        Args:
            config: Client configuration. Uses SeaportConfig() if not provided.
            provider_url: Overrides the configured JSON-RPC endpoint
        """
        try:
            from web3 import AsyncHTTPProvider, AsyncWeb3
        except ImportError as e:
            raise ImportError(
                "web3 package required for RpcChainClient. Install with: pip install web3"
            ) from e

        self.config = config or SeaportConfig()
        url = provider_url or self.config.resolved_provider_url
        self.w3 = AsyncWeb3(AsyncHTTPProvider(url))
        self._checksum = AsyncWeb3.to_checksum_address
        self.registry = self._contract(self.config.proxy_registry_address, PROXY_REGISTRY_ABI)

    def _contract(self, address: str, abi: list[dict[str, Any]]) -> Any:
        return self.w3.eth.contract(address=self._checksum(address), abi=abi)

    def _tx(self, sender: str) -> dict[str, str]:
        return {"from": self._checksum(sender)}

    async def get_block_timestamp(self) -> int:
        block = await self.w3.eth.get_block("latest")
        return int(block["timestamp"])

    async def get_proxy(self, account: str) -> str | None:
        proxy = await self.registry.functions.proxies(self._checksum(account)).call()
        proxy = normalize_address(proxy)
        return None if proxy == NULL_ADDRESS else proxy

    async def register_proxy(self, account: str) -> str:
        tx_hash = await self.registry.functions.registerProxy().transact(self._tx(account))
        return bytes_to_hex(bytes(tx_hash))

    async def get_ether_balance(self, account: str) -> int:
        return int(await self.w3.eth.get_balance(self._checksum(account)))

    async def erc20_balance_of(self, token: str, account: str) -> int:
        contract = self._contract(token, ERC20_ABI)
        return int(await contract.functions.balanceOf(self._checksum(account)).call())

    async def erc20_allowance(self, token: str, owner: str, spender: str) -> int:
        contract = self._contract(token, ERC20_ABI)
        call = contract.functions.allowance(self._checksum(owner), self._checksum(spender))
        return int(await call.call())

    async def erc20_approve(self, token: str, owner: str, spender: str, amount: int) -> str:
        contract = self._contract(token, ERC20_ABI)
        call = contract.functions.approve(self._checksum(spender), amount)
        return bytes_to_hex(bytes(await call.transact(self._tx(owner))))

    async def erc721_owner_of(self, token: str, token_id: int) -> str | None:
        contract = self._contract(token, ERC721_ABI)
        owner = await contract.functions.ownerOf(int(token_id)).call()
        return normalize_address(owner) if owner else None

    async def erc721_get_approved(self, token: str, token_id: int) -> str | None:
        contract = self._contract(token, ERC721_ABI)
        approved = normalize_address(await contract.functions.getApproved(int(token_id)).call())
        return None if approved == NULL_ADDRESS else approved

    async def erc721_approve(self, token: str, owner: str, spender: str, token_id: int) -> str:
        contract = self._contract(token, ERC721_ABI)
        call = contract.functions.approve(self._checksum(spender), int(token_id))
        return bytes_to_hex(bytes(await call.transact(self._tx(owner))))

    async def erc1155_balance_of(self, token: str, account: str, token_id: int) -> int:
        contract = self._contract(token, ERC1155_ABI)
        call = contract.functions.balanceOf(self._checksum(account), int(token_id))
        return int(await call.call())

    async def is_approved_for_all(self, token: str, owner: str, operator: str) -> bool | None:
        contract = self._contract(token, ERC721_ABI)
        try:
            call = contract.functions.isApprovedForAll(
                self._checksum(owner), self._checksum(operator)
            )
            return bool(await call.call())
        except Exception as e:
            # Older contracts (e.g. CryptoKitties) have no isApprovedForAll
            logger.debug("is_approved_for_all_unsupported", token_address=token, error=str(e))
            return None

    async def set_approval_for_all(
        self, token: str, owner: str, operator: str, approved: bool
    ) -> str:
        contract = self._contract(token, ERC721_ABI)
        call = contract.functions.setApprovalForAll(self._checksum(operator), approved)
        return bytes_to_hex(bytes(await call.transact(self._tx(owner))))

    async def wait_for_transaction(self, transaction_hash: str) -> TransactionReceipt:
        receipt = await self.w3.eth.wait_for_transaction_receipt(
            transaction_hash,
            timeout=self.config.confirmation_timeout_seconds,
            poll_latency=self.config.confirmation_poll_seconds,
        )
        return TransactionReceipt(
            transaction_hash=transaction_hash,
            status=int(receipt["status"]),
            block_number=int(receipt["blockNumber"]),
        )

    async def sign_message(self, account: str, message_hash: str) -> ECSignature:
        signature = bytes(await self.w3.eth.sign(self._checksum(account), hexstr=message_hash))
        v = signature[64]
        if v < 27:
            v += 27
        return ECSignature(
            v=v,
            r=bytes_to_hex(signature[:32]),
            s=bytes_to_hex(signature[32:64]),
        )
