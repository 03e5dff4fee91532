"""Chain access: protocol, in-memory ledger and JSON-RPC client."""

from seaport.chain.base import ChainClient, ECSignature, TransactionReceipt
from seaport.chain.memory import InMemoryChain, RecordedTransaction
from seaport.chain.rpc import RpcChainClient

__all__ = [
    "ChainClient",
    "ECSignature",
    "TransactionReceipt",
    "InMemoryChain",
    "RecordedTransaction",
    "RpcChainClient",
]
