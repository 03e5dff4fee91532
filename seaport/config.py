"""Client configuration.

Values can be passed explicitly or read from the environment:
- OPENSEA_NETWORK: "main" or "rinkeby" (default: main)
- OPENSEA_API_KEY: marketplace API key (default: none)
- OPENSEA_API_URL: API base URL (default: per network)
- OPENSEA_PROVIDER_URL: JSON-RPC endpoint (default: per network)
- OPENSEA_API_TIMEOUT: HTTP timeout in seconds (default: 30)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from seaport.constants import (
    API_BASE_URLS,
    PROVIDER_URLS,
    WETH_ADDRESSES,
    WYVERN_ATOMICIZER_ADDRESSES,
    WYVERN_EXCHANGE_ADDRESSES,
    WYVERN_PROXY_REGISTRY_ADDRESSES,
    WYVERN_TOKEN_TRANSFER_PROXY_ADDRESSES,
    Network,
)
from seaport.fees.config import DEFAULT_FEE_CONFIG, FeeConfig


@dataclass(frozen=True)
class SeaportConfig:
    """Configuration for OpenSeaPort and its collaborators.

    Attributes:
        network: Network to trade on
        api_key: Marketplace API key, sent as X-API-KEY
        api_base_url: Overrides the network's API base URL
        provider_url: Overrides the network's JSON-RPC endpoint
        api_timeout: HTTP timeout in seconds
        fees: Fee defaults
        confirmation_poll_seconds: Delay between transaction receipt polls
        confirmation_timeout_seconds: Give up waiting for a receipt after this long
    """

    network: Network = Network.MAIN
    api_key: str | None = None
    api_base_url: str | None = None
    provider_url: str | None = None
    api_timeout: float = 30.0
    fees: FeeConfig = field(default=DEFAULT_FEE_CONFIG)
    confirmation_poll_seconds: float = 1.0
    confirmation_timeout_seconds: float = 600.0

    @classmethod
    def from_env(cls, **overrides: object) -> SeaportConfig:
        """Build a configuration from OPENSEA_* environment variables."""
        values: dict[str, object] = {
            "network": Network(os.environ.get("OPENSEA_NETWORK", Network.MAIN.value)),
            "api_key": os.environ.get("OPENSEA_API_KEY") or None,
            "api_base_url": os.environ.get("OPENSEA_API_URL") or None,
            "provider_url": os.environ.get("OPENSEA_PROVIDER_URL") or None,
            "api_timeout": float(os.environ.get("OPENSEA_API_TIMEOUT", "30")),
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    @property
    def resolved_api_base_url(self) -> str:
        """API base URL for the configured network."""
        return (self.api_base_url or API_BASE_URLS[self.network]).rstrip("/")

    @property
    def resolved_provider_url(self) -> str:
        """JSON-RPC endpoint for the configured network."""
        return self.provider_url or PROVIDER_URLS[self.network]

    @property
    def exchange_address(self) -> str:
        """Wyvern exchange contract for the configured network."""
        return WYVERN_EXCHANGE_ADDRESSES[self.network]

    @property
    def atomicizer_address(self) -> str:
        """Wyvern atomicizer library for the configured network."""
        return WYVERN_ATOMICIZER_ADDRESSES[self.network]

    @property
    def token_transfer_proxy_address(self) -> str:
        """Contract that moves ERC-20 payments for the exchange."""
        return WYVERN_TOKEN_TRANSFER_PROXY_ADDRESSES[self.network]

    @property
    def proxy_registry_address(self) -> str:
        """Registry of per-account exchange proxies."""
        return WYVERN_PROXY_REGISTRY_ADDRESSES[self.network]

    @property
    def weth_address(self) -> str:
        """Wrapped Ether on the configured network."""
        return WETH_ADDRESSES[self.network]
