"""Protocol constants for the Wyvern exchange and the OpenSea marketplace.

Centralizes well-known addresses and protocol parameters.
"""

from enum import Enum

from seaport.models.types import NULL_ADDRESS  # noqa: F401 - re-exported
from seaport.models.types import UINT256_MAX, is_valid_address


class Network(str, Enum):
    """Networks the client can talk to."""

    MAIN = "main"
    RINKEBY = "rinkeby"


def _validate_address(name: str, address: str) -> str:
    """Validate and return a contract address.

    Args:
        name: Name of the contract (for error messages)
        address: The address to validate

    Returns:
        The validated address

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


MAX_UINT_256 = UINT256_MAX

# Fees are expressed in basis points of the order price
INVERSE_BASIS_POINT = 10_000
DEFAULT_BUYER_FEE_BASIS_POINTS = 0
DEFAULT_SELLER_FEE_BASIS_POINTS = 250
# Paid by OpenSea to referrers with accounts, on top of any seller bounty
OPENSEA_SELLER_BOUNTY_BASIS_POINTS = 100
DEFAULT_MAX_BOUNTY = DEFAULT_SELLER_FEE_BASIS_POINTS

# Non-zero expiration times must be at least this far in the future
MIN_EXPIRATION_SECONDS = 10
# English auctions stay matchable for a week after the auction ends
ORDER_MATCHING_LATENCY_SECONDS = 60 * 60 * 24 * 7
# Listing time is backdated to absorb clock skew between client and chain
LISTING_TIME_OFFSET_SECONDS = 100

ETHER_DECIMALS = 18

OPENSEA_FEE_RECIPIENT = _validate_address(
    "OpenSea fee recipient", "0x5b3256965e7c3cf26e11fcaf296dfc8807c01073"
)

# Wyvern v2 deployments
WYVERN_EXCHANGE_ADDRESSES = {
    Network.MAIN: _validate_address("exchange", "0x7be8076f4ea4a4ad08075c2508e481d6c946d12b"),
    Network.RINKEBY: _validate_address("exchange", "0x5206e78b21ce315ce284fb24cf05e0585a93b1d9"),
}
WYVERN_ATOMICIZER_ADDRESSES = {
    Network.MAIN: _validate_address("atomicizer", "0xc99f70bfd82fb7c8f8191fdfbfb735606b15e5c5"),
    Network.RINKEBY: _validate_address("atomicizer", "0x613a12b156ec15ac22c8e5b9d48c7b8e4e7b9f43"),
}
WYVERN_TOKEN_TRANSFER_PROXY_ADDRESSES = {
    Network.MAIN: _validate_address(
        "token transfer proxy", "0xe5c783ee536cf5e63e792988335c4255169be4e1"
    ),
    Network.RINKEBY: _validate_address(
        "token transfer proxy", "0x82d102457854c985221249f86659c9d6cf12aa72"
    ),
}
WYVERN_PROXY_REGISTRY_ADDRESSES = {
    Network.MAIN: _validate_address("proxy registry", "0xa5409ec958c83c3f309868babaca7c86dcb077c1"),
    Network.RINKEBY: _validate_address(
        "proxy registry", "0xf57b2c51ded3a29e6891aba85459d600256cf317"
    ),
}

# Well-known token addresses (lowercase for consistency)
WETH_ADDRESSES = {
    Network.MAIN: _validate_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"),
    Network.RINKEBY: _validate_address("WETH", "0xc778417e063141139fce010982780140aa0cd5ab"),
}
MANA_ADDRESS = _validate_address("MANA", "0x0f5d2fb29fb7d3cfee444a200298f468908cc942")
ENJIN_ADDRESS = _validate_address("Enjin", "0xfaafdc07907ff5120a76b34b731b278c38d6043c")

MAINNET_PROVIDER_URL = "https://mainnet.infura.io"
RINKEBY_PROVIDER_URL = "https://rinkeby.infura.io"
PROVIDER_URLS = {
    Network.MAIN: MAINNET_PROVIDER_URL,
    Network.RINKEBY: RINKEBY_PROVIDER_URL,
}

API_BASE_MAINNET = "https://api.opensea.io"
API_BASE_RINKEBY = "https://rinkeby-api.opensea.io"
API_BASE_URLS = {
    Network.MAIN: API_BASE_MAINNET,
    Network.RINKEBY: API_BASE_RINKEBY,
}
API_PATH = "/api/v1"
ORDERBOOK_PATH = "/wyvern/v1"
