"""Shared addresses and token ids for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import ALEX_ADDRESS, MYTHEREUM_ADDRESS
    # or
    from tests.helpers.constants import ALEX_ADDRESS, MYTHEREUM_ADDRESS
"""

from seaport.constants import ENJIN_ADDRESS, MANA_ADDRESS, WETH_ADDRESSES, Network

# =============================================================================
# Accounts
# =============================================================================

ALEX_ADDRESS = "0xe96a1b303a1eb8d04fb973eb2b291b8d591c8f72"
BOB_ADDRESS = "0x0eb61ed9e8b4a1d8b5ff0a0a47b4cbbc7c5f8d2e"
ALEX_PROXY = "0x9a1b2c3d4e5f60718293a4b5c6d7e8f901234567"

# =============================================================================
# Payment tokens (18 decimals)
# =============================================================================

WETH = WETH_ADDRESSES[Network.MAIN]
MANA = MANA_ADDRESS

# =============================================================================
# Assets
# =============================================================================

MYTHEREUM_ADDRESS = "0xc70be5b7c19529ef642d16c10dfe91c58b5c3bf0"  # ERC-721
MYTHEREUM_TOKEN_ID = 4367
DIGITAL_ART_CHAIN_ADDRESS = "0x323a3e1693e7a0959f65972f3bf2dfcb93239dfe"  # ERC-721
DIGITAL_ART_CHAIN_TOKEN_ID = 189
BENZENE_ADDRESS = "0x6524b87960c2d573ae514fd4181777e7842435d4"  # ERC-20, no decimals
ENJIN = ENJIN_ADDRESS  # ERC-1155
DISSOLUTION_TOKEN_ID = "57896044618658097711785492504343953926634992332820282019728792003956564819969"
SPIRIT_CLASH_TOKEN_ID = "57896044618658097711785492504343953926634992332820282019728792003956564819970"

# Fixed chain clock for deterministic listing times
NOW = 1_700_000_000
ONE_DAY = 60 * 60 * 24

ETHER = 10**18


__all__ = [
    "ALEX_ADDRESS",
    "BOB_ADDRESS",
    "ALEX_PROXY",
    "WETH",
    "MANA",
    "MYTHEREUM_ADDRESS",
    "MYTHEREUM_TOKEN_ID",
    "DIGITAL_ART_CHAIN_ADDRESS",
    "DIGITAL_ART_CHAIN_TOKEN_ID",
    "BENZENE_ADDRESS",
    "ENJIN",
    "DISSOLUTION_TOKEN_ID",
    "SPIRIT_CLASH_TOKEN_ID",
    "NOW",
    "ONE_DAY",
    "ETHER",
]
