"""Test helpers module for shared test utilities.

- constants: Accounts, token addresses and token ids
- backend: Fake marketplace API for httpx.MockTransport
- assertions: Fee and matching checks on built orders
"""

from tests.helpers.assertions import assert_fees_maker_order, assert_matching_new_order
from tests.helpers.backend import FakeOpenSeaBackend
from tests.helpers.constants import (
    ALEX_ADDRESS,
    ALEX_PROXY,
    BENZENE_ADDRESS,
    BOB_ADDRESS,
    DIGITAL_ART_CHAIN_ADDRESS,
    DIGITAL_ART_CHAIN_TOKEN_ID,
    DISSOLUTION_TOKEN_ID,
    ENJIN,
    ETHER,
    MANA,
    MYTHEREUM_ADDRESS,
    MYTHEREUM_TOKEN_ID,
    NOW,
    ONE_DAY,
    SPIRIT_CLASH_TOKEN_ID,
    WETH,
)

__all__ = [
    # Constants
    "ALEX_ADDRESS",
    "ALEX_PROXY",
    "BOB_ADDRESS",
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
    # Backend
    "FakeOpenSeaBackend",
    # Assertions
    "assert_fees_maker_order",
    "assert_matching_new_order",
]
