"""Pytest configuration and fixtures."""

import httpx
import pytest

from seaport.api import OpenSeaAPI
from seaport.chain import InMemoryChain
from seaport.config import SeaportConfig
from seaport.port import OpenSeaPort
from tests.helpers import (
    ALEX_ADDRESS,
    ALEX_PROXY,
    BENZENE_ADDRESS,
    DIGITAL_ART_CHAIN_ADDRESS,
    DIGITAL_ART_CHAIN_TOKEN_ID,
    DISSOLUTION_TOKEN_ID,
    ENJIN,
    ETHER,
    MANA,
    MYTHEREUM_ADDRESS,
    MYTHEREUM_TOKEN_ID,
    NOW,
    SPIRIT_CLASH_TOKEN_ID,
    WETH,
    FakeOpenSeaBackend,
)


@pytest.fixture
def config() -> SeaportConfig:
    """Mainnet configuration with a test API key."""
    return SeaportConfig(api_key="test-api-key")


@pytest.fixture
def backend() -> FakeOpenSeaBackend:
    """Fake marketplace API."""
    return FakeOpenSeaBackend()


@pytest.fixture
def api(config: SeaportConfig, backend: FakeOpenSeaBackend) -> OpenSeaAPI:
    """API client wired to the fake backend."""
    return OpenSeaAPI(config, transport=httpx.MockTransport(backend))


@pytest.fixture
def chain(config: SeaportConfig) -> InMemoryChain:
    """In-memory chain with Alex owning every test asset and some tokens.

    Alex has a registered proxy, 10 WETH, 100 MANA and 20 BENZENE.
    """
    chain = InMemoryChain(now=NOW, proxy_registry=config.proxy_registry_address)
    chain.set_proxy(ALEX_ADDRESS, ALEX_PROXY)
    chain.set_ether_balance(ALEX_ADDRESS, 5 * ETHER)
    chain.set_erc20_balance(WETH, ALEX_ADDRESS, 10 * ETHER)
    chain.set_erc20_balance(MANA, ALEX_ADDRESS, 100 * ETHER)
    chain.set_erc20_balance(BENZENE_ADDRESS, ALEX_ADDRESS, 20)
    chain.mint_erc721(MYTHEREUM_ADDRESS, MYTHEREUM_TOKEN_ID, ALEX_ADDRESS)
    chain.mint_erc721(DIGITAL_ART_CHAIN_ADDRESS, DIGITAL_ART_CHAIN_TOKEN_ID, ALEX_ADDRESS)
    chain.mint_erc1155(ENJIN, int(DISSOLUTION_TOKEN_ID), ALEX_ADDRESS, 5)
    chain.mint_erc1155(ENJIN, int(SPIRIT_CLASH_TOKEN_ID), ALEX_ADDRESS, 3)
    return chain


@pytest.fixture
def port(chain: InMemoryChain, config: SeaportConfig, api: OpenSeaAPI) -> OpenSeaPort:
    """Client over the in-memory chain and the fake API."""
    return OpenSeaPort(chain, config, api=api)
