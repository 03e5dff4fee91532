"""Tests for the in-memory chain."""

import pytest

from seaport.chain import InMemoryChain
from seaport.errors import ApprovalError

TOKEN = "0x06012c8cf97bead5deae237070f9587f8e7a266d"
ALICE = "0xe96a1b303a1eb8d04fb973eb2b291b8d591c8f72"
BOB = "0x0eb61ed9e8b4a1d8b5ff0a0a47b4cbbc7c5f8d2e"
PROXY = "0x9a1b2c3d4e5f60718293a4b5c6d7e8f901234567"


@pytest.fixture
def chain() -> InMemoryChain:
    return InMemoryChain(now=1_700_000_000)


class TestReads:
    @pytest.mark.asyncio
    async def test_fixed_clock(self, chain):
        assert await chain.get_block_timestamp() == 1_700_000_000

    @pytest.mark.asyncio
    async def test_balances_ignore_address_case(self, chain):
        chain.set_erc20_balance(TOKEN.upper().replace("0X", "0x"), ALICE, 7)
        chain.set_ether_balance(ALICE, 3)
        assert await chain.erc20_balance_of(TOKEN, ALICE.upper().replace("0X", "0x")) == 7
        assert await chain.get_ether_balance(ALICE) == 3
        assert await chain.get_ether_balance(BOB) == 0

    @pytest.mark.asyncio
    async def test_erc721_owner(self, chain):
        chain.mint_erc721(TOKEN, 1, ALICE)
        assert await chain.erc721_owner_of(TOKEN, 1) == ALICE
        assert await chain.erc721_owner_of(TOKEN, 2) is None

    @pytest.mark.asyncio
    async def test_erc1155_mints_accumulate(self, chain):
        chain.mint_erc1155(TOKEN, 5, ALICE, 2)
        chain.mint_erc1155(TOKEN, 5, ALICE, 3)
        assert await chain.erc1155_balance_of(TOKEN, ALICE, 5) == 5

    @pytest.mark.asyncio
    async def test_failing_contract(self, chain):
        chain.fail_calls_to(TOKEN)
        with pytest.raises(RuntimeError, match="reverted"):
            await chain.erc20_balance_of(TOKEN, ALICE)


class TestProxies:
    @pytest.mark.asyncio
    async def test_register_proxy(self, chain):
        assert await chain.get_proxy(ALICE) is None

        tx_hash = await chain.register_proxy(ALICE)
        proxy = await chain.get_proxy(ALICE)

        assert proxy is not None and len(proxy) == 42
        assert proxy != ALICE
        receipt = await chain.wait_for_transaction(tx_hash)
        assert receipt.succeeded
        assert [tx.method for tx in chain.transactions] == ["registerProxy"]

    @pytest.mark.asyncio
    async def test_preset_proxy(self, chain):
        chain.set_proxy(ALICE, PROXY)
        assert await chain.get_proxy(ALICE) == PROXY


class TestApprovals:
    @pytest.mark.asyncio
    async def test_erc20_approve(self, chain):
        await chain.erc20_approve(TOKEN, ALICE, PROXY, 100)
        assert await chain.erc20_allowance(TOKEN, ALICE, PROXY) == 100
        (tx,) = chain.transactions_for("approve")
        assert tx.sender == ALICE
        assert tx.target == TOKEN
        assert tx.args == (PROXY, 100)

    @pytest.mark.asyncio
    async def test_approve_for_all(self, chain):
        assert await chain.is_approved_for_all(TOKEN, ALICE, PROXY) is False
        await chain.set_approval_for_all(TOKEN, ALICE, PROXY, True)
        assert await chain.is_approved_for_all(TOKEN, ALICE, PROXY) is True

    @pytest.mark.asyncio
    async def test_approve_for_all_unsupported(self, chain):
        chain.disable_approve_all(TOKEN)
        assert await chain.is_approved_for_all(TOKEN, ALICE, PROXY) is None
        with pytest.raises(ApprovalError, match="does not support setApprovalForAll"):
            await chain.set_approval_for_all(TOKEN, ALICE, PROXY, True)

    @pytest.mark.asyncio
    async def test_erc721_approve_requires_owner(self, chain):
        chain.mint_erc721(TOKEN, 1, ALICE)
        with pytest.raises(ApprovalError, match="does not own"):
            await chain.erc721_approve(TOKEN, BOB, PROXY, 1)

        await chain.erc721_approve(TOKEN, ALICE, PROXY, 1)
        assert await chain.erc721_get_approved(TOKEN, 1) == PROXY


class TestTransactions:
    @pytest.mark.asyncio
    async def test_unknown_transaction(self, chain):
        with pytest.raises(ApprovalError, match="Unknown transaction"):
            await chain.wait_for_transaction("0x" + "00" * 32)

    @pytest.mark.asyncio
    async def test_hashes_are_unique(self, chain):
        first = await chain.erc20_approve(TOKEN, ALICE, PROXY, 1)
        second = await chain.erc20_approve(TOKEN, ALICE, PROXY, 1)
        assert first != second


class TestSigning:
    @pytest.mark.asyncio
    async def test_deterministic(self, chain):
        message = "0x" + "12" * 32
        first = await chain.sign_message(ALICE, message)
        second = await chain.sign_message(ALICE, message)
        assert first == second
        assert first.v == 27
        assert len(first.r) == 66 and len(first.s) == 66

    @pytest.mark.asyncio
    async def test_depends_on_signer(self, chain):
        message = "0x" + "12" * 32
        assert await chain.sign_message(ALICE, message) != await chain.sign_message(BOB, message)
