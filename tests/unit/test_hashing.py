"""Tests for order hashing and salts."""

import pytest

from seaport.constants import NULL_ADDRESS, OPENSEA_FEE_RECIPIENT
from seaport.hashing import (
    ORDER_HASH_TYPES,
    generate_pseudo_random_salt,
    get_order_hash,
    hash_order,
)
from seaport.models import Order, OrderSide, UnhashedOrder


def make_order(**overrides) -> UnhashedOrder:
    fields = dict(
        exchange="0x7be8076f4ea4a4ad08075c2508e481d6c946d12b",
        maker="0xe96a1b303a1eb8d04fb973eb2b291b8d591c8f72",
        maker_relayer_fee=250,
        taker_relayer_fee=0,
        fee_recipient=OPENSEA_FEE_RECIPIENT,
        side=OrderSide.SELL,
        target="0xc99f70bfd82fb7c8f8191fdfbfb735606b15e5c5",
        calldata="0x23b872dd",
        replacement_pattern="0x00000000",
        payment_token=NULL_ADDRESS,
        base_price=10**18,
        listing_time=1_699_999_900,
        expiration_time=0,
        salt=42,
    )
    fields.update(overrides)
    return UnhashedOrder(**fields)


class TestGetOrderHash:
    def test_hashes_every_exchange_field(self):
        assert len(ORDER_HASH_TYPES) == 23

    def test_is_32_bytes(self):
        order_hash = get_order_hash(make_order())
        assert order_hash.startswith("0x")
        assert len(order_hash) == 66

    def test_deterministic(self):
        assert get_order_hash(make_order()) == get_order_hash(make_order())

    @pytest.mark.parametrize(
        "field,value",
        [
            ("salt", 43),
            ("base_price", 10**18 + 1),
            ("side", OrderSide.BUY),
            ("calldata", "0x23b872de"),
            ("taker", "0x0eb61ed9e8b4a1d8b5ff0a0a47b4cbbc7c5f8d2e"),
        ],
    )
    def test_changes_with_fields(self, field, value):
        assert get_order_hash(make_order(**{field: value})) != get_order_hash(make_order())

    def test_metadata_is_not_hashed(self):
        base = make_order()
        referred = make_order(metadata={"referrer_address": OPENSEA_FEE_RECIPIENT})
        assert get_order_hash(base) == get_order_hash(referred)

    def test_address_case_does_not_matter(self):
        upper = make_order(maker="0xE96A1B303A1EB8D04FB973EB2B291B8D591C8F72")
        assert get_order_hash(upper) == get_order_hash(make_order())


class TestHashOrder:
    def test_attaches_hash(self):
        order = make_order()
        hashed = hash_order(order)
        assert isinstance(hashed, Order)
        assert hashed.hash == get_order_hash(order)
        assert not hashed.is_signed

    def test_rehashing_ignores_signature(self):
        hashed = hash_order(make_order())
        signed = hashed.model_copy(update={"v": 27, "r": "0x" + "11" * 32, "s": "0x" + "22" * 32})
        assert hash_order(signed).hash == hashed.hash


class TestSalt:
    def test_range(self):
        salt = generate_pseudo_random_salt()
        assert 0 <= salt < 2**256

    def test_distinct(self):
        assert len({generate_pseudo_random_salt() for _ in range(10)}) == 10
