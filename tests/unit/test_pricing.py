"""Tests for order price and time parameters."""

from decimal import Decimal

import pytest

from seaport.constants import NULL_ADDRESS
from seaport.errors import OrderValidationError
from seaport.models import OrderSide, PaymentToken
from seaport.pricing import get_price_parameters, get_time_parameters, to_base_units, to_wei

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
NOW = 1_700_000_000
ONE_DAY = 24 * 60 * 60


@pytest.fixture
def weth() -> PaymentToken:
    return PaymentToken(address=WETH, decimals=18, symbol="WETH")


@pytest.fixture
def usdc() -> PaymentToken:
    return PaymentToken(address=USDC, decimals=6, symbol="USDC")


class TestUnitConversion:
    def test_to_wei(self):
        assert to_wei("1.5") == 1_500_000_000_000_000_000
        assert to_wei(0) == 0

    def test_to_wei_rounds_sub_wei(self):
        assert to_wei(Decimal("0.0000000000000000015")) == 2
        assert to_wei(Decimal("0.0000000000000000014")) == 1

    def test_to_base_units_exact(self):
        assert to_base_units("12.345678", 6) == 12_345_678

    def test_to_base_units_rejects_extra_precision(self):
        with pytest.raises(OrderValidationError, match="more than 6 decimal places"):
            to_base_units("0.0000001", 6)

    def test_rejects_non_numbers(self):
        with pytest.raises(OrderValidationError, match="must be a number"):
            to_wei("lots")


class TestPriceParameters:
    def test_fixed_price_in_ether(self):
        params = get_price_parameters(OrderSide.SELL, NULL_ADDRESS, None, 0, "0.5")
        assert params.base_price == 5 * 10**17
        assert params.extra == 0
        assert params.payment_token == NULL_ADDRESS
        assert params.reserve_price is None

    def test_dutch_auction_extra_is_price_drop(self, weth):
        params = get_price_parameters(
            OrderSide.SELL, WETH, weth, NOW + ONE_DAY, 2, end_amount="0.5"
        )
        assert params.base_price == 2 * 10**18
        assert params.extra == 15 * 10**17

    def test_erc20_decimals(self, usdc):
        params = get_price_parameters(OrderSide.BUY, USDC, usdc, 0, "19.99")
        assert params.base_price == 19_990_000

    def test_english_auction_reserve(self, weth):
        params = get_price_parameters(
            OrderSide.SELL,
            WETH,
            weth,
            NOW + ONE_DAY,
            1,
            waiting_for_best_counter_order=True,
            english_auction_reserve_price=2,
        )
        assert params.reserve_price == 2 * 10**18

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            (dict(start_amount=None), "Starting price must be a number >= 0"),
            (dict(start_amount=-1), "Starting price must be a number >= 0"),
            (
                dict(start_amount=1, waiting_for_best_counter_order=True, expiration_time=NOW),
                "English auctions must use wrapped ETH",
            ),
            (dict(start_amount=1, end_amount=2, expiration_time=NOW), "End price must be less"),
            (dict(start_amount=2, end_amount=1), "Expiration time must be set"),
            (
                dict(start_amount=1, english_auction_reserve_price=2),
                "Reserve prices may only be set on English auctions.",
            ),
        ],
    )
    def test_sell_in_ether_rejections(self, kwargs, message):
        arguments = dict(expiration_time=0)
        arguments.update(kwargs)
        with pytest.raises(OrderValidationError, match=message):
            get_price_parameters(OrderSide.SELL, NULL_ADDRESS, None, **arguments)

    def test_offers_need_a_token(self):
        with pytest.raises(OrderValidationError, match="Offers must use wrapped ETH"):
            get_price_parameters(OrderSide.BUY, NULL_ADDRESS, None, 0, 1)

    def test_unknown_token(self):
        with pytest.raises(OrderValidationError, match="No ERC-20 token found"):
            get_price_parameters(OrderSide.BUY, WETH, None, 0, 1)

    def test_reserve_below_start(self, weth):
        with pytest.raises(OrderValidationError, match="Reserve price must be greater"):
            get_price_parameters(
                OrderSide.SELL,
                WETH,
                weth,
                NOW + ONE_DAY,
                2,
                waiting_for_best_counter_order=True,
                english_auction_reserve_price=1,
            )


class TestTimeParameters:
    def test_listing_defaults_to_just_before_now(self):
        params = get_time_parameters(0, now=NOW)
        assert params.listing_time == NOW - 100
        assert params.expiration_time == 0

    def test_scheduled_listing(self):
        params = get_time_parameters(NOW + ONE_DAY, listing_time=NOW + 60, now=NOW)
        assert params.listing_time == NOW + 60
        assert params.expiration_time == NOW + ONE_DAY

    def test_english_auction_lists_at_expiration(self):
        params = get_time_parameters(NOW + ONE_DAY, waiting_for_best_counter_order=True, now=NOW)
        assert params.listing_time == NOW + ONE_DAY
        assert params.expiration_time == NOW + ONE_DAY + 7 * ONE_DAY

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            (dict(expiration_time=NOW + 5), "Expiration time must be at least 10 seconds"),
            (
                dict(expiration_time=0, waiting_for_best_counter_order=True),
                "English auctions must have an expiration time.",
            ),
            (
                dict(
                    expiration_time=NOW + ONE_DAY,
                    waiting_for_best_counter_order=True,
                    listing_time=NOW + 60,
                ),
                "Cannot schedule an English auction for the future.",
            ),
            (
                dict(expiration_time=0, listing_time=NOW - 1000),
                "Listing time cannot be in the past.",
            ),
            (
                dict(expiration_time=NOW + 60, listing_time=NOW + 60),
                "Listing time must be before the expiration time.",
            ),
        ],
    )
    def test_rejections(self, kwargs, message):
        with pytest.raises(OrderValidationError, match=message):
            get_time_parameters(now=NOW, **kwargs)
