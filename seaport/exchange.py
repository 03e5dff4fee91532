"""Local re-implementation of the Wyvern exchange's match rules.

Mirrors the checks the exchange contract runs before atomicMatch:
order parameter validation, ordersCanMatch, orderCalldataCanMatch and
calculateMatchPrice. Running them locally catches malformed orders
before any transaction is sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from seaport.constants import NULL_ADDRESS
from seaport.encoding import order_calldata_can_match
from seaport.models.order import FeeMethod, OrderSide, SaleKind, UnhashedOrder
from seaport.models.types import normalize_address


class MatchError(Enum):
    """Reasons a buy and sell order cannot be matched."""

    INVALID_BUY_PARAMETERS = "invalid_buy_parameters"
    INVALID_SELL_PARAMETERS = "invalid_sell_parameters"
    WRONG_SIDES = "wrong_sides"
    FEE_METHOD_MISMATCH = "fee_method_mismatch"
    PAYMENT_TOKEN_MISMATCH = "payment_token_mismatch"
    SELL_TAKER_MISMATCH = "sell_taker_mismatch"
    BUY_TAKER_MISMATCH = "buy_taker_mismatch"
    FEE_RECIPIENT_CONFLICT = "fee_recipient_conflict"
    TARGET_MISMATCH = "target_mismatch"
    HOW_TO_CALL_MISMATCH = "how_to_call_mismatch"
    BUY_NOT_SETTLEABLE = "buy_not_settleable"
    SELL_NOT_SETTLEABLE = "sell_not_settleable"
    CALLDATA_MISMATCH = "calldata_mismatch"
    PRICE_MISMATCH = "price_mismatch"


@dataclass(frozen=True)
class MatchResult:
    """Result of checking a buy order against a sell order.

    Attributes:
        price: Price the buyer pays, if the orders match
        error: Why the orders do not match, if they don't
        error_detail: Optional human-readable detail about the error

    Examples:
        result = check_orders_match(buy, sell, exchange, now)
        if result.is_valid:
            settle(result.price)
    """

    price: int | None
    error: MatchError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the orders can be matched."""
        return self.error is None

    @classmethod
    def matched(cls, price: int) -> MatchResult:
        """Create a successful result."""
        return cls(price=price)

    @classmethod
    def with_error(cls, error: MatchError, detail: str | None = None) -> MatchResult:
        """Create an error result."""
        return cls(price=None, error=error, error_detail=detail)


def can_settle_order(listing_time: int, expiration_time: int, now: int) -> bool:
    """An order is live after its listing time and before its expiration (0 = never)."""
    return listing_time < now and (expiration_time == 0 or now < expiration_time)


def validate_sale_kind_parameters(sale_kind: SaleKind, expiration_time: int) -> bool:
    """Dutch auctions need an expiration time to decay towards."""
    return sale_kind == SaleKind.FIXED_PRICE or expiration_time > 0


def validate_order_parameters(order: UnhashedOrder, exchange_address: str) -> bool:
    """Check the parameters the exchange validates on every order.

    Args:
        order: Order to check
        exchange_address: Address of the exchange the order must target

    Returns:
        True if the order is well-formed for this exchange
    """
    if normalize_address(order.exchange) != normalize_address(exchange_address):
        return False
    if not validate_sale_kind_parameters(order.sale_kind, order.expiration_time):
        return False
    if order.fee_method == FeeMethod.SPLIT_FEE and (
        order.maker_protocol_fee < 0 or order.taker_protocol_fee < 0
    ):
        return False
    return True


def calculate_final_price(
    side: OrderSide,
    sale_kind: SaleKind,
    base_price: int,
    extra: int,
    listing_time: int,
    expiration_time: int,
    now: int,
) -> int:
    """Current price of an order.

    Fixed-price orders cost base_price. Dutch auctions move linearly by
    extra between listing and expiration: sell prices fall, buy prices rise.
    """
    if sale_kind == SaleKind.FIXED_PRICE:
        return base_price

    elapsed = max(now - listing_time, 0)
    duration = expiration_time - listing_time
    if duration <= 0:
        raise ArithmeticError("Dutch auction expiration must be after its listing time")
    diff = extra * elapsed // duration

    if side == OrderSide.SELL:
        if diff > base_price:
            raise ArithmeticError("Dutch auction price decayed below zero")
        return base_price - diff
    return base_price + diff


def _same(a: str, b: str) -> bool:
    return normalize_address(a) == normalize_address(b)


def _current_price(order: UnhashedOrder, now: int) -> int:
    return calculate_final_price(
        order.side,
        order.sale_kind,
        order.base_price,
        order.extra,
        order.listing_time,
        order.expiration_time,
        now,
    )


def check_orders_match(
    buy: UnhashedOrder,
    sell: UnhashedOrder,
    exchange_address: str,
    now: int,
) -> MatchResult:
    """Run every exchange check on a buy/sell pair.

    Args:
        buy: The buy-side order
        sell: The sell-side order
        exchange_address: Exchange both orders must target
        now: Current chain timestamp

    Returns:
        MatchResult with the match price or the first failed check
    """
    if not validate_order_parameters(buy, exchange_address):
        return MatchResult.with_error(MatchError.INVALID_BUY_PARAMETERS)
    if not validate_order_parameters(sell, exchange_address):
        return MatchResult.with_error(MatchError.INVALID_SELL_PARAMETERS)

    if buy.side != OrderSide.BUY or sell.side != OrderSide.SELL:
        return MatchResult.with_error(
            MatchError.WRONG_SIDES, f"buy.side={buy.side.name}, sell.side={sell.side.name}"
        )
    if buy.fee_method != sell.fee_method:
        return MatchResult.with_error(MatchError.FEE_METHOD_MISMATCH)
    if not _same(buy.payment_token, sell.payment_token):
        return MatchResult.with_error(
            MatchError.PAYMENT_TOKEN_MISMATCH,
            f"buy pays {buy.payment_token}, sell wants {sell.payment_token}",
        )
    if not (_same(sell.taker, NULL_ADDRESS) or _same(sell.taker, buy.maker)):
        return MatchResult.with_error(
            MatchError.SELL_TAKER_MISMATCH, f"sell is reserved for {sell.taker}"
        )
    if not (_same(buy.taker, NULL_ADDRESS) or _same(buy.taker, sell.maker)):
        return MatchResult.with_error(
            MatchError.BUY_TAKER_MISMATCH, f"buy is reserved for {buy.taker}"
        )

    # Exactly one side is the maker and carries the fee recipient
    sell_has_recipient = not _same(sell.fee_recipient, NULL_ADDRESS)
    buy_has_recipient = not _same(buy.fee_recipient, NULL_ADDRESS)
    if sell_has_recipient == buy_has_recipient:
        return MatchResult.with_error(MatchError.FEE_RECIPIENT_CONFLICT)

    if not _same(buy.target, sell.target):
        return MatchResult.with_error(MatchError.TARGET_MISMATCH)
    if buy.how_to_call != sell.how_to_call:
        return MatchResult.with_error(MatchError.HOW_TO_CALL_MISMATCH)
    if not can_settle_order(buy.listing_time, buy.expiration_time, now):
        return MatchResult.with_error(MatchError.BUY_NOT_SETTLEABLE)
    if not can_settle_order(sell.listing_time, sell.expiration_time, now):
        return MatchResult.with_error(MatchError.SELL_NOT_SETTLEABLE)

    if not order_calldata_can_match(
        buy.calldata, buy.replacement_pattern, sell.calldata, sell.replacement_pattern
    ):
        return MatchResult.with_error(MatchError.CALLDATA_MISMATCH)

    sell_price = _current_price(sell, now)
    buy_price = _current_price(buy, now)
    if buy_price < sell_price:
        return MatchResult.with_error(
            MatchError.PRICE_MISMATCH, f"buy price {buy_price} < sell price {sell_price}"
        )

    # The maker's price wins
    return MatchResult.matched(sell_price if sell_has_recipient else buy_price)
