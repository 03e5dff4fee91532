"""Price and time parameters for new orders.

Prices are given in whole token units (e.g. 1.5 WETH) and stored on the
order in base units. A Dutch auction stores its starting price as
base_price and the total decay (start - end) as extra.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from seaport.constants import (
    ETHER_DECIMALS,
    LISTING_TIME_OFFSET_SECONDS,
    MIN_EXPIRATION_SECONDS,
    NULL_ADDRESS,
    ORDER_MATCHING_LATENCY_SECONDS,
)
from seaport.errors import OrderValidationError
from seaport.models.asset import PaymentToken
from seaport.models.order import OrderSide
from seaport.models.types import normalize_address

Amount = int | float | str | Decimal


@dataclass(frozen=True)
class PriceParameters:
    """Price fields for an order, in base units of the payment token."""

    base_price: int
    extra: int
    payment_token: str
    reserve_price: int | None = None


@dataclass(frozen=True)
class TimeParameters:
    """Listing and expiration timestamps (unix seconds; expiration 0 = never)."""

    listing_time: int
    expiration_time: int


def to_decimal(amount: Amount, name: str) -> Decimal:
    """Parse a user-supplied amount, naming it in the error when it is not a finite number."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation as err:
        raise OrderValidationError(f"{name} must be a number, got {amount!r}") from err
    if not value.is_finite():
        raise OrderValidationError(f"{name} must be a finite number, got {amount!r}")
    return value


def to_base_units(amount: Amount, decimals: int) -> int:
    """Convert a whole-unit amount into base units.

    Raises:
        OrderValidationError: If the amount has more decimal places than the token
    """
    scaled = to_decimal(amount, "Amount").scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise OrderValidationError(
            f"Amount {amount} has more than {decimals} decimal places"
        )
    return int(scaled)


def to_wei(amount: Amount) -> int:
    """Convert an ether amount to wei, rounding sub-wei remainders."""
    scaled = to_decimal(amount, "Amount").scaleb(ETHER_DECIMALS)
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def get_price_parameters(
    side: OrderSide,
    payment_token_address: str,
    payment_token: PaymentToken | None,
    expiration_time: int,
    start_amount: Amount | None,
    end_amount: Amount | None = None,
    waiting_for_best_counter_order: bool = False,
    english_auction_reserve_price: Amount | None = None,
) -> PriceParameters:
    """Compute and validate the price fields of an order.

    Args:
        side: Order side
        payment_token_address: Token the order is priced in (null address = ether)
        payment_token: Metadata for that token, None if unknown
        expiration_time: Order expiration (0 = never)
        start_amount: Starting price in whole token units
        end_amount: Ending price for Dutch auctions
        waiting_for_best_counter_order: Whether this is an English auction
        english_auction_reserve_price: Minimum winning bid for English auctions

    Returns:
        PriceParameters in base units

    Raises:
        OrderValidationError: If any price rule is violated
    """
    token_address = normalize_address(payment_token_address)
    is_ether = token_address == NULL_ADDRESS

    if start_amount is None:
        raise OrderValidationError("Starting price must be a number >= 0")
    start = to_decimal(start_amount, "Starting price")
    end = to_decimal(end_amount, "Ending price") if end_amount is not None else None
    price_diff = start - end if end is not None else Decimal(0)
    reserve = (
        to_decimal(english_auction_reserve_price, "Reserve price")
        if english_auction_reserve_price is not None
        else None
    )

    if start < 0:
        raise OrderValidationError("Starting price must be a number >= 0")
    if not is_ether and payment_token is None:
        raise OrderValidationError(f"No ERC-20 token found for '{token_address}'")
    if is_ether and waiting_for_best_counter_order:
        raise OrderValidationError("English auctions must use wrapped ETH or an ERC-20 token.")
    if is_ether and side == OrderSide.BUY:
        raise OrderValidationError("Offers must use wrapped ETH or an ERC-20 token.")
    if price_diff < 0:
        raise OrderValidationError("End price must be less than or equal to the start price.")
    if price_diff > 0 and expiration_time == 0:
        raise OrderValidationError("Expiration time must be set if order will change in price.")
    if reserve is not None and not waiting_for_best_counter_order:
        raise OrderValidationError("Reserve prices may only be set on English auctions.")
    if reserve is not None and reserve < start:
        raise OrderValidationError(
            "Reserve price must be greater than or equal to the start amount."
        )

    if is_ether:
        base_price = to_wei(start)
        extra = to_wei(price_diff)
        reserve_price = to_wei(reserve) if reserve is not None else None
    else:
        assert payment_token is not None
        base_price = to_base_units(start, payment_token.decimals)
        extra = to_base_units(price_diff, payment_token.decimals)
        reserve_price = (
            to_base_units(reserve, payment_token.decimals) if reserve is not None else None
        )

    return PriceParameters(
        base_price=base_price,
        extra=extra,
        payment_token=token_address,
        reserve_price=reserve_price,
    )


def get_time_parameters(
    expiration_time: int,
    waiting_for_best_counter_order: bool = False,
    listing_time: int | None = None,
    now: int | None = None,
) -> TimeParameters:
    """Compute and validate the listing and expiration times of an order.

    Args:
        expiration_time: Requested expiration (0 = never)
        waiting_for_best_counter_order: Whether this is an English auction
        listing_time: Scheduled listing time, defaults to slightly before now
        now: Current unix time (defaults to the system clock)

    Returns:
        TimeParameters

    Raises:
        OrderValidationError: If the times are inconsistent
    """
    if now is None:
        now = int(time.time())

    min_expiration = now + MIN_EXPIRATION_SECONDS
    if expiration_time != 0 and expiration_time < min_expiration:
        raise OrderValidationError(
            f"Expiration time must be at least {MIN_EXPIRATION_SECONDS} seconds from now, "
            "or zero (non-expiring)."
        )
    if waiting_for_best_counter_order and expiration_time == 0:
        raise OrderValidationError("English auctions must have an expiration time.")
    if listing_time is not None:
        if waiting_for_best_counter_order:
            raise OrderValidationError("Cannot schedule an English auction for the future.")
        if listing_time < now - LISTING_TIME_OFFSET_SECONDS:
            raise OrderValidationError("Listing time cannot be in the past.")
        if expiration_time != 0 and listing_time >= expiration_time:
            raise OrderValidationError("Listing time must be before the expiration time.")

    if waiting_for_best_counter_order:
        # The auction ends at the requested expiration; bids can be matched
        # against it for a week afterwards
        return TimeParameters(
            listing_time=expiration_time,
            expiration_time=expiration_time + ORDER_MATCHING_LATENCY_SECONDS,
        )

    if listing_time is None:
        listing_time = now - LISTING_TIME_OFFSET_SECONDS
    return TimeParameters(listing_time=listing_time, expiration_time=expiration_time)
