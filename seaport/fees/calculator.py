"""Fee calculator for buy and sell orders.

Fee rules:
- Orders over a single asset contract pay that contract's marketplace and
  developer fees; other orders pay the configured defaults.
- Private orders (sold to one named buyer) pay no fees.
- Only sell orders carry a seller bounty, and the bounty plus the
  marketplace's own referral bounty must fit inside the marketplace
  seller fee.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from seaport.constants import NULL_ADDRESS
from seaport.errors import FeeError
from seaport.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from seaport.fees.result import ComputedFees, FeeParameters
from seaport.models.order import OrderSide

if TYPE_CHECKING:
    from seaport.models.asset import OpenSeaAssetContract
    from seaport.models.order import UnhashedOrder

logger = structlog.get_logger()


class DefaultFeeCalculator:
    """Default implementation of fee calculation.

    Attributes:
        config: Fee configuration settings
    """

    def __init__(self, config: FeeConfig | None = None):
        """Initialize with optional configuration.

        Args:
            config: Fee configuration. Uses DEFAULT_FEE_CONFIG if not provided.
        """
        self.config = config or DEFAULT_FEE_CONFIG

    def compute_fees(
        self,
        side: OrderSide,
        asset_contract: OpenSeaAssetContract | None = None,
        extra_bounty_basis_points: int = 0,
        is_private: bool = False,
    ) -> ComputedFees:
        """Compute the fees that apply to an order.

        Args:
            side: Order side
            asset_contract: Contract whose fee schedule applies, if the order
                only trades assets from one contract
            extra_bounty_basis_points: Bounty the seller offers to referrers
            is_private: Whether the order is reserved for one buyer

        Returns:
            ComputedFees for the order

        Raises:
            FeeError: If the bounty exceeds what the fee schedule allows
        """
        opensea_buyer = self.config.buyer_fee_basis_points
        opensea_seller = self.config.seller_fee_basis_points
        dev_buyer = 0
        dev_seller = 0
        max_total_bounty = self.config.max_bounty_basis_points

        if asset_contract is not None:
            opensea_buyer = asset_contract.opensea_buyer_fee_basis_points
            opensea_seller = asset_contract.opensea_seller_fee_basis_points
            dev_buyer = asset_contract.dev_buyer_fee_basis_points
            dev_seller = asset_contract.dev_seller_fee_basis_points
            max_total_bounty = opensea_seller

        if is_private:
            opensea_buyer = opensea_seller = dev_buyer = dev_seller = 0

        seller_bounty = extra_bounty_basis_points if side == OrderSide.SELL else 0
        if seller_bounty < 0:
            raise FeeError("Bounty must be at least 0%")

        bounty_too_large = (
            seller_bounty + self.config.opensea_seller_bounty_basis_points > max_total_bounty
        )
        if seller_bounty > 0 and bounty_too_large:
            message = (
                f"Total bounty exceeds the maximum for this asset type "
                f"({max_total_bounty / 100}%)."
            )
            if max_total_bounty >= self.config.opensea_seller_bounty_basis_points:
                message += (
                    " Remember that OpenSea will add "
                    f"{self.config.opensea_seller_bounty_basis_points / 100}% "
                    "for referrers with OpenSea accounts!"
                )
            logger.debug(
                "bounty_too_large",
                seller_bounty_basis_points=seller_bounty,
                max_total_bounty_basis_points=max_total_bounty,
            )
            raise FeeError(message)

        return ComputedFees(
            total_buyer_fee_basis_points=opensea_buyer + dev_buyer,
            total_seller_fee_basis_points=opensea_seller + dev_seller,
            opensea_buyer_fee_basis_points=opensea_buyer,
            opensea_seller_fee_basis_points=opensea_seller,
            dev_buyer_fee_basis_points=dev_buyer,
            dev_seller_fee_basis_points=dev_seller,
            seller_bounty_basis_points=seller_bounty,
        )

    def validate_fees(
        self,
        total_buyer_fee_basis_points: int,
        total_seller_fee_basis_points: int,
    ) -> None:
        """Check that both fees lie within 0% and 100%.

        Raises:
            FeeError: If either fee is out of range
        """
        upper = self.config.inverse_basis_point
        if total_buyer_fee_basis_points > upper or total_seller_fee_basis_points > upper:
            raise FeeError(f"Invalid buyer/seller fees: must be less than {upper // 100}%")
        if total_buyer_fee_basis_points < 0 or total_seller_fee_basis_points < 0:
            raise FeeError("Invalid buyer/seller fees: must be at least 0%")

    def get_buy_fee_parameters(
        self,
        total_buyer_fee_basis_points: int,
        total_seller_fee_basis_points: int,
        sell_order: UnhashedOrder | None = None,
    ) -> FeeParameters:
        """Fee fields for a buy order.

        A bid on an existing sell order copies that order's fees so that it
        can only match it. English-auction sell orders are takers, so their
        maker and taker fees are swapped.
        """
        self.validate_fees(total_buyer_fee_basis_points, total_seller_fee_basis_points)

        if sell_order is not None:
            if sell_order.waiting_for_best_counter_order:
                maker_relayer_fee = sell_order.maker_relayer_fee
                taker_relayer_fee = sell_order.taker_relayer_fee
            else:
                maker_relayer_fee = sell_order.taker_relayer_fee
                taker_relayer_fee = sell_order.maker_relayer_fee
        else:
            maker_relayer_fee = total_buyer_fee_basis_points
            taker_relayer_fee = total_seller_fee_basis_points

        return FeeParameters(
            maker_relayer_fee=maker_relayer_fee,
            taker_relayer_fee=taker_relayer_fee,
            maker_referrer_fee=0,
            fee_recipient=self.config.fee_recipient,
        )

    def get_sell_fee_parameters(
        self,
        total_buyer_fee_basis_points: int,
        total_seller_fee_basis_points: int,
        wait_for_highest_bid: bool,
        seller_bounty_basis_points: int = 0,
    ) -> FeeParameters:
        """Fee fields for a sell order.

        English auctions (wait_for_highest_bid) are matched by the winning
        bid acting as maker, so the sell order leaves the fee recipient
        empty, swaps maker and taker fees and carries no bounty.
        """
        self.validate_fees(total_buyer_fee_basis_points, total_seller_fee_basis_points)

        if wait_for_highest_bid:
            return FeeParameters(
                maker_relayer_fee=total_buyer_fee_basis_points,
                taker_relayer_fee=total_seller_fee_basis_points,
                maker_referrer_fee=0,
                fee_recipient=NULL_ADDRESS,
            )

        return FeeParameters(
            maker_relayer_fee=total_seller_fee_basis_points,
            taker_relayer_fee=total_buyer_fee_basis_points,
            maker_referrer_fee=seller_bounty_basis_points,
            fee_recipient=self.config.fee_recipient,
        )


# Default calculator instance
DEFAULT_FEE_CALCULATOR = DefaultFeeCalculator()
