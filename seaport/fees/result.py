"""Fee calculation result types."""

from dataclasses import dataclass

from seaport.models.order import FeeMethod


@dataclass(frozen=True)
class ComputedFees:
    """Basis-point fees that apply to an order.

    Attributes:
        total_buyer_fee_basis_points: Marketplace plus developer buyer fee
        total_seller_fee_basis_points: Marketplace plus developer seller fee
        opensea_buyer_fee_basis_points: Marketplace share of the buyer fee
        opensea_seller_fee_basis_points: Marketplace share of the seller fee
        dev_buyer_fee_basis_points: Developer share of the buyer fee
        dev_seller_fee_basis_points: Developer share of the seller fee
        seller_bounty_basis_points: Extra bounty the seller pays a referrer
    """

    total_buyer_fee_basis_points: int
    total_seller_fee_basis_points: int
    opensea_buyer_fee_basis_points: int = 0
    opensea_seller_fee_basis_points: int = 0
    dev_buyer_fee_basis_points: int = 0
    dev_seller_fee_basis_points: int = 0
    seller_bounty_basis_points: int = 0


@dataclass(frozen=True)
class FeeParameters:
    """Fee fields to place on an order.

    Protocol fees are always zero: the marketplace charges relayer fees
    through the split-fee method.
    """

    maker_relayer_fee: int
    taker_relayer_fee: int
    maker_referrer_fee: int
    fee_recipient: str
    maker_protocol_fee: int = 0
    taker_protocol_fee: int = 0
    fee_method: FeeMethod = FeeMethod.SPLIT_FEE
