"""Fee configuration for order construction."""

from dataclasses import dataclass

from seaport.constants import (
    DEFAULT_BUYER_FEE_BASIS_POINTS,
    DEFAULT_MAX_BOUNTY,
    DEFAULT_SELLER_FEE_BASIS_POINTS,
    INVERSE_BASIS_POINT,
    OPENSEA_FEE_RECIPIENT,
    OPENSEA_SELLER_BOUNTY_BASIS_POINTS,
)


@dataclass(frozen=True)
class FeeConfig:
    """Centralized configuration for fee calculation.

    Defaults apply to orders whose assets span several contracts; orders
    over a single contract use that contract's fee schedule instead.

    Attributes:
        buyer_fee_basis_points: Default total buyer fee (default: 0)
        seller_fee_basis_points: Default total seller fee (default: 250)
        opensea_seller_bounty_basis_points: Bounty the marketplace adds for
            referrers on top of any seller bounty (default: 100)
        max_bounty_basis_points: Upper bound on seller bounty plus the
            marketplace bounty when no contract fees apply (default: 250)
        inverse_basis_point: Basis points in 100% (10,000)
        fee_recipient: Address receiving relayer fees
    """

    buyer_fee_basis_points: int = DEFAULT_BUYER_FEE_BASIS_POINTS
    seller_fee_basis_points: int = DEFAULT_SELLER_FEE_BASIS_POINTS
    opensea_seller_bounty_basis_points: int = OPENSEA_SELLER_BOUNTY_BASIS_POINTS
    max_bounty_basis_points: int = DEFAULT_MAX_BOUNTY
    inverse_basis_point: int = INVERSE_BASIS_POINT
    fee_recipient: str = OPENSEA_FEE_RECIPIENT


# Default configuration instance
DEFAULT_FEE_CONFIG = FeeConfig()
