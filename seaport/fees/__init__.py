"""Fee calculation module for order construction.

This module provides centralized fee handling including:
- Marketplace and developer fees per asset contract
- Seller bounty validation
- Maker/taker fee placement for buy and sell orders

Usage:
    from seaport.fees import DefaultFeeCalculator, FeeConfig

    calculator = DefaultFeeCalculator(FeeConfig(seller_fee_basis_points=200))
    fees = calculator.compute_fees(OrderSide.SELL, asset_contract, extra_bounty_basis_points=50)
    params = calculator.get_sell_fee_parameters(
        fees.total_buyer_fee_basis_points,
        fees.total_seller_fee_basis_points,
        wait_for_highest_bid=False,
        seller_bounty_basis_points=fees.seller_bounty_basis_points,
    )
"""

from seaport.fees.calculator import DEFAULT_FEE_CALCULATOR, DefaultFeeCalculator
from seaport.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from seaport.fees.result import ComputedFees, FeeParameters

__all__ = [
    # Calculator
    "DefaultFeeCalculator",
    "DEFAULT_FEE_CALCULATOR",
    # Config
    "FeeConfig",
    "DEFAULT_FEE_CONFIG",
    # Result
    "ComputedFees",
    "FeeParameters",
]
