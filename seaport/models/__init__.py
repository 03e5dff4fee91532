"""Pydantic models for marketplace data structures."""

from seaport.models.asset import (
    Asset,
    AssetOwner,
    OpenSeaAsset,
    OpenSeaAssetContract,
    PaymentToken,
    PaymentTokenList,
    WyvernAsset,
    WyvernBundle,
    WyvernSchemaName,
)
from seaport.models.order import (
    FeeMethod,
    HowToCall,
    Order,
    OrderMetadata,
    OrderSide,
    SaleKind,
    UnhashedOrder,
)
from seaport.models.types import NULL_ADDRESS, Address, Bytes, Uint256

__all__ = [
    # Types
    "Address",
    "Bytes",
    "Uint256",
    "NULL_ADDRESS",
    # Asset models
    "Asset",
    "AssetOwner",
    "OpenSeaAsset",
    "OpenSeaAssetContract",
    "PaymentToken",
    "PaymentTokenList",
    "WyvernAsset",
    "WyvernBundle",
    "WyvernSchemaName",
    # Order models
    "FeeMethod",
    "HowToCall",
    "Order",
    "OrderMetadata",
    "OrderSide",
    "SaleKind",
    "UnhashedOrder",
]
