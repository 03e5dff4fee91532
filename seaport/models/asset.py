"""Pydantic models for assets, asset contracts and payment tokens.

API payloads follow the marketplace REST API (snake_case keys); the
client-side Asset input and the Wyvern asset/bundle metadata follow the
order JSON format.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from seaport.models.types import Address, Uint256, normalize_address


class WyvernSchemaName(str, Enum):
    """Token standard of an asset."""

    ERC20 = "ERC20"
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"


class Asset(BaseModel):
    """An asset to trade, identified by contract address and token id.

    Fungible (ERC-20) assets have no token id. When schema_name is not
    given the asset is treated as an ERC-721 token.
    """

    token_address: Address = Field(alias="tokenAddress")
    token_id: str | None = Field(default=None, alias="tokenId")
    schema_name: WyvernSchemaName | None = Field(default=None, alias="schemaName")
    decimals: int | None = Field(default=None, ge=0, le=77)
    name: str | None = None

    model_config = {"populate_by_name": True}

    @field_validator("token_id", mode="before")
    @classmethod
    def _token_id_to_str(cls, value: object) -> object:
        # Token ids are uint256 and routinely exceed float precision
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class OpenSeaAssetContract(BaseModel):
    """Asset contract metadata, including its fee schedule."""

    address: Address
    name: str | None = None
    schema_name: WyvernSchemaName | None = None
    buyer_fee_basis_points: int = 0
    seller_fee_basis_points: int = 0
    opensea_buyer_fee_basis_points: int = 0
    opensea_seller_fee_basis_points: int = 0
    dev_buyer_fee_basis_points: int = 0
    dev_seller_fee_basis_points: int = 0
    external_link: str | None = None


class AssetOwner(BaseModel):
    """Owner account of an asset."""

    address: Address


class OpenSeaAsset(BaseModel):
    """Asset metadata as returned by the marketplace API."""

    token_id: str | None = None
    asset_contract: OpenSeaAssetContract
    name: str | None = None
    description: str | None = None
    owner: AssetOwner | None = None
    image_url: str | None = None

    @property
    def token_address(self) -> str:
        """Address of the asset's contract."""
        return normalize_address(self.asset_contract.address)


class PaymentToken(BaseModel):
    """A fungible token accepted as payment."""

    address: Address
    decimals: int = Field(ge=0, le=77)
    symbol: str | None = None
    name: str | None = None
    image_url: str | None = None
    eth_price: str | None = None
    usd_price: str | None = None


class PaymentTokenList(BaseModel):
    """Result of a payment token query."""

    tokens: list[PaymentToken] = Field(default_factory=list)


class WyvernAsset(BaseModel):
    """Asset as encoded into order metadata.

    Attributes:
        address: Lowercase token contract address
        id: Token id (None for fungible tokens)
        quantity: Amount in base units (None for ERC-721 tokens)
    """

    address: Address
    id: str | None = None
    quantity: Uint256 | None = None


class WyvernBundle(BaseModel):
    """Ordered bundle of assets with a schema per asset."""

    assets: list[WyvernAsset]
    schemas: list[WyvernSchemaName]
    name: str | None = None
    description: str | None = None
    external_link: str | None = None
