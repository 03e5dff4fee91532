"""Pydantic models for Wyvern orders.

Field order and integer encodings match the exchange contract. JSON uses
camelCase keys and decimal strings for uint fields.
"""

from enum import IntEnum

from pydantic import BaseModel, Field

from seaport.models.asset import WyvernAsset, WyvernBundle, WyvernSchemaName
from seaport.models.types import NULL_ADDRESS, Address, Bytes, Uint256


class OrderSide(IntEnum):
    """Whether the order buys or sells the assets."""

    BUY = 0
    SELL = 1


class SaleKind(IntEnum):
    """How the order price evolves over time."""

    FIXED_PRICE = 0
    DUTCH_AUCTION = 1


class HowToCall(IntEnum):
    """How the maker's proxy invokes the order target."""

    CALL = 0
    DELEGATE_CALL = 1


class FeeMethod(IntEnum):
    """How fees are charged."""

    PROTOCOL_FEE = 0
    SPLIT_FEE = 1


class OrderMetadata(BaseModel):
    """What the order trades: a single asset or a bundle."""

    asset: WyvernAsset | None = None
    bundle: WyvernBundle | None = None
    schema_name: WyvernSchemaName | None = Field(default=None, alias="schema")
    referrer_address: Address | None = Field(default=None, alias="referrerAddress")

    model_config = {"populate_by_name": True}


class UnhashedOrder(BaseModel):
    """An order as built by the client, before hashing and signing."""

    exchange: Address
    maker: Address
    taker: Address = NULL_ADDRESS
    quantity: Uint256 = 1
    maker_relayer_fee: Uint256 = Field(alias="makerRelayerFee")
    taker_relayer_fee: Uint256 = Field(alias="takerRelayerFee")
    maker_protocol_fee: Uint256 = Field(default=0, alias="makerProtocolFee")
    taker_protocol_fee: Uint256 = Field(default=0, alias="takerProtocolFee")
    maker_referrer_fee: Uint256 = Field(default=0, alias="makerReferrerFee")
    waiting_for_best_counter_order: bool = Field(
        default=False, alias="waitingForBestCounterOrder"
    )
    fee_method: FeeMethod = Field(default=FeeMethod.SPLIT_FEE, alias="feeMethod")
    fee_recipient: Address = Field(alias="feeRecipient")
    side: OrderSide
    sale_kind: SaleKind = Field(default=SaleKind.FIXED_PRICE, alias="saleKind")
    target: Address
    how_to_call: HowToCall = Field(default=HowToCall.CALL, alias="howToCall")
    calldata: Bytes
    replacement_pattern: Bytes = Field(alias="replacementPattern")
    static_target: Address = Field(default=NULL_ADDRESS, alias="staticTarget")
    static_extradata: Bytes = Field(default="0x", alias="staticExtradata")
    payment_token: Address = Field(alias="paymentToken")
    base_price: Uint256 = Field(alias="basePrice")
    extra: Uint256 = 0
    listing_time: Uint256 = Field(alias="listingTime")
    expiration_time: Uint256 = Field(alias="expirationTime")
    salt: Uint256
    english_auction_reserve_price: Uint256 | None = Field(
        default=None, alias="englishAuctionReservePrice"
    )
    metadata: OrderMetadata = Field(default_factory=OrderMetadata)

    model_config = {"populate_by_name": True}

    @property
    def is_buy_order(self) -> bool:
        """Return True if this is a buy order."""
        return self.side == OrderSide.BUY

    @property
    def is_sell_order(self) -> bool:
        """Return True if this is a sell order."""
        return self.side == OrderSide.SELL

    @property
    def is_bundle(self) -> bool:
        """Return True if the order trades a bundle of assets."""
        return self.metadata.bundle is not None

    @property
    def is_private(self) -> bool:
        """Return True if only one specific taker can fill the order."""
        return self.taker != NULL_ADDRESS

    def to_json(self) -> dict:
        """Serialize in the order JSON wire format."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class Order(UnhashedOrder):
    """A hashed order, optionally carrying its maker's signature."""

    hash: Bytes
    v: int | None = None
    r: Bytes | None = None
    s: Bytes | None = None

    @property
    def is_signed(self) -> bool:
        """Return True if the order carries a signature."""
        return self.v is not None and self.r is not None and self.s is not None
