"""Token schemas: how each token standard is transferred through the exchange.

A schema turns a WyvernAsset into the ABI of the call that moves it. Each
call input is tagged with a kind that tells the encoders how to fill it:

- OWNER: the current owner (the seller); zeroed and replaced on buy orders
- REPLACEABLE: the recipient (the buyer); zeroed and replaced on sell orders
- ASSET: fixed by the asset (token id, quantity)
- DATA: fixed auxiliary data
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from seaport.errors import OrderValidationError
from seaport.models.asset import Asset, WyvernAsset, WyvernSchemaName
from seaport.models.types import normalize_address, validate_uint256

# Function selectors
# transferFrom(address,address,uint256)
TRANSFER_FROM_SELECTOR = bytes.fromhex("23b872dd")
# safeTransferFrom(address,address,uint256,uint256,bytes)
ERC1155_SAFE_TRANSFER_FROM_SELECTOR = bytes.fromhex("f242432a")

# Assets without an explicit schema are ERC-721 tokens
DEFAULT_SCHEMA_NAME = WyvernSchemaName.ERC721


class FunctionInputKind(str, Enum):
    """Role of a call input in order matching."""

    OWNER = "owner"
    REPLACEABLE = "replaceable"
    ASSET = "asset"
    DATA = "data"


@dataclass(frozen=True)
class FunctionInput:
    """One argument of a transfer call."""

    name: str
    type: str
    kind: FunctionInputKind
    value: Any = None


@dataclass(frozen=True)
class FunctionAbi:
    """A concrete transfer call against a token contract.

    Attributes:
        name: Solidity function name
        selector: 4-byte function selector
        target: Contract the call is sent to
        inputs: Call inputs in ABI order
    """

    name: str
    selector: bytes
    target: str
    inputs: tuple[FunctionInput, ...]

    @property
    def types(self) -> list[str]:
        """ABI types of the inputs, in order."""
        return [i.type for i in self.inputs]

    def inputs_of_kind(self, kind: FunctionInputKind) -> list[FunctionInput]:
        """Inputs with the given kind."""
        return [i for i in self.inputs if i.kind == kind]


@dataclass(frozen=True)
class Schema:
    """A token standard and its transfer function.

    Attributes:
        name: Schema name
        fungible: Whether assets of this schema have no token id
        transfer: Builds the transfer call for an asset
    """

    name: WyvernSchemaName
    fungible: bool
    transfer: Callable[[WyvernAsset], FunctionAbi] = field(repr=False)

    def asset_from_fields(self, asset: Asset, quantity: int) -> WyvernAsset:
        """Convert a client-side asset into its order-metadata form.

        Args:
            asset: The asset to convert
            quantity: Amount in base units

        Returns:
            WyvernAsset for this schema

        Raises:
            OrderValidationError: If the asset does not fit the schema
        """
        address = normalize_address(asset.token_address)
        if quantity <= 0:
            raise OrderValidationError(
                f"Quantity must be positive for {self.name.value} asset {address}"
            )

        if self.fungible:
            if asset.token_id is not None:
                raise OrderValidationError(
                    f"{self.name.value} asset {address} must not have a token id"
                )
            return WyvernAsset(address=address, quantity=quantity)

        if asset.token_id is None:
            raise OrderValidationError(f"{self.name.value} asset {address} requires a token id")

        try:
            token_id = str(validate_uint256(asset.token_id))
        except ValueError as err:
            raise OrderValidationError(
                f"Invalid token id {asset.token_id!r} for {self.name.value} asset {address}"
            ) from err

        if self.name == WyvernSchemaName.ERC721:
            if quantity != 1:
                raise OrderValidationError(
                    f"ERC721 asset {address}/{token_id} can only be traded "
                    f"with quantity 1, got {quantity}"
                )
            return WyvernAsset(address=address, id=token_id)

        return WyvernAsset(address=address, id=token_id, quantity=quantity)


def _erc721_transfer(asset: WyvernAsset) -> FunctionAbi:
    return FunctionAbi(
        name="transferFrom",
        selector=TRANSFER_FROM_SELECTOR,
        target=asset.address,
        inputs=(
            FunctionInput("_from", "address", FunctionInputKind.OWNER),
            FunctionInput("_to", "address", FunctionInputKind.REPLACEABLE),
            FunctionInput("_tokenId", "uint256", FunctionInputKind.ASSET, int(asset.id or 0)),
        ),
    )


def _erc1155_transfer(asset: WyvernAsset) -> FunctionAbi:
    return FunctionAbi(
        name="safeTransferFrom",
        selector=ERC1155_SAFE_TRANSFER_FROM_SELECTOR,
        target=asset.address,
        inputs=(
            FunctionInput("_from", "address", FunctionInputKind.OWNER),
            FunctionInput("_to", "address", FunctionInputKind.REPLACEABLE),
            FunctionInput("_id", "uint256", FunctionInputKind.ASSET, int(asset.id or 0)),
            FunctionInput("_value", "uint256", FunctionInputKind.ASSET, asset.quantity or 0),
            FunctionInput("_data", "bytes", FunctionInputKind.DATA, b""),
        ),
    )


def _erc20_transfer(asset: WyvernAsset) -> FunctionAbi:
    return FunctionAbi(
        name="transferFrom",
        selector=TRANSFER_FROM_SELECTOR,
        target=asset.address,
        inputs=(
            FunctionInput("_from", "address", FunctionInputKind.OWNER),
            FunctionInput("_to", "address", FunctionInputKind.REPLACEABLE),
            FunctionInput("_amount", "uint256", FunctionInputKind.ASSET, asset.quantity or 0),
        ),
    )


SCHEMAS: dict[WyvernSchemaName, Schema] = {
    WyvernSchemaName.ERC20: Schema(WyvernSchemaName.ERC20, fungible=True, transfer=_erc20_transfer),
    WyvernSchemaName.ERC721: Schema(
        WyvernSchemaName.ERC721, fungible=False, transfer=_erc721_transfer
    ),
    WyvernSchemaName.ERC1155: Schema(
        WyvernSchemaName.ERC1155, fungible=False, transfer=_erc1155_transfer
    ),
}


def get_schema(name: WyvernSchemaName | str | None = None) -> Schema:
    """Look up a schema by name.

    Args:
        name: Schema name; None selects the ERC-721 schema

    Returns:
        The schema

    Raises:
        OrderValidationError: If no schema has that name
    """
    if name is None:
        return SCHEMAS[DEFAULT_SCHEMA_NAME]
    try:
        return SCHEMAS[WyvernSchemaName(name)]
    except ValueError as err:
        raise OrderValidationError(f"Trading for this asset ({name}) is not yet supported") from err
