"""Bundle assembly: turn client-side assets into a canonical Wyvern bundle."""

from __future__ import annotations

from collections.abc import Sequence

from seaport.errors import OrderValidationError
from seaport.models.asset import Asset, WyvernAsset, WyvernBundle
from seaport.models.types import normalize_address
from seaport.pricing import Amount, to_decimal
from seaport.schemas import Schema, get_schema


def is_homogeneous(assets: Sequence[Asset]) -> bool:
    """True if every asset comes from the same token contract."""
    if not assets:
        return False
    first = normalize_address(assets[0].token_address)
    return all(normalize_address(a.token_address) == first for a in assets)


def quantities_to_base_units(
    assets: Sequence[Asset],
    quantities: Sequence[Amount],
) -> list[int]:
    """Scale each quantity by its asset's decimals (0 when unset).

    Raises:
        OrderValidationError: On a count mismatch, a non-numeric quantity or a
            fractional base-unit amount
    """
    if len(assets) != len(quantities):
        raise OrderValidationError("Bundle must have a quantity for every asset")

    result = []
    for asset, quantity in zip(assets, quantities):
        scaled = to_decimal(quantity, "Quantity").scaleb(asset.decimals or 0)
        if scaled != scaled.to_integral_value():
            raise OrderValidationError(
                f"Quantity {quantity} of {asset.token_address} has too many decimal places"
            )
        result.append(int(scaled))
    return result


def _sort_key(asset: WyvernAsset) -> tuple[str, int]:
    return (asset.address, int(asset.id) if asset.id is not None else 0)


def get_wyvern_bundle(
    assets: Sequence[Asset],
    schemas: Sequence[Schema],
    quantities: Sequence[int],
) -> WyvernBundle:
    """Build a bundle with one schema and quantity per asset.

    Assets are sorted by contract address, then token id, and their schemas
    follow them, so the same set of assets always encodes the same way
    regardless of input order.

    Args:
        assets: Assets to bundle
        schemas: Schema of each asset, in the same order
        quantities: Base-unit quantity of each asset, in the same order

    Returns:
        The sorted bundle

    Raises:
        OrderValidationError: On mismatched lengths or duplicate assets
    """
    if len(assets) != len(quantities):
        raise OrderValidationError("Bundle must have a quantity for every asset")
    if len(assets) != len(schemas):
        raise OrderValidationError("Bundle must have a schema for every asset")
    if not assets:
        raise OrderValidationError("Bundle must contain at least one asset")

    wy_assets = [
        schema.asset_from_fields(asset, quantity)
        for asset, schema, quantity in zip(assets, schemas, quantities)
    ]

    keys = [_sort_key(a) for a in wy_assets]
    if len(set(keys)) != len(keys):
        raise OrderValidationError("Bundle can't contain duplicate assets")

    ordered = sorted(zip(wy_assets, schemas), key=lambda pair: _sort_key(pair[0]))
    return WyvernBundle(
        assets=[asset for asset, _ in ordered],
        schemas=[schema.name for _, schema in ordered],
    )


def schemas_for_assets(assets: Sequence[Asset]) -> list[Schema]:
    """Schema of each asset (ERC-721 when unspecified)."""
    return [get_schema(asset.schema_name) for asset in assets]
