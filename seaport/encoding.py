"""Calldata and replacement-pattern encoding for Wyvern orders.

A buy order and a sell order each carry the calldata their maker expects
the exchange to execute, plus a replacement pattern (a byte mask). Before
comparing the two calldatas, the exchange copies the masked bytes of the
counter order into each one, so a sell order can leave the recipient
blank and a buy order can leave the current owner blank.

Bundles wrap one transfer call per asset into a single
atomicize(address[],uint256[],uint256[],bytes) call that the maker's
proxy delegate-calls on the atomicizer library.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_abi import encode  # type: ignore[attr-defined]

from seaport.constants import NULL_ADDRESS, WYVERN_ATOMICIZER_ADDRESSES, Network
from seaport.errors import OrderValidationError
from seaport.models.asset import WyvernAsset
from seaport.models.order import OrderSide
from seaport.models.types import bytes_to_hex, hex_to_bytes, normalize_address
from seaport.schemas import FunctionAbi, FunctionInputKind, Schema

# atomicize(address[],uint256[],uint256[],bytes)
ATOMICIZE_SELECTOR = bytes.fromhex("68f0bcaa")

WORD_SIZE = 32
SELECTOR_SIZE = 4


@dataclass(frozen=True)
class CallEncoding:
    """Calldata for one call and the mask of bytes a counter order may fill.

    Attributes:
        target: Contract the call is sent to
        calldata: 0x-prefixed calldata
        replacement_pattern: 0x-prefixed mask ("0x" when nothing is replaceable)
    """

    target: str
    calldata: str
    replacement_pattern: str


def _is_dynamic(abi_type: str) -> bool:
    return abi_type in ("bytes", "string") or abi_type.endswith("[]")


def _default_value(abi_type: str) -> Any:
    """Zero value for an ABI type."""
    if abi_type == "address":
        return NULL_ADDRESS
    if abi_type == "bool":
        return False
    if abi_type == "bytes":
        return b""
    if abi_type == "string":
        return ""
    if abi_type.endswith("[]"):
        return []
    return 0


def _to_abi_value(abi_type: str, value: Any) -> Any:
    if abi_type == "address":
        return hex_to_bytes(normalize_address(value))
    return value


def encode_call(abi: FunctionAbi, parameters: list[Any]) -> str:
    """Encode a call: selector followed by the ABI-encoded parameters.

    Args:
        abi: The function being called
        parameters: One value per input, in order

    Returns:
        0x-prefixed calldata
    """
    if len(parameters) != len(abi.inputs):
        raise ValueError(
            f"{abi.name} takes {len(abi.inputs)} parameters, got {len(parameters)}"
        )
    values = [_to_abi_value(t, v) for t, v in zip(abi.types, parameters, strict=True)]
    return bytes_to_hex(abi.selector + encode(abi.types, values))


def encode_replacement_pattern(
    abi: FunctionAbi,
    replace_kind: FunctionInputKind = FunctionInputKind.REPLACEABLE,
) -> str:
    """Build the mask selecting every input of the given kind.

    The selector and all other inputs are masked with zero bytes. Dynamic
    inputs contribute a zero head word and a zero tail of their encoded
    size; they can never be replaced.

    Raises:
        ValueError: If an input of the replaced kind is dynamic
    """
    head = bytearray()
    tail = bytearray()
    for function_input in abi.inputs:
        replaced = function_input.kind == replace_kind
        if _is_dynamic(function_input.type):
            if replaced:
                raise ValueError("Replacement is not supported for dynamic parameters.")
            value = (
                function_input.value
                if function_input.value is not None
                else _default_value(function_input.type)
            )
            head += bytes(WORD_SIZE)
            # Tail size is the standalone encoding minus its offset word
            tail += bytes(len(encode([function_input.type], [value])) - WORD_SIZE)
            continue
        head += (b"\xff" if replaced else b"\x00") * WORD_SIZE

    return bytes_to_hex(bytes(SELECTOR_SIZE) + bytes(head) + bytes(tail))


def encode_default_call(abi: FunctionAbi, address: str) -> str:
    """Encode a call with the owner set to address and the recipient left blank."""
    parameters = []
    for function_input in abi.inputs:
        if function_input.kind == FunctionInputKind.REPLACEABLE:
            parameters.append(_default_value(function_input.type))
        elif function_input.kind == FunctionInputKind.OWNER:
            parameters.append(address)
        else:
            parameters.append(function_input.value)
    return encode_call(abi, parameters)


def encode_sell(schema: Schema, asset: WyvernAsset, address: str) -> CallEncoding:
    """Encode the seller's side of a transfer.

    The owner input is the seller; the recipient is blank and replaceable.
    """
    transfer = schema.transfer(asset)
    return CallEncoding(
        target=transfer.target,
        calldata=encode_default_call(transfer, address),
        replacement_pattern=encode_replacement_pattern(transfer),
    )


def encode_buy(schema: Schema, asset: WyvernAsset, address: str) -> CallEncoding:
    """Encode the buyer's side of a transfer.

    The recipient input is the buyer; the owner is blank and replaceable.

    Raises:
        OrderValidationError: If the transfer does not have exactly one recipient input
    """
    transfer = schema.transfer(asset)
    replaceables = transfer.inputs_of_kind(FunctionInputKind.REPLACEABLE)
    owner_inputs = transfer.inputs_of_kind(FunctionInputKind.OWNER)

    if len(replaceables) != 1:
        raise OrderValidationError(
            "Only 1 input can match transfer destination, "
            f"but instead {len(replaceables)} did"
        )

    parameters = []
    for function_input in transfer.inputs:
        if function_input.kind == FunctionInputKind.REPLACEABLE:
            parameters.append(address)
        elif function_input.kind == FunctionInputKind.OWNER:
            parameters.append(_default_value(function_input.type))
        else:
            parameters.append(function_input.value)

    replacement_pattern = "0x"
    if owner_inputs:
        replacement_pattern = encode_replacement_pattern(transfer, FunctionInputKind.OWNER)

    return CallEncoding(
        target=transfer.target,
        calldata=encode_call(transfer, parameters),
        replacement_pattern=replacement_pattern,
    )


def encode_atomicized_replacement_pattern(
    abis: list[FunctionAbi],
    replace_kind: FunctionInputKind = FunctionInputKind.REPLACEABLE,
) -> str:
    """Mask for an atomicize call wrapping the given transfers.

    Only bytes inside the concatenated calldatas may be replaced; the
    selector, offsets, target/value/length arrays and padding may not.
    """
    count = len(abis)
    # 4 offset words, then three arrays (length word + one word per call),
    # then the length word of the concatenated calldatas
    fixed = SELECTOR_SIZE + 4 * WORD_SIZE + 3 * (WORD_SIZE + count * WORD_SIZE) + WORD_SIZE

    inner = b"".join(hex_to_bytes(encode_replacement_pattern(abi, replace_kind)) for abi in abis)
    padding = (-len(inner)) % WORD_SIZE
    return bytes_to_hex(bytes(fixed) + inner + bytes(padding))


def _encode_atomicized(
    schemas: list[Schema],
    assets: list[WyvernAsset],
    address: str,
    network: Network,
    side: OrderSide,
) -> CallEncoding:
    if len(schemas) != len(assets):
        raise OrderValidationError("Bundle must have a schema for every asset")

    encoder = encode_sell if side == OrderSide.SELL else encode_buy
    encodings = [encoder(schema, asset, address) for schema, asset in zip(schemas, assets)]
    calldatas = [hex_to_bytes(e.calldata) for e in encodings]

    calldata = ATOMICIZE_SELECTOR + encode(
        ["address[]", "uint256[]", "uint256[]", "bytes"],
        [
            [hex_to_bytes(normalize_address(e.target)) for e in encodings],
            [0] * len(encodings),
            [len(c) for c in calldatas],
            b"".join(calldatas),
        ],
    )

    replace_kind = (
        FunctionInputKind.OWNER if side == OrderSide.BUY else FunctionInputKind.REPLACEABLE
    )
    abis = [schema.transfer(asset) for schema, asset in zip(schemas, assets)]
    return CallEncoding(
        target=WYVERN_ATOMICIZER_ADDRESSES[network],
        calldata=bytes_to_hex(calldata),
        replacement_pattern=encode_atomicized_replacement_pattern(abis, replace_kind),
    )


def encode_atomicized_sell(
    schemas: list[Schema],
    assets: list[WyvernAsset],
    address: str,
    network: Network = Network.MAIN,
) -> CallEncoding:
    """Encode the seller's side of a bundle transfer through the atomicizer."""
    return _encode_atomicized(schemas, assets, address, network, OrderSide.SELL)


def encode_atomicized_buy(
    schemas: list[Schema],
    assets: list[WyvernAsset],
    address: str,
    network: Network = Network.MAIN,
) -> CallEncoding:
    """Encode the buyer's side of a bundle transfer through the atomicizer."""
    return _encode_atomicized(schemas, assets, address, network, OrderSide.BUY)


def guarded_array_replace(array: bytes, desired: bytes, mask: bytes) -> bytes:
    """Copy the masked bits of desired into array.

    Raises:
        ValueError: If the three byte strings differ in length
    """
    if not (len(array) == len(desired) == len(mask)):
        raise ValueError(
            f"Length mismatch: array={len(array)}, desired={len(desired)}, mask={len(mask)}"
        )
    return bytes((a & ~m & 0xFF) | (d & m) for a, d, m in zip(array, desired, mask))


def order_calldata_can_match(
    buy_calldata: str,
    buy_replacement_pattern: str,
    sell_calldata: str,
    sell_replacement_pattern: str,
) -> bool:
    """Check whether two orders' calldatas agree after mutual replacement."""
    buy = hex_to_bytes(buy_calldata)
    sell = hex_to_bytes(sell_calldata)
    buy_mask = hex_to_bytes(buy_replacement_pattern)
    sell_mask = hex_to_bytes(sell_replacement_pattern)

    try:
        if buy_mask:
            buy = guarded_array_replace(buy, sell, buy_mask)
        if sell_mask:
            sell = guarded_array_replace(sell, buy, sell_mask)
    except ValueError:
        return False

    return buy == sell
