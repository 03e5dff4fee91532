"""Order hashing and salt generation.

The order hash is keccak256 over the tightly packed order fields, in the
order the exchange contract hashes them. Makers sign this hash.
"""

from __future__ import annotations

import secrets

from eth_abi.packed import encode_packed
from eth_utils import keccak

from seaport.models.order import Order, UnhashedOrder
from seaport.models.types import bytes_to_hex, hex_to_bytes, normalize_address

ORDER_HASH_TYPES = [
    "address",  # exchange
    "address",  # maker
    "address",  # taker
    "uint256",  # makerRelayerFee
    "uint256",  # takerRelayerFee
    "uint256",  # makerProtocolFee
    "uint256",  # takerProtocolFee
    "address",  # feeRecipient
    "uint8",  # feeMethod
    "uint8",  # side
    "uint8",  # saleKind
    "address",  # target
    "uint8",  # howToCall
    "bytes",  # calldata
    "bytes",  # replacementPattern
    "address",  # staticTarget
    "bytes",  # staticExtradata
    "address",  # paymentToken
    "uint256",  # basePrice
    "uint256",  # extra
    "uint256",  # listingTime
    "uint256",  # expirationTime
    "uint256",  # salt
]


def _address(value: str) -> bytes:
    return hex_to_bytes(normalize_address(value))


def get_order_hash(order: UnhashedOrder) -> str:
    """Compute the exchange hash of an order.

    Args:
        order: The order to hash (any existing hash/signature is ignored)

    Returns:
        0x-prefixed 32-byte hash
    """
    values = [
        _address(order.exchange),
        _address(order.maker),
        _address(order.taker),
        order.maker_relayer_fee,
        order.taker_relayer_fee,
        order.maker_protocol_fee,
        order.taker_protocol_fee,
        _address(order.fee_recipient),
        int(order.fee_method),
        int(order.side),
        int(order.sale_kind),
        _address(order.target),
        int(order.how_to_call),
        hex_to_bytes(order.calldata),
        hex_to_bytes(order.replacement_pattern),
        _address(order.static_target),
        hex_to_bytes(order.static_extradata),
        _address(order.payment_token),
        order.base_price,
        order.extra,
        order.listing_time,
        order.expiration_time,
        order.salt,
    ]
    return bytes_to_hex(keccak(encode_packed(ORDER_HASH_TYPES, values)))


def hash_order(order: UnhashedOrder) -> Order:
    """Return a copy of the order with its hash attached."""
    data = order.model_dump(exclude={"hash", "v", "r", "s"})
    return Order(**data, hash=get_order_hash(order))


def generate_pseudo_random_salt() -> int:
    """Random 256-bit salt that makes otherwise identical orders distinct."""
    return secrets.randbits(256)
