"""Primitive field types shared by the asset and order models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

from seaport.errors import OrderValidationError

# The null address doubles as the native-currency (ether) payment token
NULL_ADDRESS = "0x0000000000000000000000000000000000000000"

UINT256_MAX = 2**256 - 1


def validate_uint256(value: Any) -> int:
    """Coerce an int or decimal string into a uint256.

    Order amounts arrive from the API as decimal strings and from callers
    as ints; both become ints here.

    Raises:
        ValueError: For bools, non-integers, negatives and values above 2^256 - 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Expected an int or decimal string, got {type(value).__name__}")

    if isinstance(value, str):
        try:
            value = int(value, 10)
        except ValueError as err:
            raise ValueError(f"Not a decimal integer: {value!r}") from err

    if not 0 <= value <= UINT256_MAX:
        raise ValueError(f"{value} is outside the uint256 range")
    return value


# 0x followed by 40 hex digits, any case
Address = Annotated[str, Field(pattern=r"^0x[0-9a-fA-F]{40}$")]

# Held as int, written to JSON as a decimal string
Uint256 = Annotated[
    int,
    BeforeValidator(validate_uint256),
    PlainSerializer(str, return_type=str, when_used="json"),
    Field(description="256-bit unsigned integer"),
]

# 0x-prefixed byte string
Bytes = Annotated[str, Field(pattern=r"^0x([0-9a-fA-F]{2})*$")]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Lowercase an address and make sure it carries the 0x prefix.

    Args:
        address: Address in any case, with or without 0x
        validate: Raise instead of returning a malformed address

    Raises:
        ValueError: If validate is set and the result is not 20 hex bytes
    """
    normalized = address.lower()
    if normalized[:2] != "0x":
        normalized = "0x" + normalized
    if validate and not is_valid_address(normalized):
        raise ValueError(f"Invalid address: {address}")
    return normalized


def validate_account_address(address: str) -> str:
    """Normalize an account address supplied by the caller.

    Raises:
        OrderValidationError: If the address is not 0x plus 40 hex digits
    """
    try:
        return normalize_address(address, validate=True)
    except ValueError as err:
        raise OrderValidationError(str(err)) from err


def is_valid_address(address: str) -> bool:
    """True for 0x plus exactly 40 hex digits."""
    if not isinstance(address, str) or len(address) != 42 or address[:2] != "0x":
        return False
    try:
        int(address[2:], 16)
    except ValueError:
        return False
    return True


def hex_to_bytes(value: str) -> bytes:
    """Decode a 0x-prefixed hex string ("0x" decodes to empty bytes)."""
    if value.startswith("0x"):
        value = value[2:]
    return bytes.fromhex(value)


def bytes_to_hex(value: bytes) -> str:
    """Encode bytes as a 0x-prefixed lowercase hex string."""
    return "0x" + value.hex()
