"""
KodeChain Hex Wire Helpers

All byte values cross the wire as lowercase hex with a leading 0x marker.
"""

from __future__ import annotations
import re
import secrets
from typing import Callable, Union

from kodechain.constants import (
    HEX_PREFIX,
    ADDRESS_HEX_LENGTH,
    LEGACY_ADDRESS_HEX_LENGTH,
)
from kodechain.errors import (
    InvalidHexError,
    InvalidAddressError,
    UnsupportedTypeError,
)

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
_ADDRESS_PATTERN = re.compile(
    r"0x(?:[0-9a-fA-F]{%d}|[0-9a-fA-F]{%d})"
    % (LEGACY_ADDRESS_HEX_LENGTH, ADDRESS_HEX_LENGTH)
)


# ==============================================================================
# Prefix Handling
# ==============================================================================

def strip_hex_prefix(value: str) -> str:
    """Remove the 0x marker if present."""
    return value[2:] if value.startswith(HEX_PREFIX) else value


def add_hex_prefix(value: str) -> str:
    """Add the 0x marker if missing."""
    return value if value.startswith(HEX_PREFIX) else HEX_PREFIX + value


def is_valid_hex(value: str, require_prefix: bool = True) -> bool:
    """Check that value is a hex string (0x-prefixed unless require_prefix is False)."""
    if not isinstance(value, str):
        return False
    if require_prefix and not value.startswith(HEX_PREFIX):
        return False
    return bool(_HEX_DIGITS.fullmatch(strip_hex_prefix(value)))


def pad_hex(value: str, length: int) -> str:
    """Left-pad a hex string with zeros to length digits, keeping the marker."""
    return HEX_PREFIX + strip_hex_prefix(value).rjust(length, "0")


# ==============================================================================
# Conversion
# ==============================================================================

def hex_to_bytes(value: Union[str, BytesLike], field: str = "hex") -> bytes:
    """
    Convert key material or payloads to raw bytes.

    Strings are read as hex with or without the 0x marker. Bytes-like
    values are returned unchanged.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, str):
        raise UnsupportedTypeError(value, "hex string or bytes")

    digits = strip_hex_prefix(value)
    if len(digits) % 2 != 0 or not _HEX_DIGITS.fullmatch(digits):
        raise InvalidHexError(value, field)
    return bytes.fromhex(digits)


def bytes_to_hex(data: BytesLike) -> str:
    """Render bytes as 0x-prefixed lowercase hex."""
    return HEX_PREFIX + bytes(data).hex()


def string_to_hex(text: str) -> str:
    """UTF-8 encode text and render as 0x hex."""
    return bytes_to_hex(text.encode("utf-8"))


def hex_to_string(value: str) -> str:
    """Decode 0x hex into UTF-8 text."""
    return hex_to_bytes(value).decode("utf-8")


def random_hex(length: int, random_source: Callable[[int], bytes] = secrets.token_bytes) -> str:
    """Return length random bytes as 0x hex."""
    return bytes_to_hex(random_source(length))


# ==============================================================================
# Addresses
# ==============================================================================

def is_valid_address(address: str) -> bool:
    """
    Check address shape: 0x + 64 hex chars (canonical) or 0x + 40 hex
    chars (legacy 20-byte form).
    """
    return isinstance(address, str) and bool(_ADDRESS_PATTERN.fullmatch(address))


def validate_address(address: str) -> str:
    """Return the lowercase address, or raise InvalidAddressError."""
    if not is_valid_address(address):
        raise InvalidAddressError(address)
    return address.lower()


def to_legacy_address(address: str) -> str:
    """
    Map an address onto the 20-byte form.

    Keeps the low 20 bytes, the same bytes the ABI `address` decoder
    returns for a word holding a 32-byte address.
    """
    address = validate_address(address)
    return HEX_PREFIX + strip_hex_prefix(address)[-LEGACY_ADDRESS_HEX_LENGTH:]


def shorten_address(address: str, chars: int = 4) -> str:
    """Shorten an address for display: 0x1234...abcd."""
    if not address or len(address) < chars * 2 + 2:
        return address
    return f"{address[:chars + 2]}...{address[-chars:]}"
