"""
KodeChain ABI Codec

Call data is the 4-byte selector followed by one 32-byte word per
parameter. There is no dynamic encoding: no offsets, no length prefixes,
no count header.

All functions are pure; values are the tagged types from
kodechain.core.types, so encoding intent never depends on string shape.
"""

from __future__ import annotations
import logging
import re
from typing import Any, List, Sequence

from kodechain.constants import (
    HEX_PREFIX,
    WORD_HEX_LENGTH,
    SELECTOR_SIZE,
    ADDRESS_HEX_LENGTH,
    LEGACY_ADDRESS_HEX_LENGTH,
)
from kodechain.core.hexutil import strip_hex_prefix, is_valid_hex
from kodechain.core.types import (
    UnsignedInteger,
    Address,
    Boolean,
    ByteBlob,
    AbiValue,
)
from kodechain.crypto.hash import quantum_hash
from kodechain.errors import (
    InvalidHexError,
    InvalidParameterError,
    LengthMismatchError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")
_UINT_TYPE = re.compile(r"u?int(\d*)")


# ==============================================================================
# Selectors
# ==============================================================================

def normalize_signature(signature: str) -> str:
    """Remove all whitespace from a function signature."""
    return _WHITESPACE.sub("", signature)


def function_selector(signature: str) -> str:
    """
    4-byte selector of a function signature.

    Whitespace is ignored, so "transfer(address, uint256)" and
    "transfer(address,uint256)" share a selector. Collisions are not
    checked.

    Returns:
        str: 8 hex chars, no marker
    """
    normalized = normalize_signature(signature)
    if not normalized:
        raise InvalidParameterError("signature", "empty function signature")
    return quantum_hash(normalized)[:SELECTOR_SIZE].hex()


# ==============================================================================
# Encoding
# ==============================================================================

def encode_uint256(value: int) -> str:
    return format(value, "x").rjust(WORD_HEX_LENGTH, "0")


def encode_address(address: str) -> str:
    return strip_hex_prefix(address).rjust(WORD_HEX_LENGTH, "0")


def encode_bool(value: bool) -> str:
    return ("1" if value else "0").rjust(WORD_HEX_LENGTH, "0")


def encode_bytes(data: bytes) -> str:
    return data.hex().ljust(WORD_HEX_LENGTH, "0")


def encode_parameter(value: AbiValue) -> str:
    """Encode one tagged value into a 64-char word."""
    if isinstance(value, UnsignedInteger):
        return encode_uint256(value.value)
    if isinstance(value, Address):
        return encode_address(value.value)
    if isinstance(value, Boolean):
        return encode_bool(value.value)
    if isinstance(value, ByteBlob):
        return encode_bytes(value.data)
    raise UnsupportedTypeError(value, "UnsignedInteger, Address, Boolean or ByteBlob")


def encode_parameters(values: Sequence[AbiValue]) -> str:
    """Concatenate the words of values in argument order."""
    return "".join(encode_parameter(v) for v in values)


def encode_function_call(signature: str, values: Sequence[AbiValue]) -> str:
    """Full call data: 0x + selector + parameter words."""
    return HEX_PREFIX + function_selector(signature) + encode_parameters(values)


# ==============================================================================
# Decoding
# ==============================================================================

def _chunk_bytes(chunk: str) -> bytes:
    # A truncated chunk may end on half a byte
    return bytes.fromhex(chunk[:len(chunk) - len(chunk) % 2])


def decode_parameter(chunk: str, abi_type: str) -> Any:
    """
    Decode one word according to abi_type.

    - uint256/int256/uintN: non-negative int
    - address: 0x + low 20 bytes
    - address64: 0x + low 32 bytes
    - bool: True if nonzero
    - string: UTF-8 text without trailing NUL bytes
    - bytes/bytes32: raw bytes
    - anything else: 0x + chunk
    """
    if _UINT_TYPE.fullmatch(abi_type):
        return int(chunk or "0", 16)
    if abi_type == "address":
        return HEX_PREFIX + chunk[-LEGACY_ADDRESS_HEX_LENGTH:]
    if abi_type == "address64":
        return HEX_PREFIX + chunk[-ADDRESS_HEX_LENGTH:]
    if abi_type == "bool":
        return int(chunk or "0", 16) != 0
    if abi_type == "string":
        return _chunk_bytes(chunk).decode("utf-8", errors="replace").rstrip("\x00")
    if abi_type in ("bytes", "bytes32"):
        return _chunk_bytes(chunk)
    return HEX_PREFIX + chunk


def decode_parameters(data: str, types: Sequence[str], strict: bool = False) -> List[Any]:
    """
    Decode consecutive words positionally.

    Lenient by default: a short payload decodes as far as it goes and
    extra words are ignored. With strict=True the payload must hold
    exactly one word per type.

    Args:
        data: hex with or without 0x
        types: one ABI type name per word
        strict: raise LengthMismatchError on a word-count mismatch

    Returns:
        list: decoded values in order
    """
    if not is_valid_hex(data, require_prefix=False):
        raise InvalidHexError(data, "call data")

    clean = strip_hex_prefix(data).lower()
    expected = WORD_HEX_LENGTH * len(types)
    if len(clean) != expected:
        if strict:
            raise LengthMismatchError(expected, len(clean))
        logger.debug(f"Decoding {len(clean)} hex chars against {len(types)} types")

    return [
        decode_parameter(clean[i * WORD_HEX_LENGTH:(i + 1) * WORD_HEX_LENGTH], abi_type)
        for i, abi_type in enumerate(types)
    ]
