"""
KodeChain Identity Hash

Normalises input and drives one Sponge per call. Used for address
derivation (full 32-byte digest) and function selectors (first 4 bytes).
"""

from __future__ import annotations
from typing import Union

from kodechain.constants import HEX_PREFIX, SPONGE_DIGEST_SIZE
from kodechain.core.hexutil import hex_to_bytes, bytes_to_hex
from kodechain.crypto.sponge import Sponge
from kodechain.errors import InvalidParameterError, UnsupportedTypeError

HashInput = Union[str, bytes, bytearray, memoryview]


def normalize_input(data: HashInput) -> bytes:
    """
    Normalise hash input to bytes.

    - str starting with 0x: hex-decode the remainder
    - other str: UTF-8 encode
    - bytes-like: used as is
    """
    if isinstance(data, str):
        if data.startswith(HEX_PREFIX):
            return hex_to_bytes(data, "hash input")
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise UnsupportedTypeError(data, "str or bytes")


def quantum_hash(data: HashInput) -> bytes:
    """
    Sponge digest of data.

    Args:
        data: 0x hex string, text, or bytes

    Returns:
        bytes: 32-byte digest
    """
    sponge = Sponge()
    sponge.absorb(normalize_input(data))
    return sponge.squeeze(SPONGE_DIGEST_SIZE)


def quantum_hash_hex(data: HashInput) -> str:
    """Sponge digest of data as 0x-prefixed hex."""
    return bytes_to_hex(quantum_hash(data))


class SpongeHashBuilder:
    """
    Builder pattern for hashing input that arrives in pieces.

    Absorbing is streaming, so several updates give the same digest as
    one call over the concatenated input.

    Example:
        digest = SpongeHashBuilder().update(b"hello").update(b"world").finalize()
    """

    def __init__(self):
        self._sponge = Sponge()
        self._finalized = False

    def update(self, data: HashInput) -> "SpongeHashBuilder":
        """Add data to the hash computation."""
        if self._finalized:
            raise InvalidParameterError("builder", "already finalized")
        self._sponge.absorb(normalize_input(data))
        return self

    def finalize(self) -> bytes:
        """Complete the hash computation and return the 32-byte digest."""
        if self._finalized:
            raise InvalidParameterError("builder", "already finalized")
        self._finalized = True
        return self._sponge.squeeze(SPONGE_DIGEST_SIZE)

    def finalize_hex(self) -> str:
        """Complete the hash computation and return 0x hex."""
        return bytes_to_hex(self.finalize())

    def copy(self) -> "SpongeHashBuilder":
        """Create a copy of the current state."""
        builder = SpongeHashBuilder()
        builder._sponge = self._sponge.copy()
        builder._finalized = self._finalized
        return builder
