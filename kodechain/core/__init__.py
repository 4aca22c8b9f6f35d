"""
KodeChain Core Types and Hex Helpers
"""

from kodechain.core.types import (
    UnsignedInteger,
    Address,
    Boolean,
    ByteBlob,
    AbiValue,
    KeyPair,
)

__all__ = [
    "UnsignedInteger",
    "Address",
    "Boolean",
    "ByteBlob",
    "AbiValue",
    "KeyPair",
]
