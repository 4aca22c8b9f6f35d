"""
KodeChain ABI: fixed 32-byte word codec and function selectors
"""

from kodechain.core.types import UnsignedInteger, Address, Boolean, ByteBlob, AbiValue
from kodechain.abi.coder import (
    function_selector,
    normalize_signature,
    encode_parameter,
    encode_parameters,
    encode_function_call,
    decode_parameter,
    decode_parameters,
)

__all__ = [
    # Values
    "UnsignedInteger",
    "Address",
    "Boolean",
    "ByteBlob",
    "AbiValue",
    # Selectors
    "function_selector",
    "normalize_signature",
    # Codec
    "encode_parameter",
    "encode_parameters",
    "encode_function_call",
    "decode_parameter",
    "decode_parameters",
]
