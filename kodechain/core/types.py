"""
KodeChain Core Types

Tagged ABI values and the ML-DSA-65 key pair. Every value is validated on
construction so malformed input fails before any encoding or signing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from kodechain.constants import (
    UINT256_MAX,
    WORD_SIZE,
    ADDRESS_HEX_LENGTH,
    MLDSA_PUBLIC_KEY_SIZE,
    MLDSA_SECRET_KEY_SIZE,
)
from kodechain.core.hexutil import validate_address, strip_hex_prefix
from kodechain.errors import (
    UnsupportedTypeError,
    ValueOutOfRangeError,
    InvalidPublicKeyLengthError,
    InvalidSecretKeyLengthError,
)


@dataclass(frozen=True, slots=True)
class UnsignedInteger:
    """
    Unsigned integer up to 256 bits.

    ENCODING: big-endian, left-padded to one word
    """
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise UnsupportedTypeError(self.value, "int")
        if not 0 <= self.value <= UINT256_MAX:
            raise ValueOutOfRangeError("uint256", self.value, "0 <= value < 2**256")

    @property
    def abi_type(self) -> str:
        return "uint256"


@dataclass(frozen=True, slots=True)
class Address:
    """
    Hex address: 0x + 64 hex chars (canonical) or 0x + 40 hex chars (legacy).

    ENCODING: marker stripped, left-padded to one word
    """
    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", validate_address(self.value))

    @property
    def abi_type(self) -> str:
        if len(strip_hex_prefix(self.value)) == ADDRESS_HEX_LENGTH:
            return "address64"
        return "address"


@dataclass(frozen=True, slots=True)
class Boolean:
    """
    Boolean flag.

    ENCODING: 1 or 0 in the lowest byte of one word
    """
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise UnsupportedTypeError(self.value, "bool")

    @property
    def abi_type(self) -> str:
        return "bool"


@dataclass(frozen=True, slots=True)
class ByteBlob:
    """
    Raw bytes or UTF-8 text, at most one word long.

    ENCODING: hex, right-padded with zeros to one word. There is no length
    prefix, so trailing NUL bytes cannot be told apart from padding.
    """
    value: Union[bytes, str]

    def __post_init__(self):
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        if not isinstance(self.value, (bytes, str)):
            raise UnsupportedTypeError(self.value, "bytes or str")
        if len(self.data) > WORD_SIZE:
            raise ValueOutOfRangeError(
                "bytes", f"<{len(self.data)} bytes>", f"at most {WORD_SIZE} bytes"
            )

    @property
    def data(self) -> bytes:
        if isinstance(self.value, str):
            return self.value.encode("utf-8")
        return self.value

    @property
    def abi_type(self) -> str:
        return "string" if isinstance(self.value, str) else "bytes"


AbiValue = Union[UnsignedInteger, Address, Boolean, ByteBlob]
ABI_VALUE_TYPES = (UnsignedInteger, Address, Boolean, ByteBlob)


@dataclass(frozen=True, slots=True)
class KeyPair:
    """
    ML-DSA-65 key pair.

    SIZE: public key 1952 bytes, secret key 4032 bytes
    NOTE: secret key is never shown in repr.
    """
    public_key: bytes
    secret_key: bytes

    def __post_init__(self):
        if len(self.public_key) != MLDSA_PUBLIC_KEY_SIZE:
            raise InvalidPublicKeyLengthError(len(self.public_key), MLDSA_PUBLIC_KEY_SIZE)
        if len(self.secret_key) != MLDSA_SECRET_KEY_SIZE:
            raise InvalidSecretKeyLengthError(len(self.secret_key), MLDSA_SECRET_KEY_SIZE)

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()[:16]}..., secret_key=<redacted>)"
