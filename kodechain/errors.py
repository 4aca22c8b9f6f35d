"""
KodeChain Core Error Handling

All error codes and exception classes raised by the codec, hash and
wallet layers.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Core error codes."""

    # 1xxx - General errors
    UNKNOWN_ERROR = 1000
    INVALID_PARAMETER = 1001
    INTERNAL_ERROR = 1002

    # 2xxx - Encoding errors
    INVALID_HEX = 2001
    UNSUPPORTED_TYPE = 2002
    VALUE_OUT_OF_RANGE = 2003
    INVALID_ADDRESS = 2004
    LENGTH_MISMATCH = 2005

    # 3xxx - Key and signing errors
    INVALID_SEED_LENGTH = 3001
    INVALID_SECRET_KEY_LENGTH = 3002
    INVALID_KEY_LENGTH = 3003
    INVALID_PUBLIC_KEY_LENGTH = 3004
    INVALID_SECRET_KEY = 3005
    NO_SECRET_KEY = 3006


class KodeChainError(Exception):
    """Base exception for all KodeChain core errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# General Errors (1xxx)
# ==============================================================================

class InvalidParameterError(KodeChainError):
    def __init__(self, param: str, message: str = ""):
        msg = f"Invalid parameter: {param}"
        if message:
            msg += f" - {message}"
        super().__init__(ErrorCode.INVALID_PARAMETER, msg, {"parameter": param})


class InternalError(KodeChainError):
    def __init__(self, message: str = "Internal error", details: Any = None):
        super().__init__(ErrorCode.INTERNAL_ERROR, message, details)


# ==============================================================================
# Encoding Errors (2xxx)
# ==============================================================================

class InvalidHexError(KodeChainError):
    def __init__(self, value: str, field: str = "hex"):
        shown = value if len(value) <= 80 else value[:77] + "..."
        super().__init__(
            ErrorCode.INVALID_HEX,
            f"Invalid hex string for {field}: {shown!r}",
            {"field": field}
        )


class UnsupportedTypeError(KodeChainError):
    def __init__(self, value: Any, expected: str = ""):
        msg = f"Unsupported value type: {type(value).__name__}"
        if expected:
            msg += f" (expected {expected})"
        super().__init__(
            ErrorCode.UNSUPPORTED_TYPE,
            msg,
            {"type": type(value).__name__}
        )


class ValueOutOfRangeError(KodeChainError):
    def __init__(self, kind: str, value: Any, limit: str):
        super().__init__(
            ErrorCode.VALUE_OUT_OF_RANGE,
            f"{kind} value out of range: {value!r} (allowed: {limit})",
            {"kind": kind, "limit": limit}
        )


class InvalidAddressError(KodeChainError):
    def __init__(self, address: Any):
        super().__init__(
            ErrorCode.INVALID_ADDRESS,
            f"Invalid address format: {address!r}",
            {"address": str(address)}
        )


class LengthMismatchError(KodeChainError):
    def __init__(self, expected: int, got: int):
        super().__init__(
            ErrorCode.LENGTH_MISMATCH,
            f"Encoded data length mismatch: expected {expected} hex chars, got {got}",
            {"expected": expected, "got": got}
        )


# ==============================================================================
# Key and Signing Errors (3xxx)
# ==============================================================================

class InvalidSeedLengthError(KodeChainError):
    def __init__(self, length: int, required: int):
        super().__init__(
            ErrorCode.INVALID_SEED_LENGTH,
            f"Seed must be {required} bytes, got {length}",
            {"length": length, "required": required}
        )


class InvalidSecretKeyLengthError(KodeChainError):
    def __init__(self, length: int, required: int):
        super().__init__(
            ErrorCode.INVALID_SECRET_KEY_LENGTH,
            f"Secret key must be {required} bytes, got {length}",
            {"length": length, "required": required}
        )


class InvalidKeyLengthError(KodeChainError):
    def __init__(self, length: int, allowed: tuple):
        allowed_str = " or ".join(str(a) for a in allowed)
        super().__init__(
            ErrorCode.INVALID_KEY_LENGTH,
            f"Private key must be {allowed_str} bytes, got {length}",
            {"length": length, "allowed": list(allowed)}
        )


class InvalidPublicKeyLengthError(KodeChainError):
    def __init__(self, length: int, required: int):
        super().__init__(
            ErrorCode.INVALID_PUBLIC_KEY_LENGTH,
            f"Public key must be {required} bytes, got {length}",
            {"length": length, "required": required}
        )


class InvalidSecretKeyError(KodeChainError):
    def __init__(self, reason: str = ""):
        msg = "Invalid secret key"
        if reason:
            msg += f": {reason}"
        super().__init__(ErrorCode.INVALID_SECRET_KEY, msg)


class NoSecretKeyError(KodeChainError):
    def __init__(self, address: str = ""):
        super().__init__(
            ErrorCode.NO_SECRET_KEY,
            "Watch-only wallet cannot sign: no secret key",
            {"address": address} if address else None
        )
