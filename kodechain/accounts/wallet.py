"""
KodeChain Wallet

Quantum-resistant identity built on ML-DSA-65. The address is the sponge
digest of the public key; the secret key never takes part in it.

A wallet is either Keyed (holds a secret key and can sign) or Watch-only
(public key and address only). The state is fixed at construction.
"""

from __future__ import annotations
import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from kodechain.constants import (
    MLDSA_SEED_SIZE,
    MLDSA_PUBLIC_KEY_SIZE,
    MLDSA_SECRET_KEY_SIZE,
)
from kodechain.core.hexutil import (
    hex_to_bytes,
    bytes_to_hex,
    to_legacy_address,
    shorten_address,
)
from kodechain.core.types import KeyPair
from kodechain.crypto import mldsa
from kodechain.crypto.hash import quantum_hash_hex
from kodechain.errors import (
    InvalidSeedLengthError,
    InvalidSecretKeyLengthError,
    InvalidKeyLengthError,
    InvalidPublicKeyLengthError,
    InvalidParameterError,
    InvalidSecretKeyError,
    NoSecretKeyError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)

KeyInput = Union[str, bytes, bytearray, memoryview]
MessageInput = Union[str, bytes, bytearray, memoryview]
RandomSource = Callable[[int], bytes]


def _message_bytes(data: MessageInput) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise UnsupportedTypeError(data, "str or bytes")


def address_from_public_key(public_key: KeyInput) -> str:
    """Derive the canonical 32-byte address of a public key."""
    return quantum_hash_hex(hex_to_bytes(public_key, "public key"))


def verify_signature(signature: KeyInput, data: MessageInput, public_key: KeyInput) -> bool:
    """
    Verify an ML-DSA-65 signature without building a wallet.

    Args:
        signature: hex (with or without 0x) or bytes
        data: text (UTF-8) or bytes
        public_key: hex (with or without 0x) or bytes

    Returns:
        True if the signature is valid
    """
    return mldsa.verify(
        hex_to_bytes(signature, "signature"),
        _message_bytes(data),
        hex_to_bytes(public_key, "public key"),
    )


@dataclass(frozen=True, slots=True)
class Wallet:
    """
    ML-DSA-65 wallet.

    Build one through the factories:
        Wallet.create_random()
        Wallet.from_seed(seed)
        Wallet.from_secret_key(secret_key)
        Wallet.from_private_key(seed_or_secret_key)
        Wallet.from_public_key(public_key)     # watch-only
    """
    public_key: bytes
    secret_key: Optional[bytes] = None
    address: str = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "public_key", bytes(self.public_key))
        if len(self.public_key) != MLDSA_PUBLIC_KEY_SIZE:
            raise InvalidPublicKeyLengthError(len(self.public_key), MLDSA_PUBLIC_KEY_SIZE)

        if self.secret_key is not None:
            object.__setattr__(self, "secret_key", bytes(self.secret_key))
            if len(self.secret_key) != MLDSA_SECRET_KEY_SIZE:
                raise InvalidSecretKeyLengthError(len(self.secret_key), MLDSA_SECRET_KEY_SIZE)
            if not mldsa.public_key_matches(self.public_key, self.secret_key):
                raise InvalidSecretKeyError("secret key does not belong to the public key")

        object.__setattr__(self, "address", quantum_hash_hex(self.public_key))

    def __repr__(self) -> str:
        kind = "keyed" if self.can_sign else "watch-only"
        return f"Wallet({shorten_address(self.address, 8)}, {kind})"

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------

    @classmethod
    def create_random(cls, random_source: RandomSource = secrets.token_bytes) -> "Wallet":
        """
        Generate a new keyed wallet.

        Args:
            random_source: callable returning n random bytes; must be a
                cryptographically secure source outside tests
        """
        return cls.from_seed(random_source(MLDSA_SEED_SIZE))

    @classmethod
    def from_seed(cls, seed: KeyInput) -> "Wallet":
        """Keyed wallet from a 32-byte seed (hex or bytes)."""
        seed = hex_to_bytes(seed, "seed")
        if len(seed) != MLDSA_SEED_SIZE:
            raise InvalidSeedLengthError(len(seed), MLDSA_SEED_SIZE)

        keypair = mldsa.keygen(seed)
        wallet = cls(public_key=keypair.public_key, secret_key=keypair.secret_key)
        logger.debug(f"Wallet derived from seed: {shorten_address(wallet.address)}")
        return wallet

    @classmethod
    def from_secret_key(cls, secret_key: KeyInput) -> "Wallet":
        """Keyed wallet from a full 4,032-byte secret key (hex or bytes)."""
        secret_key = hex_to_bytes(secret_key, "secret key")
        if len(secret_key) != MLDSA_SECRET_KEY_SIZE:
            raise InvalidSecretKeyLengthError(len(secret_key), MLDSA_SECRET_KEY_SIZE)

        public_key = mldsa.derive_public_key(secret_key)
        wallet = cls(public_key=public_key, secret_key=secret_key)
        logger.debug(f"Wallet imported from secret key: {shorten_address(wallet.address)}")
        return wallet

    @classmethod
    def from_private_key(cls, key: KeyInput) -> "Wallet":
        """
        Keyed wallet from either key format, chosen by length:
        32 bytes is a seed, 4,032 bytes is a full secret key.
        """
        raw = hex_to_bytes(key, "private key")
        if len(raw) == MLDSA_SEED_SIZE:
            return cls.from_seed(raw)
        if len(raw) == MLDSA_SECRET_KEY_SIZE:
            return cls.from_secret_key(raw)
        raise InvalidKeyLengthError(len(raw), (MLDSA_SEED_SIZE, MLDSA_SECRET_KEY_SIZE))

    @classmethod
    def from_public_key(cls, public_key: KeyInput) -> "Wallet":
        """Watch-only wallet from a 1,952-byte public key (hex or bytes)."""
        return cls(public_key=hex_to_bytes(public_key, "public key"))

    @classmethod
    def from_dict(cls, data: dict) -> "Wallet":
        """
        Rebuild a wallet exported with to_dict().

        A stored address or public key must match the one derived from
        the keys.
        """
        if data.get("secret_key"):
            wallet = cls.from_secret_key(data["secret_key"])
            stored_key = data.get("public_key")
            if stored_key and hex_to_bytes(stored_key, "public key") != wallet.public_key:
                raise InvalidParameterError("public_key", "does not match the secret key")
        elif data.get("public_key"):
            wallet = cls.from_public_key(data["public_key"])
        else:
            raise InvalidParameterError("wallet", "public_key or secret_key required")

        stored = data.get("address")
        if stored and stored.lower() != wallet.address:
            raise InvalidParameterError("address", "does not match the public key")
        return wallet

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------

    @property
    def can_sign(self) -> bool:
        return self.secret_key is not None

    @property
    def is_watch_only(self) -> bool:
        return self.secret_key is None

    @property
    def legacy_address(self) -> str:
        """20-byte form of the address."""
        return to_legacy_address(self.address)

    @property
    def keypair(self) -> Optional[KeyPair]:
        if self.secret_key is None:
            return None
        return KeyPair(public_key=self.public_key, secret_key=self.secret_key)

    def get_public_key(self) -> str:
        return bytes_to_hex(self.public_key)

    def get_private_key(self) -> Optional[str]:
        """Secret key as 0x hex, None for watch-only wallets."""
        if self.secret_key is None:
            return None
        return bytes_to_hex(self.secret_key)

    def watch_only(self) -> "Wallet":
        """Watch-only copy sharing this wallet's public key and address."""
        return Wallet(public_key=self.public_key)

    def to_dict(self, include_secret: bool = False) -> dict:
        """Export as JSON-serializable dict. Secret key only on request."""
        result = {
            "address": self.address,
            "public_key": self.get_public_key(),
        }
        if include_secret and self.secret_key is not None:
            result["secret_key"] = self.get_private_key()
        return result

    # --------------------------------------------------------------------------
    # Signing
    # --------------------------------------------------------------------------

    def sign(self, data: MessageInput) -> str:
        """
        Sign data (text is UTF-8 encoded).

        Returns:
            0x-prefixed hex signature

        Raises:
            NoSecretKeyError: wallet is watch-only
        """
        if self.secret_key is None:
            raise NoSecretKeyError(self.address)

        message = _message_bytes(data)
        signature = mldsa.sign(message, self.secret_key)
        logger.debug(f"Signed {len(message)} bytes with {shorten_address(self.address)}")
        return bytes_to_hex(signature)

    def verify(self, signature: KeyInput, data: MessageInput) -> bool:
        """Verify a signature over data against this wallet's public key."""
        return verify_signature(signature, data, self.public_key)
