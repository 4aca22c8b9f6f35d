"""
KodeChain ML-DSA-65 Signatures

ML-DSA-65 per NIST FIPS 204, provided by dilithium-py.

This module provides post-quantum signatures with deterministic key
generation from a 32-byte seed.

Signature size: 3,309 bytes
Public key size: 1,952 bytes
Secret key size: 4,032 bytes
"""

from __future__ import annotations
import logging
from typing import Union

from dilithium_py.ml_dsa import ML_DSA_65

from kodechain.constants import (
    ALGORITHM_ML_DSA_65,
    MLDSA_SEED_SIZE,
    MLDSA_PUBLIC_KEY_SIZE,
    MLDSA_SECRET_KEY_SIZE,
    MLDSA_SIGNATURE_SIZE,
    MLDSA_NIST_LEVEL,
    MLDSA_TR_SIZE,
    MLDSA_TR_OFFSET,
)
from kodechain.core.types import KeyPair
from kodechain.errors import (
    InvalidSeedLengthError,
    InvalidSecretKeyLengthError,
    InvalidSecretKeyError,
)

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class MLDSA65:
    """
    ML-DSA-65 wrapper.

    Stateless: every call works on the arguments it is given, so one
    instance may be used from any number of threads.
    """

    ALGORITHM_NAME = ALGORITHM_ML_DSA_65

    def __init__(self, scheme=ML_DSA_65):
        self._scheme = scheme

    def keygen(self, seed: BytesLike) -> KeyPair:
        """
        Derive a key pair from a 32-byte seed.

        Identical seeds always give identical key pairs.
        """
        seed = bytes(seed)
        if len(seed) != MLDSA_SEED_SIZE:
            raise InvalidSeedLengthError(len(seed), MLDSA_SEED_SIZE)

        public_key, secret_key = self._scheme.key_derive(seed)
        return KeyPair(public_key=public_key, secret_key=secret_key)

    def derive_public_key(self, secret_key: BytesLike) -> bytes:
        """
        Recompute the public key held implicitly in a full secret key.

        The secret key packs (rho, K, tr, s1, s2, t0). The public key is
        rho || t1 with t1 the high bits of A*s1 + s2, and tr must equal
        H(public key).
        """
        secret_key = bytes(secret_key)
        if len(secret_key) != MLDSA_SECRET_KEY_SIZE:
            raise InvalidSecretKeyLengthError(len(secret_key), MLDSA_SECRET_KEY_SIZE)

        scheme = self._scheme
        try:
            rho, _k, tr, s1, s2, _t0 = scheme._unpack_sk(secret_key)
        except ValueError as e:
            raise InvalidSecretKeyError(str(e)) from e

        a_hat = scheme._expand_matrix_from_seed(rho)
        t = (a_hat @ s1.to_ntt()).from_ntt() + s2
        t1, _ = t.power_2_round(scheme.d)
        public_key = scheme._pack_pk(rho, t1)

        if scheme._h(public_key, MLDSA_TR_SIZE) != tr:
            raise InvalidSecretKeyError("public key hash does not match secret key")
        return public_key

    def public_key_matches(self, public_key: BytesLike, secret_key: BytesLike) -> bool:
        """
        Check that public_key belongs to secret_key.

        Compares H(public key) with the tr field stored in the secret key.
        """
        tr = bytes(secret_key)[MLDSA_TR_OFFSET:MLDSA_TR_OFFSET + MLDSA_TR_SIZE]
        return self._scheme._h(bytes(public_key), MLDSA_TR_SIZE) == tr

    def sign(self, message: BytesLike, secret_key: BytesLike) -> bytes:
        """
        Sign a message.

        Args:
            message: Message to sign
            secret_key: 4,032-byte secret key

        Returns:
            3,309-byte signature
        """
        secret_key = bytes(secret_key)
        if len(secret_key) != MLDSA_SECRET_KEY_SIZE:
            raise InvalidSecretKeyLengthError(len(secret_key), MLDSA_SECRET_KEY_SIZE)
        return self._scheme.sign(secret_key, bytes(message))

    def verify(self, signature: BytesLike, message: BytesLike, public_key: BytesLike) -> bool:
        """
        Verify a signature.

        Malformed signatures or keys verify as False.
        """
        if len(signature) != MLDSA_SIGNATURE_SIZE:
            return False
        if len(public_key) != MLDSA_PUBLIC_KEY_SIZE:
            return False

        try:
            return bool(self._scheme.verify(bytes(public_key), bytes(message), bytes(signature)))
        except (ValueError, IndexError) as e:
            logger.debug(f"Signature verification failed: {e}")
            return False


# Global instance
_mldsa = MLDSA65()


def keygen(seed: BytesLike) -> KeyPair:
    """Derive an ML-DSA-65 key pair from a 32-byte seed."""
    return _mldsa.keygen(seed)


def derive_public_key(secret_key: BytesLike) -> bytes:
    """Derive the public key from a 4,032-byte secret key."""
    return _mldsa.derive_public_key(secret_key)


def public_key_matches(public_key: BytesLike, secret_key: BytesLike) -> bool:
    """Check that public_key is the public half of secret_key."""
    return _mldsa.public_key_matches(public_key, secret_key)


def sign(message: BytesLike, secret_key: BytesLike) -> bytes:
    """Sign message with secret_key."""
    return _mldsa.sign(message, secret_key)


def verify(signature: BytesLike, message: BytesLike, public_key: BytesLike) -> bool:
    """Verify signature over message for public_key."""
    return _mldsa.verify(signature, message, public_key)


def get_mldsa_info() -> dict:
    """Get information about the ML-DSA implementation."""
    return {
        "algorithm": ALGORITHM_ML_DSA_65,
        "standard": "FIPS 204",
        "seed_size": MLDSA_SEED_SIZE,
        "public_key_size": MLDSA_PUBLIC_KEY_SIZE,
        "secret_key_size": MLDSA_SECRET_KEY_SIZE,
        "signature_size": MLDSA_SIGNATURE_SIZE,
        "nist_level": MLDSA_NIST_LEVEL,
        "backend": "dilithium-py",
    }
