"""
KodeChain Cryptographic Primitives
"""

from kodechain.crypto.sponge import Sponge
from kodechain.crypto.hash import quantum_hash, quantum_hash_hex, SpongeHashBuilder
from kodechain.crypto.mldsa import (
    keygen,
    derive_public_key,
    public_key_matches,
    sign,
    verify,
    get_mldsa_info,
)

__all__ = [
    # Sponge hash
    "Sponge",
    "quantum_hash",
    "quantum_hash_hex",
    "SpongeHashBuilder",
    # ML-DSA-65 signatures
    "keygen",
    "derive_public_key",
    "public_key_matches",
    "sign",
    "verify",
    "get_mldsa_info",
]
