"""
KodeChain Core Constants

All codec and key-size constants defined here for single source of truth.
"""

from typing import Final

# ==============================================================================
# HEX WIRE FORMAT
# ==============================================================================

HEX_PREFIX: Final[str] = "0x"

# ==============================================================================
# SPONGE HASH
# ==============================================================================

SPONGE_STATE_SIZE: Final[int] = 32              # Bytes of mutable state
SPONGE_DIGEST_SIZE: Final[int] = 32             # Bytes squeezed per digest
SPONGE_NEIGHBOUR_OFFSET: Final[int] = 1         # state[i+1] in permute
SPONGE_DIFFUSION_OFFSET: Final[int] = 7         # state[i+7] in permute

# ==============================================================================
# ABI
# ==============================================================================

WORD_SIZE: Final[int] = 32                      # Bytes per encoded parameter
WORD_HEX_LENGTH: Final[int] = WORD_SIZE * 2     # 64 hex characters
SELECTOR_SIZE: Final[int] = 4                   # Function selector bytes
UINT256_MAX: Final[int] = (1 << 256) - 1

# ==============================================================================
# ADDRESSES
# ==============================================================================

ADDRESS_SIZE: Final[int] = 32                   # Canonical (sponge digest)
LEGACY_ADDRESS_SIZE: Final[int] = 20            # Conventional 20-byte form
ADDRESS_HEX_LENGTH: Final[int] = ADDRESS_SIZE * 2
LEGACY_ADDRESS_HEX_LENGTH: Final[int] = LEGACY_ADDRESS_SIZE * 2

ZERO_ADDRESS: Final[str] = HEX_PREFIX + "00" * ADDRESS_SIZE

# ==============================================================================
# ML-DSA-65 (FIPS 204)
# ==============================================================================

ALGORITHM_ML_DSA_65: Final[str] = "ML-DSA-65"
MLDSA_SEED_SIZE: Final[int] = 32
MLDSA_PUBLIC_KEY_SIZE: Final[int] = 1952
MLDSA_SECRET_KEY_SIZE: Final[int] = 4032
MLDSA_SIGNATURE_SIZE: Final[int] = 3309
MLDSA_NIST_LEVEL: Final[int] = 3
MLDSA_TR_SIZE: Final[int] = 64                  # H(pk) stored in secret key
MLDSA_TR_OFFSET: Final[int] = 64                # after rho and K

# ==============================================================================
# CONFIGURATION DEFAULTS
# ==============================================================================

DEFAULT_KEYFILE: Final[str] = "~/.kodechain/wallet.json"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
