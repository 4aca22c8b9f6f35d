"""
KodeChain Core

Binary parameter codec and quantum-resistant identity layer of the
KodeChain SDK: sponge hash, call-data ABI, ML-DSA-65 wallets.
"""

__version__ = "0.3.0"
__author__ = "KodeChain SDK Team"

from kodechain.constants import WORD_SIZE, SELECTOR_SIZE, ADDRESS_SIZE
from kodechain.errors import KodeChainError, ErrorCode

__all__ = [
    "WORD_SIZE",
    "SELECTOR_SIZE",
    "ADDRESS_SIZE",
    "KodeChainError",
    "ErrorCode",
    "__version__",
]
