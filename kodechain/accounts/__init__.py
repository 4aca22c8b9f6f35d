"""
KodeChain Accounts
"""

from kodechain.accounts.wallet import Wallet, verify_signature, address_from_public_key

__all__ = [
    "Wallet",
    "verify_signature",
    "address_from_public_key",
]
