"""
KodeChain Core Test Fixtures
"""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kodechain.accounts import Wallet
from kodechain.core.types import KeyPair
from kodechain.crypto import mldsa


@pytest.fixture(scope="session")
def zero_seed() -> bytes:
    """32 zero bytes: the regression seed."""
    return bytes(32)


@pytest.fixture(scope="session")
def zero_keypair(zero_seed) -> KeyPair:
    """Key pair derived from the zero seed."""
    return mldsa.keygen(zero_seed)


@pytest.fixture(scope="session")
def seeded_wallet(zero_seed) -> Wallet:
    """Keyed wallet derived from the zero seed."""
    return Wallet.from_seed(zero_seed)


@pytest.fixture(scope="session")
def other_wallet() -> Wallet:
    """Second keyed wallet from a different seed."""
    return Wallet.from_seed(bytes(range(32)))


@pytest.fixture(scope="session")
def watch_only_wallet(seeded_wallet) -> Wallet:
    """Watch-only wallet sharing the seeded wallet's public key."""
    return Wallet.from_public_key(seeded_wallet.public_key)


@pytest.fixture
def address_20() -> str:
    """Legacy 20-byte address."""
    return "0x1234567890123456789012345678901234567890"


@pytest.fixture
def address_32() -> str:
    """Canonical 32-byte address."""
    return "0x" + "ab" * 32
