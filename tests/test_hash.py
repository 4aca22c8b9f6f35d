"""
KodeChain Identity Hash Tests
"""

import pytest

from kodechain.crypto.hash import (
    quantum_hash,
    quantum_hash_hex,
    normalize_input,
    SpongeHashBuilder,
)
from kodechain.errors import InvalidHexError, InvalidParameterError, UnsupportedTypeError


# Vectors worked out by hand from the absorb/permute/squeeze rules
EMPTY_DIGEST = bytes(32)
ONE_BYTE_DIGEST = bytes(31) + b"\x02"
FULL_BLOCK_DIGEST = bytes.fromhex(
    "04" + "00" * 17 + "08" + "00" * 11 + "08" + "00"
)


class TestKnownVectors:
    """Tests against hand-derived digests."""

    def test_empty_input(self):
        """Test the empty digest: one permutation of the zero state."""
        assert quantum_hash(b"") == EMPTY_DIGEST

    def test_single_byte(self):
        """Test 0x01 lands in the last output byte after the squeeze wraps."""
        assert quantum_hash(b"\x01") == ONE_BYTE_DIGEST

    def test_full_block(self):
        """Test a block that permutes during absorb and again on squeeze."""
        assert quantum_hash(b"\x01" + bytes(31)) == FULL_BLOCK_DIGEST

    def test_full_block_hex(self):
        assert quantum_hash_hex(b"\x01" + bytes(31)) == "0x" + FULL_BLOCK_DIGEST.hex()


class TestNormalization:
    """Tests for input normalisation."""

    def test_hex_string_input(self):
        """Test 0x strings are hex-decoded."""
        assert quantum_hash("0x01") == ONE_BYTE_DIGEST
        assert normalize_input("0xdeadBEEF") == bytes.fromhex("deadbeef")

    def test_text_input(self):
        """Test plain strings are UTF-8 encoded."""
        assert quantum_hash("abc") == quantum_hash(b"abc")
        assert normalize_input("héllo") == "héllo".encode("utf-8")

    def test_empty_string(self):
        assert quantum_hash("") == EMPTY_DIGEST
        assert quantum_hash("0x") == EMPTY_DIGEST

    def test_hex_without_marker_is_text(self):
        """Test unmarked hex digits are hashed as text."""
        assert quantum_hash("01") == quantum_hash(b"01")
        assert quantum_hash("01") != quantum_hash("0x01")

    def test_bytes_like_input(self):
        data = b"\x00\x01\x02"
        assert quantum_hash(bytearray(data)) == quantum_hash(data)
        assert quantum_hash(memoryview(data)) == quantum_hash(data)

    def test_invalid_hex(self):
        with pytest.raises(InvalidHexError):
            quantum_hash("0xzz")
        with pytest.raises(InvalidHexError):
            quantum_hash("0x123")
        with pytest.raises(InvalidHexError):
            quantum_hash("0x00\n")

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedTypeError):
            quantum_hash(12345)


class TestDigestShape:
    """Tests for digest size and determinism."""

    def test_digest_size(self):
        assert len(quantum_hash(b"x" * 1000)) == 32

    def test_hex_format(self):
        digest = quantum_hash_hex("transfer(address,uint256)")
        assert digest.startswith("0x")
        assert len(digest) == 66
        assert digest == digest.lower()

    def test_deterministic(self):
        data = bytes(range(256)) * 8
        assert quantum_hash(data) == quantum_hash(data)
        assert quantum_hash_hex(data) == quantum_hash_hex(data)


class TestSpongeHashBuilder:
    """Tests for SpongeHashBuilder."""

    def test_matches_one_shot(self):
        """Test updates in pieces equal hashing the concatenation."""
        data = bytes((i * 11) % 256 for i in range(150))
        digest = (
            SpongeHashBuilder()
            .update(data[:7])
            .update(data[7:64])
            .update(data[64:])
            .finalize()
        )
        assert digest == quantum_hash(data)

    def test_mixed_inputs(self):
        digest = SpongeHashBuilder().update("0x01").update("ab").finalize()
        assert digest == quantum_hash(b"\x01ab")

    def test_finalize_hex(self):
        assert SpongeHashBuilder().update(b"\x01").finalize_hex() == "0x" + ONE_BYTE_DIGEST.hex()

    def test_finalize_once(self):
        builder = SpongeHashBuilder().update(b"abc")
        builder.finalize()
        with pytest.raises(InvalidParameterError):
            builder.finalize()
        with pytest.raises(InvalidParameterError):
            builder.update(b"more")

    def test_copy(self):
        builder = SpongeHashBuilder().update(b"prefix")
        branch = builder.copy()

        assert builder.update(b"-a").finalize() == quantum_hash(b"prefix-a")
        assert branch.update(b"-b").finalize() == quantum_hash(b"prefix-b")
