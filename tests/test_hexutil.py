"""
KodeChain Hex Helper Tests
"""

import pytest

from kodechain.core.hexutil import (
    strip_hex_prefix,
    add_hex_prefix,
    is_valid_hex,
    pad_hex,
    hex_to_bytes,
    bytes_to_hex,
    string_to_hex,
    hex_to_string,
    random_hex,
    is_valid_address,
    validate_address,
    to_legacy_address,
    shorten_address,
)
from kodechain.errors import InvalidAddressError, InvalidHexError, UnsupportedTypeError


class TestPrefix:
    """Tests for marker handling."""

    def test_strip(self):
        assert strip_hex_prefix("0xabcd") == "abcd"
        assert strip_hex_prefix("abcd") == "abcd"
        assert strip_hex_prefix("0x") == ""

    def test_add(self):
        assert add_hex_prefix("abcd") == "0xabcd"
        assert add_hex_prefix("0xabcd") == "0xabcd"

    def test_is_valid_hex(self):
        assert is_valid_hex("0xdeadBEEF")
        assert is_valid_hex("0x")
        assert not is_valid_hex("deadbeef")
        assert is_valid_hex("deadbeef", require_prefix=False)
        assert not is_valid_hex("0xzz")
        assert not is_valid_hex(None)

    def test_pad(self):
        assert pad_hex("0x7b", 8) == "0x0000007b"
        assert pad_hex("7b", 4) == "0x007b"


class TestConversion:
    """Tests for hex/bytes/text conversion."""

    def test_hex_to_bytes(self):
        assert hex_to_bytes("0x0102") == b"\x01\x02"
        assert hex_to_bytes("0102") == b"\x01\x02"
        assert hex_to_bytes("0xABcd") == b"\xab\xcd"
        assert hex_to_bytes("") == b""

    def test_bytes_pass_through(self):
        assert hex_to_bytes(b"\x01") == b"\x01"
        assert hex_to_bytes(bytearray(b"\x01")) == b"\x01"

    def test_invalid_hex(self):
        with pytest.raises(InvalidHexError) as exc_info:
            hex_to_bytes("0x123", "seed")
        assert exc_info.value.details == {"field": "seed"}

        with pytest.raises(InvalidHexError):
            hex_to_bytes("not hex")

    def test_trailing_newline(self):
        """Test a trailing newline is not taken for a hex digit."""
        assert not is_valid_hex("0xab\n")
        with pytest.raises(InvalidHexError):
            hex_to_bytes("0x000\n")
        with pytest.raises(InvalidHexError):
            hex_to_bytes("00\n\n")

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedTypeError):
            hex_to_bytes(123)

    def test_bytes_to_hex(self):
        assert bytes_to_hex(b"\xab\xcd") == "0xabcd"
        assert bytes_to_hex(b"") == "0x"

    def test_text(self):
        assert string_to_hex("abc") == "0x616263"
        assert hex_to_string("0x616263") == "abc"

    def test_random_hex(self):
        value = random_hex(16)
        assert value.startswith("0x")
        assert len(value) == 2 + 32

    def test_random_hex_injected_source(self):
        assert random_hex(4, lambda n: b"\x11" * n) == "0x11111111"


class TestAddresses:
    """Tests for address helpers."""

    def test_is_valid_address(self, address_20, address_32):
        assert is_valid_address(address_20)
        assert is_valid_address(address_32)
        assert not is_valid_address("0x" + "a" * 39)
        assert not is_valid_address("0x" + "a" * 63)
        assert not is_valid_address("a" * 40)
        assert not is_valid_address(None)
        assert not is_valid_address(address_20 + "\n")

    def test_validate_address(self):
        assert validate_address("0x" + "AB" * 32) == "0x" + "ab" * 32
        with pytest.raises(InvalidAddressError):
            validate_address("0xnope")

    def test_to_legacy_address(self, address_20):
        canonical = "0x" + "00" * 12 + "11" * 20
        assert to_legacy_address(canonical) == "0x" + "11" * 20
        assert to_legacy_address(address_20) == address_20

    def test_shorten_address(self, address_20):
        assert shorten_address(address_20) == "0x1234...7890"
        assert shorten_address("0x12") == "0x12"
