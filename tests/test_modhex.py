"""Unit tests for modhex encoding and decoding."""

import pytest

from yubiotp.protocol.exceptions import InvalidEncoding, OTPError
from yubiotp.protocol.modhex import hex_to_modhex, is_modhex, modhex_decode, modhex_encode, modhex_to_hex


@pytest.mark.parametrize(
    "raw,encoded",
    [
        (b"test", "ifhgieif"),
        (b"justanothergotest", "hligieifhbhuhvifhjhgidhihvifhgieif"),
        (b"foobar", "hhhvhvhdhbid"),
        (b"", ""),
    ],
)
class TestModhexVectors:
    """Tests against known modhex vectors."""

    def test_encode(self, raw, encoded):
        """Test encoding produces the expected text."""
        assert modhex_encode(raw) == encoded

    def test_decode(self, raw, encoded):
        """Test decoding produces the original bytes."""
        assert modhex_decode(encoded) == raw


class TestModhexEncode:
    """Tests for modhex_encode."""

    def test_every_nibble(self):
        """Test each nibble maps to its alphabet position."""
        assert modhex_encode(bytes.fromhex("0123456789abcdef")) == "cbdefghijklnrtuv"

    def test_output_length(self):
        """Test output is two characters per byte."""
        assert len(modhex_encode(bytes(range(256)))) == 512

    def test_all_bytes_roundtrip(self):
        """Test every byte value survives encode then decode."""
        data = bytes(range(256))
        assert modhex_decode(modhex_encode(data)) == data


class TestModhexDecode:
    """Tests for modhex_decode error handling."""

    def test_odd_length(self):
        """Test odd length input is rejected."""
        with pytest.raises(InvalidEncoding):
            modhex_decode("cbd")

    def test_invalid_character(self):
        """Test characters outside the alphabet are rejected."""
        with pytest.raises(InvalidEncoding, match="'x'"):
            modhex_decode("cbxd")

    def test_uppercase_rejected(self):
        """Test uppercase modhex is not accepted."""
        with pytest.raises(InvalidEncoding):
            modhex_decode("CB")

    def test_error_is_value_error(self):
        """Test decode errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            modhex_decode("00")
        assert issubclass(InvalidEncoding, OTPError)


class TestIsModhex:
    """Tests for is_modhex."""

    def test_full_alphabet(self):
        """Test the whole alphabet is valid."""
        assert is_modhex("cbdefghijklnrtuv") is True

    def test_invalid(self):
        """Test hex digits and other characters are invalid."""
        assert is_modhex("0123Xabc") is False

    def test_empty(self):
        """Test empty string is valid."""
        assert is_modhex("") is True

    def test_odd_length_still_valid(self):
        """Test validity is a per-character check only."""
        assert is_modhex("cbd") is True


class TestHexTranslation:
    """Tests for hex/modhex text translation."""

    def test_hex_to_modhex(self):
        """Test hex text translates to modhex."""
        assert hex_to_modhex("8792EBFE26CC") == "jikdunvudhrr"

    def test_modhex_to_hex(self):
        """Test modhex text translates to hex."""
        assert modhex_to_hex("jikdunvudhrr") == "8792ebfe26cc"

    @pytest.mark.parametrize("text", ["zz!", "0x12", "12 34"])
    def test_hex_to_modhex_rejects_non_hex(self, text):
        """Test non-hex characters are rejected rather than passed through."""
        with pytest.raises(InvalidEncoding):
            hex_to_modhex(text)

    @pytest.mark.parametrize("text", ["xyz0", "0123", "CB"])
    def test_modhex_to_hex_rejects_non_modhex(self, text):
        """Test non-modhex characters are rejected rather than passed through."""
        with pytest.raises(InvalidEncoding):
            modhex_to_hex(text)

    def test_empty(self):
        """Test empty strings translate to empty strings."""
        assert hex_to_modhex("") == ""
        assert modhex_to_hex("") == ""
