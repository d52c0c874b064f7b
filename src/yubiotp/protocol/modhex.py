"""ModHex encoding and decoding.

ModHex replaces the hexadecimal digits with characters that sit on the
same keys across most keyboard layouts, so a device typing them as a USB
keyboard produces the same text everywhere.
"""

from yubiotp.protocol.constants import HEX_ALPHABET, MODHEX_ALPHABET
from yubiotp.protocol.exceptions import InvalidEncoding

_MODHEX_INDEX = {c: i for i, c in enumerate(MODHEX_ALPHABET)}
_TO_MODHEX = str.maketrans(HEX_ALPHABET, MODHEX_ALPHABET)
_FROM_MODHEX = str.maketrans(MODHEX_ALPHABET, HEX_ALPHABET)


def modhex_encode(data: bytes) -> str:
    """
    Encode bytes as modhex text.

    Each byte produces two characters, high nibble first.

    Args:
        data: Bytes to encode

    Returns:
        Modhex string of length 2 * len(data)

    Example:
        >>> modhex_encode(b"test")
        'ifhgieif'
    """
    return "".join(MODHEX_ALPHABET[b >> 4] + MODHEX_ALPHABET[b & 0x0F] for b in data)


def modhex_decode(text: str) -> bytes:
    """
    Decode modhex text to bytes.

    Args:
        text: Modhex string (even length)

    Returns:
        Decoded bytes

    Raises:
        InvalidEncoding: If text has odd length or contains non-modhex characters

    Example:
        >>> modhex_decode("ifhgieif")
        b'test'
    """
    if len(text) % 2:
        raise InvalidEncoding(f"Modhex string has odd length: {len(text)}")

    out = bytearray()
    for i in range(0, len(text), 2):
        try:
            high = _MODHEX_INDEX[text[i]]
            low = _MODHEX_INDEX[text[i + 1]]
        except KeyError as e:
            raise InvalidEncoding(f"Invalid modhex character: {e.args[0]!r}") from None
        out.append((high << 4) | low)

    return bytes(out)


def is_modhex(text: str) -> bool:
    """Return True if every character of text is in the modhex alphabet."""
    return all(c in _MODHEX_INDEX for c in text)


def hex_to_modhex(text: str) -> str:
    """
    Translate a hexadecimal string to modhex.

    Raises:
        InvalidEncoding: If text contains non-hex characters
    """
    text = text.lower()
    if not all(c in HEX_ALPHABET for c in text):
        raise InvalidEncoding(f"Invalid hex string: {text!r}")
    return text.translate(_TO_MODHEX)


def modhex_to_hex(text: str) -> str:
    """
    Translate a modhex string to hexadecimal.

    Raises:
        InvalidEncoding: If text contains non-modhex characters
    """
    if not is_modhex(text):
        raise InvalidEncoding(f"Invalid modhex string: {text!r}")
    return text.translate(_FROM_MODHEX)
