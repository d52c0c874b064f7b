"""OTP generation and parsing.

Generation: Token -> 16-byte layout -> AES-128 encrypt -> modhex (32 chars).
Parsing reverses the pipeline and verifies the CRC-16 of the decrypted block.
"""

from yubiotp.protocol.cipher import decrypt_block, encrypt_block
from yubiotp.protocol.constants import OTP_LEN
from yubiotp.protocol.crc import verify_crc16
from yubiotp.protocol.exceptions import ChecksumMismatch, InvalidEncoding
from yubiotp.protocol.modhex import is_modhex, modhex_decode, modhex_encode
from yubiotp.protocol.token import Token


def generate_otp(token: Token, key: bytes) -> str:
    """
    Encrypt a token under key and encode it as modhex.

    Deterministic: the same token and key always give the same OTP.

    Args:
        token: Token to encode
        key: 16-byte secret key

    Returns:
        32-character modhex OTP

    Raises:
        InvalidKey: If key is not 16 bytes
    """
    return modhex_encode(encrypt_block(key, token.to_bytes()))


def parse_otp(otp: str, key: bytes) -> Token:
    """
    Decode and decrypt a 32-character OTP back into a Token.

    Args:
        otp: 32-character modhex OTP
        key: 16-byte secret key

    Returns:
        Decoded Token

    Raises:
        InvalidEncoding: If otp is not 32 modhex characters
        InvalidKey: If key is not 16 bytes
        ChecksumMismatch: If the decrypted token fails CRC verification
    """
    if len(otp) != OTP_LEN:
        raise InvalidEncoding(f"OTP must be {OTP_LEN} characters, got {len(otp)}")

    plaintext = decrypt_block(key, modhex_decode(otp))

    if not verify_crc16(plaintext):
        raise ChecksumMismatch("Token CRC-16 verification failed (wrong key or corrupted OTP)")

    return Token.from_bytes(plaintext)


def split_otp(text: str) -> tuple[bytes, str]:
    """
    Split a typed OTP into its public identifier and encrypted part.

    Devices usually prefix the 32-character encrypted part with a modhex
    public identifier. The prefix may be empty.

    Args:
        text: Full OTP as typed by the device

    Returns:
        Tuple of (decoded public identifier, 32-character OTP)

    Raises:
        InvalidEncoding: If text is shorter than 32 characters or not modhex

    Example:
        >>> split_otp("ccccccjlkgjkdcflcindvdbrblehecuitvjkjevvehjd")[0].hex()
        '0000008a9589'
    """
    if len(text) < OTP_LEN:
        raise InvalidEncoding(f"OTP must be at least {OTP_LEN} characters, got {len(text)}")

    if not is_modhex(text):
        raise InvalidEncoding("OTP contains non-modhex characters")

    prefix, otp = text[:-OTP_LEN], text[-OTP_LEN:]
    return modhex_decode(prefix), otp
