"""OTP token protocol implementation."""

from yubiotp.protocol.cipher import decrypt_block, encrypt_block
from yubiotp.protocol.constants import (
    CRC16_RESIDUE,
    IDENTIFIER_LEN,
    KEY_LEN,
    MODHEX_ALPHABET,
    OTP_LEN,
    TOKEN_LEN,
)
from yubiotp.protocol.crc import calculate_crc16, verify_crc16
from yubiotp.protocol.exceptions import (
    ChecksumMismatch,
    InvalidEncoding,
    InvalidKey,
    MalformedInput,
    OTPError,
)
from yubiotp.protocol.modhex import hex_to_modhex, is_modhex, modhex_decode, modhex_encode, modhex_to_hex
from yubiotp.protocol.otp import generate_otp, parse_otp, split_otp
from yubiotp.protocol.token import Token

__all__ = [
    "Token",
    "generate_otp",
    "parse_otp",
    "split_otp",
    "encrypt_block",
    "decrypt_block",
    "calculate_crc16",
    "verify_crc16",
    "modhex_encode",
    "modhex_decode",
    "is_modhex",
    "hex_to_modhex",
    "modhex_to_hex",
    "OTPError",
    "InvalidEncoding",
    "MalformedInput",
    "ChecksumMismatch",
    "InvalidKey",
    "CRC16_RESIDUE",
    "IDENTIFIER_LEN",
    "KEY_LEN",
    "MODHEX_ALPHABET",
    "OTP_LEN",
    "TOKEN_LEN",
]
