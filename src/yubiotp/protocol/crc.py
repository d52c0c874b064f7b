"""CRC-16 calculation for OTP tokens."""

from yubiotp.protocol.constants import CRC16_INIT, CRC16_POLY, CRC16_RESIDUE


def calculate_crc16(data: bytes) -> int:
    """
    Calculate CRC-16 as computed by the token firmware.

    Reflected CRC-16 (ISO 13239 / X.25 polynomial):
    - Register starts at 0xFFFF
    - Bits are processed LSB first, polynomial 0x8408
    - No final complement is applied

    Args:
        data: Bytes to calculate CRC over

    Returns:
        16-bit CRC value

    Example:
        >>> calculate_crc16(b"")
        65535
    """
    crc = CRC16_INIT

    for byte in data:
        crc ^= byte
        for _ in range(8):
            lsb = crc & 1
            crc >>= 1
            if lsb:
                crc ^= CRC16_POLY

    return crc


def verify_crc16(data: bytes) -> bool:
    """
    Verify a buffer that ends with its own stored CRC.

    The stored CRC is the ones' complement of the CRC over the preceding
    bytes, little-endian. Running the CRC over the whole buffer, stored
    CRC included, then leaves the fixed residue 0xF0B8.

    Args:
        data: Bytes including the trailing 2-byte CRC

    Returns:
        True if CRC matches, False otherwise
    """
    return calculate_crc16(data) == CRC16_RESIDUE
