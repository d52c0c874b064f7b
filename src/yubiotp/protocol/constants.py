"""Protocol constants for OTP tokens."""

import struct

# ============================================================================
# ModHex
# ============================================================================

MODHEX_ALPHABET = "cbdefghijklnrtuv"
HEX_ALPHABET = "0123456789abcdef"

# ============================================================================
# Token Layout
# ============================================================================

IDENTIFIER_LEN = 6
TOKEN_LEN = 16
KEY_LEN = 16
OTP_LEN = 2 * TOKEN_LEN  # 32 modhex characters

# identifier(6) counter(2) tstp_low(2) tstp_high(1) session_use(1) random(2) crc(2)
TOKEN_STRUCT = struct.Struct("<6sHHBBHH")
CRC_OFFSET = 14

# ============================================================================
# Counter Flags
# ============================================================================

CAPSLOCK_FLAG = 0x8000
COUNTER_MASK = 0x7FFF

# ============================================================================
# CRC-16
# ============================================================================

CRC16_INIT = 0xFFFF
CRC16_POLY = 0x8408
CRC16_RESIDUE = 0xF0B8
