"""Errors raised while encoding or decoding OTP tokens."""


class OTPError(ValueError):
    """Base class for all OTP encoding and decoding errors."""


class InvalidEncoding(OTPError):
    """Input text is not modhex or has the wrong length."""


class MalformedInput(OTPError):
    """Binary token buffer or token fields are malformed."""


class ChecksumMismatch(OTPError):
    """Decoded token failed CRC-16 verification."""


class InvalidKey(OTPError):
    """Secret key is not a 16-byte AES-128 key."""
