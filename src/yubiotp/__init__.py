"""YubiKey-style OTP token encoding and decoding."""

__version__ = "0.1.0"
